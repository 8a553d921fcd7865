"""Unblock: a sliding block puzzle.

Blocks on a 6x6 grid slide along their own axis; the goal is to get the
player block to the exit in the surrounding wall.
"""

from unblock.game import Block, Board, Exit, Level, Orientation, attempt_move, is_complete
from unblock.levels import LevelSequencer, ParseError, parse_levels
from unblock.session import BoardSnapshot, GameSession, MoveOutcome

__all__ = [
    "Block",
    "Board",
    "Exit",
    "Level",
    "Orientation",
    "attempt_move",
    "is_complete",
    "LevelSequencer",
    "ParseError",
    "parse_levels",
    "BoardSnapshot",
    "GameSession",
    "MoveOutcome",
]
