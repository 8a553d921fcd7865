"""Game engine module for Unblock."""

from unblock.game.blocks import GRID_SIZE, Block, Cell, Exit, Orientation, in_bounds
from unblock.game.board import Board
from unblock.game.level import Level
from unblock.game.moves import (
    MoveError,
    UnknownBlockError,
    attempt_move,
    axis_steps,
    free_cells,
)
from unblock.game.win import is_complete

__all__ = [
    # Blocks
    "Block",
    "Cell",
    "Exit",
    "Orientation",
    "GRID_SIZE",
    "in_bounds",
    # Level
    "Level",
    # Board
    "Board",
    # Moves
    "attempt_move",
    "axis_steps",
    "free_cells",
    "MoveError",
    "UnknownBlockError",
    # Win
    "is_complete",
]
