"""Ordered level collection with a current position."""

import logging
from collections.abc import Sequence

from unblock.game.board import Board
from unblock.game.level import Level

logger = logging.getLogger(__name__)


class LevelSequencer:
    """Walks through a fixed list of levels, owning the board for the current one.

    The level list never changes after construction and `current_index` is
    always in range, so none of the navigation methods can fail.

    Attributes:
        levels: All levels, in play order
        wrap: Wrap around at either end instead of stopping
        current_index: Index of the level being played
        board: Live board for the current level
    """

    def __init__(self, levels: Sequence[Level], wrap: bool = False) -> None:
        """Initialize the sequencer at the first level.

        Args:
            levels: Levels in play order
            wrap: Whether advance/retreat wrap around at the ends

        Raises:
            ValueError: If there are no levels
        """
        if not levels:
            raise ValueError("At least one level is required")
        self.levels: tuple[Level, ...] = tuple(levels)
        self.wrap = wrap
        self.current_index = 0
        self.board = Board.from_level(self.levels[0])

    def __len__(self) -> int:
        return len(self.levels)

    @property
    def current_level(self) -> Level:
        return self.levels[self.current_index]

    @property
    def is_last(self) -> bool:
        return self.current_index == len(self.levels) - 1

    def reset_current(self) -> Board:
        """Throw away all moves on the current level."""
        self.board = Board.from_level(self.current_level)
        return self.board

    def advance(self) -> Board:
        """Move to the next level (saturating or wrapping at the end)."""
        index = self.current_index + 1
        if index >= len(self.levels):
            index = 0 if self.wrap else len(self.levels) - 1
        return self._switch_to(index)

    def retreat(self) -> Board:
        """Move to the previous level (saturating or wrapping at the start)."""
        index = self.current_index - 1
        if index < 0:
            index = len(self.levels) - 1 if self.wrap else 0
        return self._switch_to(index)

    def goto(self, index: int) -> Board:
        """Jump to a level by index.

        Raises:
            IndexError: If the index is out of range
        """
        if not 0 <= index < len(self.levels):
            raise IndexError(f"Level {index} out of range (0-{len(self.levels) - 1})")
        return self._switch_to(index)

    def _switch_to(self, index: int) -> Board:
        if index != self.current_index:
            logger.info(f"Switching from level {self.current_index} to level {index}")
        self.current_index = index
        return self.reset_current()
