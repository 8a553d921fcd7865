"""Immutable level definition."""

from dataclasses import dataclass

from unblock.game.blocks import Block, Exit


@dataclass(frozen=True)
class Level:
    """A parsed puzzle level.

    Levels are never mutated. Boards are built from them and rebuilt to reset.

    Attributes:
        blocks: All blocks in id order
        exit: The exit the player block has to reach
        index: 0-based position of the level in its source file
        source: Name of the file (or other source) the level came from
    """

    blocks: tuple[Block, ...]
    exit: Exit
    index: int = 0
    source: str = "<levels>"

    @property
    def player(self) -> Block:
        """The player block."""
        for block in self.blocks:
            if block.is_player:
                return block
        raise ValueError(f"Level {self.index} has no player block")
