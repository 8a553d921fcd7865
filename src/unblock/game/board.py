"""Board representation for Unblock."""

from dataclasses import dataclass, field

from unblock.game.blocks import GRID_SIZE, Block, Exit, in_bounds
from unblock.game.level import Level


def _empty_grid() -> list[list[int | None]]:
    return [[None] * GRID_SIZE for _ in range(GRID_SIZE)]


@dataclass
class Board:
    """Live puzzle state for one play of a level.

    The occupancy grid and the block map are always kept in sync: every cell
    of every block holds that block's id, and every other cell holds None.

    Attributes:
        level: The level this board was built from (never mutated)
        blocks: Map of block id to its current position
        grid: 6x6 occupancy grid of block ids, indexed [row][col]
    """

    level: Level
    blocks: dict[int, Block] = field(default_factory=dict)
    grid: list[list[int | None]] = field(default_factory=_empty_grid)

    @classmethod
    def from_level(cls, level: Level) -> "Board":
        """Create a fresh board with every block at its starting position."""
        board = cls(level=level)
        for block in level.blocks:
            board._place(block)
        return board

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        return Board(
            level=self.level,
            blocks=dict(self.blocks),
            grid=[list(row) for row in self.grid],
        )

    @property
    def exit(self) -> Exit:
        return self.level.exit

    @property
    def player(self) -> Block:
        """Get the player block at its current position."""
        return self.blocks[self.level.player.id]

    def get_block(self, block_id: int) -> Block | None:
        """Get a block by its ID."""
        return self.blocks.get(block_id)

    def get_block_at(self, row: int, col: int) -> Block | None:
        """Get the block covering a cell, if any."""
        if not in_bounds(row, col):
            return None
        block_id = self.grid[row][col]
        if block_id is None:
            return None
        return self.blocks[block_id]

    def is_free(self, row: int, col: int) -> bool:
        """Check if a cell is inside the interior and unoccupied."""
        return in_bounds(row, col) and self.grid[row][col] is None

    def replace_block(self, block: Block) -> None:
        """Swap a block's stored position for a new one.

        The new position must only cover cells that are free or already held
        by the same block.
        """
        old = self.blocks[block.id]
        self._check_fits(block)
        for row, col in old.cells:
            self.grid[row][col] = None
        self._place(block)

    def _check_fits(self, block: Block) -> None:
        for row, col in block.cells:
            if not in_bounds(row, col):
                raise ValueError(f"Block {block.id} cell {(row, col)} is off the board")
            occupant = self.grid[row][col]
            if occupant is not None and occupant != block.id:
                raise ValueError(f"Block {block.id} overlaps block {occupant} at {(row, col)}")

    def _place(self, block: Block) -> None:
        self._check_fits(block)
        for row, col in block.cells:
            self.grid[row][col] = block.id
        self.blocks[block.id] = block
