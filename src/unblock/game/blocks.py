"""Block and exit definitions for Unblock."""

from dataclasses import dataclass, replace
from enum import Enum

# Playable interior is always 6x6. The wall ring sits at -1 and GRID_SIZE.
GRID_SIZE = 6

Cell = tuple[int, int]


class Orientation(Enum):
    """Axis a block slides along."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def delta(self) -> Cell:
        """(row_delta, col_delta) of one step in the positive direction."""
        if self is Orientation.HORIZONTAL:
            return (0, 1)
        return (1, 0)


def in_bounds(row: int, col: int) -> bool:
    """Check if a cell lies inside the playable interior."""
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


@dataclass(frozen=True)
class Block:
    """A rigid block on the board.

    Attributes:
        id: Stable identifier, unique within a level
        orientation: Axis the block slides along
        cells: Occupied (row, col) cells in ascending order along the axis
        is_player: True for the block that has to reach the exit
    """

    id: int
    orientation: Orientation
    cells: tuple[Cell, ...]
    is_player: bool = False

    @classmethod
    def create(
        cls,
        block_id: int,
        orientation: Orientation,
        row: int,
        col: int,
        length: int,
        is_player: bool = False,
    ) -> "Block":
        """Create a block from its top-left cell and length."""
        d_row, d_col = orientation.delta
        cells = tuple((row + d_row * i, col + d_col * i) for i in range(length))
        return cls(id=block_id, orientation=orientation, cells=cells, is_player=is_player)

    @property
    def length(self) -> int:
        return len(self.cells)

    @property
    def head(self) -> Cell:
        """First cell (top or left end)."""
        return self.cells[0]

    @property
    def tail(self) -> Cell:
        """Last cell (bottom or right end)."""
        return self.cells[-1]

    def shifted(self, displacement: int) -> "Block":
        """Return a copy of this block moved `displacement` cells along its axis."""
        d_row, d_col = self.orientation.delta
        cells = tuple(
            (row + d_row * displacement, col + d_col * displacement) for row, col in self.cells
        )
        return replace(self, cells=cells)


@dataclass(frozen=True)
class Exit:
    """The exit in the wall ring.

    Attributes:
        marker: (row, col) of the exit gap in the wall ring (row or col is -1 or 6)
        cells: The two interior cells flush with the gap; the player wins by
               occupying exactly these cells
        orientation: Axis leading into the exit (matches the player's)
    """

    marker: Cell
    cells: tuple[Cell, Cell]
    orientation: Orientation

    @classmethod
    def from_marker(cls, row: int, col: int) -> "Exit":
        """Build an exit from its position in the wall ring.

        Raises:
            ValueError: If the marker is not on a non-corner ring cell
        """
        last = GRID_SIZE
        on_row_edge = row in (-1, last) and 0 <= col < last
        on_col_edge = col in (-1, last) and 0 <= row < last
        if not (on_row_edge or on_col_edge):
            raise ValueError(f"Exit marker at {(row, col)} is not on the wall ring")

        if on_col_edge:
            inner = 0 if col == -1 else last - 1
            step = 1 if col == -1 else -1
            cells = sorted([(row, inner), (row, inner + step)])
            return cls(marker=(row, col), cells=tuple(cells), orientation=Orientation.HORIZONTAL)

        inner = 0 if row == -1 else last - 1
        step = 1 if row == -1 else -1
        cells = sorted([(inner, col), (inner + step, col)])
        return cls(marker=(row, col), cells=tuple(cells), orientation=Orientation.VERTICAL)

    def is_reachable_by(self, block: Block) -> bool:
        """Check if a block can slide into the exit along its own axis."""
        if block.orientation != self.orientation:
            return False
        if self.orientation == Orientation.HORIZONTAL:
            return block.head[0] == self.marker[0]
        return block.head[1] == self.marker[1]
