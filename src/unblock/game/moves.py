"""Move validation and application for Unblock.

Blocks slide along their own axis only. A requested slide is clamped to the
free space in front of the block instead of being rejected, so asking for 5
steps when only 1 cell is free moves the block 1 cell.
"""

import logging

from unblock.game.blocks import Orientation
from unblock.game.board import Board

logger = logging.getLogger(__name__)


class MoveError(Exception):
    """Base class for rejected move requests."""


class UnknownBlockError(MoveError):
    """Raised when a move names a block that is not on the board."""

    def __init__(self, block_id: int) -> None:
        self.block_id = block_id
        super().__init__(f"Unknown block: {block_id}")


def free_cells(board: Board, block_id: int, direction: int, limit: int | None = None) -> int:
    """Count free cells in front of a block.

    Walks outward from the block's leading edge one cell at a time and stops
    at the edge of the interior, at a cell held by another block, or after
    `limit` cells.

    Args:
        board: Current board state
        block_id: ID of the block to look ahead of
        direction: +1 (down/right) or -1 (up/left)
        limit: Maximum number of cells to scan (unbounded when None)

    Returns:
        Number of cells the block could slide in that direction

    Raises:
        UnknownBlockError: If the block is not on the board
        ValueError: If direction is not +1 or -1
    """
    block = board.get_block(block_id)
    if block is None:
        raise UnknownBlockError(block_id)
    if direction not in (1, -1):
        raise ValueError(f"Direction must be +1 or -1, got {direction}")

    d_row, d_col = block.orientation.delta
    d_row *= direction
    d_col *= direction
    row, col = block.tail if direction > 0 else block.head

    count = 0
    while limit is None or count < limit:
        row += d_row
        col += d_col
        if not board.is_free(row, col):
            break
        count += 1
    return count


def attempt_move(board: Board, block_id: int, steps: int) -> tuple[Board, int]:
    """Slide a block as far as possible, up to `steps` cells. Mutates board in place.

    The sign of `steps` selects the direction along the block's axis
    (positive is down for vertical blocks, right for horizontal ones).

    Args:
        board: Board state (will be mutated)
        block_id: ID of the block to move
        steps: Requested signed displacement in cells

    Returns:
        Tuple of (board, actual signed displacement)

    Raises:
        UnknownBlockError: If the block is not on the board
        TypeError: If steps is not an integer
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise TypeError(f"Step count must be an int, got {type(steps).__name__}")

    block = board.get_block(block_id)
    if block is None:
        raise UnknownBlockError(block_id)

    if steps == 0:
        return board, 0

    direction = 1 if steps > 0 else -1
    distance = free_cells(board, block_id, direction, limit=abs(steps))
    if distance == 0:
        logger.debug(f"Block {block_id} is blocked moving {steps:+d}")
        return board, 0

    displacement = distance * direction
    board.replace_block(block.shifted(displacement))
    logger.debug(f"Block {block_id} moved {displacement:+d} (requested {steps:+d})")
    return board, displacement


def axis_steps(orientation: Orientation, d_row: int, d_col: int) -> int:
    """Project a drag delta onto a block's axis.

    Hosts turn pointer drags into (row, col) cell deltas; only the component
    along the block's axis is meaningful.

    Raises:
        ValueError: If the delta has a component off the block's axis
    """
    if orientation == Orientation.HORIZONTAL:
        if d_row != 0:
            raise ValueError(f"Horizontal block cannot move {d_row} rows")
        return d_col
    if d_col != 0:
        raise ValueError(f"Vertical block cannot move {d_col} columns")
    return d_row
