"""Level completion check."""

from unblock.game.board import Board


def is_complete(board: Board) -> bool:
    """Check if the player block sits exactly on the exit cells."""
    return set(board.player.cells) == set(board.exit.cells)
