"""Tests for board representation."""

import pytest

from unblock.game.blocks import Block, Exit, Orientation
from unblock.game.board import Board


class TestBlock:
    """Tests for the Block dataclass."""

    def test_create_horizontal(self):
        """Test creating a horizontal block from its left cell."""
        block = Block.create(1, Orientation.HORIZONTAL, 2, 1, 3)

        assert block.cells == ((2, 1), (2, 2), (2, 3))
        assert block.length == 3
        assert block.head == (2, 1)
        assert block.tail == (2, 3)
        assert block.is_player is False

    def test_create_vertical(self):
        """Test creating a vertical block from its top cell."""
        block = Block.create(2, Orientation.VERTICAL, 0, 4, 2, is_player=True)

        assert block.cells == ((0, 4), (1, 4))
        assert block.is_player is True

    def test_shifted(self):
        """Test shifting returns a moved copy."""
        block = Block.create(1, Orientation.VERTICAL, 1, 0, 2)
        moved = block.shifted(-1)

        assert moved.cells == ((0, 0), (1, 0))
        assert block.cells == ((1, 0), (2, 0))
        assert moved.id == block.id


class TestExit:
    """Tests for exit construction."""

    def test_exit_sides(self):
        """Test goal cells for an exit on each wall."""
        assert Exit.from_marker(2, 6).cells == ((2, 4), (2, 5))
        assert Exit.from_marker(2, -1).cells == ((2, 0), (2, 1))
        assert Exit.from_marker(-1, 3).cells == ((0, 3), (1, 3))
        assert Exit.from_marker(6, 3).cells == ((4, 3), (5, 3))

    def test_exit_orientation(self):
        """Test the exit axis follows the wall it is on."""
        assert Exit.from_marker(0, 6).orientation == Orientation.HORIZONTAL
        assert Exit.from_marker(6, 0).orientation == Orientation.VERTICAL

    @pytest.mark.parametrize("marker", [(-1, -1), (6, 6), (-1, 6), (2, 3), (7, 2)])
    def test_invalid_markers(self, marker):
        """Test corners, interior and far-off cells are rejected."""
        with pytest.raises(ValueError):
            Exit.from_marker(*marker)

    def test_reachable_by(self):
        """Test reachability needs the same axis and line."""
        level_exit = Exit.from_marker(2, 6)

        assert level_exit.is_reachable_by(Block.create(1, Orientation.HORIZONTAL, 2, 0, 2))
        assert not level_exit.is_reachable_by(Block.create(1, Orientation.HORIZONTAL, 3, 0, 2))
        assert not level_exit.is_reachable_by(Block.create(1, Orientation.VERTICAL, 1, 4, 2))


class TestBoard:
    """Tests for the Board class."""

    def test_from_level(self, classic_level):
        """Test building a board places every block."""
        board = Board.from_level(classic_level)

        assert len(board.blocks) == 8
        assert board.player.cells == ((2, 0), (2, 1))
        for block in classic_level.blocks:
            for row, col in block.cells:
                assert board.grid[row][col] == block.id

    def test_empty_cells(self, classic_level):
        """Test unoccupied cells are free."""
        board = Board.from_level(classic_level)

        assert board.is_free(0, 3)
        assert not board.is_free(0, 0)
        # Off the board is never free
        assert not board.is_free(-1, 0)
        assert not board.is_free(2, 6)

    def test_from_level_is_deterministic(self, classic_level):
        """Test rebuilding from the same level gives the same board."""
        first = Board.from_level(classic_level)
        second = Board.from_level(classic_level)

        assert first.grid == second.grid
        assert first.blocks == second.blocks

    def test_get_block(self, classic_level):
        """Test finding blocks by id and by cell."""
        board = Board.from_level(classic_level)

        assert board.get_block(4).is_player
        assert board.get_block(99) is None
        assert board.get_block_at(1, 2).id == 3
        assert board.get_block_at(0, 3) is None
        assert board.get_block_at(10, 10) is None

    def test_copy_is_independent(self, open_row_level):
        """Test that changes to a copy do not leak into the original."""
        board = Board.from_level(open_row_level)
        copy = board.copy()

        copy.replace_block(copy.player.shifted(2))

        assert board.player.cells == ((2, 0), (2, 1))
        assert board.grid[2][0] == board.player.id
        assert copy.player.cells == ((2, 2), (2, 3))
        assert copy.grid[2][0] is None

    def test_replace_block_rejects_overlap(self, blocked_row_level):
        """Test that moving a block onto another leaves the board unchanged."""
        board = Board.from_level(blocked_row_level)
        player = board.player
        before = [list(row) for row in board.grid]

        with pytest.raises(ValueError, match="overlaps"):
            board.replace_block(player.shifted(2))

        # Grid cells are only written once the whole block fits
        assert board.grid[2][0] == player.id
        assert board.grid[2][2] is None
        assert board.grid[2][3] == before[2][3]

    def test_level_not_mutated(self, open_row_level):
        """Test that board changes never touch the level."""
        board = Board.from_level(open_row_level)
        board.replace_block(board.player.shifted(4))

        assert open_row_level.player.cells == ((2, 0), (2, 1))
