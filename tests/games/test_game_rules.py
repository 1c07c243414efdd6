"""
Tests for tictactoe.games.game_rules
"""

import numpy as np
import pytest

from tictactoe.core.types import Mark
from tictactoe.games.game_rules import (
    all_equal,
    copy_board,
    count_marks,
    empty_cells,
    in_bounds,
    is_valid_mark,
    make_board,
    scan_lines,
)

X = int(Mark.CROSS)
O = int(Mark.NAUGHT)
_ = int(Mark.EMPTY)


class TestMakeAndCopy:

    def test_make_board(self):
        board = make_board()
        assert board.shape == (3, 3)
        assert board.dtype == np.int8
        assert np.all(board == _)

    def test_copy_shares_no_memory(self):
        board = make_board()
        clone = copy_board(board)
        clone[1, 1] = X

        assert board[1, 1] == _
        assert not np.shares_memory(board, clone)


class TestInBounds:

    @pytest.mark.parametrize("x,y,expected", [
        (0, 0, True), (2, 2, True), (2, 0, True),
        (3, 0, False), (0, 3, False), (-1, 1, False), (1, -1, False),
    ])
    def test_in_bounds(self, x, y, expected):
        assert in_bounds(make_board(3), x, y) is expected


class TestAllEqual:

    def test_empty_line(self):
        assert all_equal([]) is False

    def test_empty_cells_never_match(self):
        assert all_equal([_, _, _]) is False

    def test_same_marks(self):
        assert all_equal([O, O, O]) is True

    def test_mixed_marks(self):
        assert all_equal([X, X, O]) is False


class TestScanLines:
    """Line order is what decides which of several lines is reported."""

    def test_count(self):
        assert len(scan_lines(3)) == 8
        assert len(scan_lines(4)) == 10

    def test_order(self):
        lines = scan_lines(3)
        assert lines[0] == ((0, 0), (1, 1), (2, 2))
        assert lines[1] == ((2, 0), (1, 1), (0, 2))
        assert lines[2] == ((0, 0), (1, 0), (2, 0))  # column 0
        assert lines[3] == ((0, 0), (0, 1), (0, 2))  # row 0
        assert lines[-1] == ((2, 0), (2, 1), (2, 2))  # row 2


class TestCounting:

    def test_count_marks(self):
        board = make_board()
        board[0, 0] = X
        board[2, 1] = O
        assert count_marks(board) == 2

    def test_empty_cells_row_major(self):
        board = make_board()
        board[0, 1] = X
        cells = [tuple(c) for c in empty_cells(board)]
        assert cells[:3] == [(0, 0), (0, 2), (1, 0)]
        assert len(cells) == 8

    def test_is_valid_mark(self):
        assert all(is_valid_mark(v) for v in (_, X, O))
        assert not is_valid_mark(1)
