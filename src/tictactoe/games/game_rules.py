"""
Grid utilities for the board.

All helpers take N from the board's shape; only make_board() names a size.
"""

from __future__ import annotations

import functools
from typing import List, Sequence, Tuple

import numpy as np

from tictactoe.core.types import BOARD_DTYPE, BOARD_SIZE, Mark

Cell = Tuple[int, int]  # (y, x) == (row, col)


def make_board(n: int = BOARD_SIZE) -> np.ndarray:
    """Return an empty n x n board."""
    return np.full((n, n), Mark.EMPTY, dtype=BOARD_DTYPE)


def copy_board(board: np.ndarray) -> np.ndarray:
    """Deep copy; the result shares no memory with `board`."""
    return np.array(board, dtype=BOARD_DTYPE, copy=True)


def in_bounds(board: np.ndarray, x: int, y: int) -> bool:
    """Return True if column x, row y is inside the board."""
    rows, cols = board.shape
    return 0 <= y < rows and 0 <= x < cols


def all_equal(line: Sequence[int]) -> bool:
    """
    Return True if:
    - line is nonempty
    - first value is not EMPTY
    - all values equal the first
    """
    if len(line) == 0:
        return False

    first = line[0]
    if first == Mark.EMPTY:
        return False

    return all(v == first for v in line)


@functools.lru_cache(maxsize=None)
def scan_lines(n: int) -> Tuple[Tuple[Cell, ...], ...]:
    """
    Every winning line of an n x n board, in the order they are checked:

        main diagonal, anti-diagonal, then for each column j left to right,
        column j followed by row j.

    The order is part of the contract: when several lines are complete at
    once, the first one here is the one reported.
    """
    lines: List[Tuple[Cell, ...]] = [
        tuple((i, i) for i in range(n)),
        tuple((n - 1 - i, i) for i in range(n)),
    ]
    for j in range(n):
        lines.append(tuple((i, j) for i in range(n)))
        lines.append(tuple((j, i) for i in range(n)))
    return tuple(lines)


def count_marks(board: np.ndarray) -> int:
    """Number of non-empty cells."""
    return int(np.count_nonzero(board != Mark.EMPTY))


def empty_cells(board: np.ndarray) -> np.ndarray:
    """Empty positions as (y, x) rows, in row-major order."""
    return np.argwhere(board == Mark.EMPTY)


def is_valid_mark(value: int) -> bool:
    return value in Mark._value2member_map_
