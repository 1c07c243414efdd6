"""
GameState - board plus turn counter.

Optimized for fast copying: the search clones a state per candidate move.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from tictactoe.core.errors import BoardFormatError
from tictactoe.core.types import BOARD_DTYPE, Mark
from tictactoe.games.game_rules import copy_board, count_marks, is_valid_mark

Grid = Union[np.ndarray, Sequence[Sequence[int]]]


class GameState:
    """
    Lightweight game state container.

    Uses an int8 board holding Mark values, indexed board[y, x]:
        0  = empty
        88 = X (first mover)
        48 = 0 (second mover)

    `turn` is 1-based: 1 before any move, +1 per placed mark. Odd turns
    belong to X, even turns to 0.
    """
    __slots__ = ('board', 'turn')

    def __init__(self, board: np.ndarray, turn: int = 1):
        self.board = board
        self.turn = turn

    @classmethod
    def from_board(cls, grid: Grid) -> "GameState":
        """
        Build a state from a raw N x N grid of mark values.

        The grid is copied. Turn is derived from the number of marks on it;
        nothing else about whose move it is gets trusted from the input.

        Raises:
            BoardFormatError: if the grid is not square or holds a value that
                is not a mark.
        """
        try:
            board = np.asarray(grid)
        except (TypeError, ValueError, OverflowError) as e:
            raise BoardFormatError(f"Board is not a grid of integers: {e}") from e

        if board.ndim != 2 or board.shape[0] != board.shape[1] or board.size == 0:
            raise BoardFormatError(f"Board must be a non-empty square grid, got shape {board.shape}")

        # Ints too large for int64 come back as object arrays; floats and bools
        # are rejected rather than truncated.
        if not np.issubdtype(board.dtype, np.integer):
            raise BoardFormatError(f"Board cells must be integers, got {board.dtype}")

        bad = [int(v) for v in board.flat if not is_valid_mark(int(v))]
        if bad:
            raise BoardFormatError(f"Invalid mark value(s): {sorted(set(bad))}")

        board = copy_board(board.astype(BOARD_DTYPE))
        return cls(board, turn=count_marks(board) + 1)

    @property
    def size(self) -> int:
        return self.board.shape[0]

    def current_mark(self) -> Mark:
        """Mark of the player to move."""
        return Mark.CROSS if self.turn % 2 == 1 else Mark.NAUGHT

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(self.board.copy(), self.turn)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.turn == other.turn and np.array_equal(self.board, other.board)

    def __repr__(self) -> str:
        return f"GameState(board={self.board.tolist()}, turn={self.turn})"
