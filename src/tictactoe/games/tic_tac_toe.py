"""
TicTacToe rules: placing marks and detecting the end of the game.

Coordinates are (x, y) = (column, row) and address board[y, x].
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from tictactoe.core.errors import CellOccupiedError, OutOfBoundsError
from tictactoe.core.types import Mark, Result
from tictactoe.games.game_rules import all_equal, empty_cells, in_bounds, make_board, scan_lines
from tictactoe.games.game_state import GameState

_EMPTY = int(Mark.EMPTY)


def place_mark(state: GameState, x: int, y: int) -> None:
    """
    Write the current mover's mark at (x, y) and advance the turn.

    Raises:
        OutOfBoundsError: x or y outside [0, N).
        CellOccupiedError: the cell is not empty.

    On error the state is left untouched.
    """
    x, y = int(x), int(y)
    board = state.board

    if not in_bounds(board, x, y):
        raise OutOfBoundsError(f"Invalid coordinate ({x},{y})", x, y)
    if board[y, x] != Mark.EMPTY:
        raise CellOccupiedError(f"Cell ({x},{y}) is occupied", x, y)

    board[y, x] = state.current_mark()
    state.turn += 1


def evaluate(state: GameState) -> Tuple[Result, Optional[np.ndarray]]:
    """
    Compute the result of the board from scratch.

    Lines are checked in scan_lines() order and the first complete one is
    the only one reported, even if the board holds several. The returned grid
    keeps that line's marks and is empty everywhere else.

    Without a line the game is a stalemate once the turn counter has passed
    N*N, otherwise it is still running and no grid is returned.
    """
    return evaluate_cells(state.board.tolist(), state.turn)


def evaluate_cells(cells: List[List[int]], turn: int) -> Tuple[Result, Optional[np.ndarray]]:
    """evaluate() on a board already unpacked with board.tolist()."""
    n = len(cells)

    for line in scan_lines(n):
        y0, x0 = line[0]
        if cells[y0][x0] == _EMPTY:
            continue
        if all_equal([cells[y][x] for y, x in line]):
            winning_line = make_board(n)
            for y, x in line:
                winning_line[y, x] = cells[y][x]
            return Result.LINE, winning_line

    if turn > n * n:
        return Result.STALEMATE, None

    return Result.NONE, None


class TicTacToe:
    """Stateful game wrapper used by interactive play."""

    __slots__ = ('state',)

    def __init__(self, state: Optional[GameState] = None):
        self.state = state if state is not None else GameState(make_board(), turn=1)

    def game_id(self) -> str:
        return "tic_tac_toe"

    def deep_clone(self) -> "TicTacToe":
        return TicTacToe(self.state.copy())

    def get_state(self) -> GameState:
        return self.state

    def current_player(self) -> Mark:
        return self.state.current_mark()

    def valid_moves(self) -> np.ndarray:
        """Return empty cells as an array of (x, y) rows, row-major."""
        return empty_cells(self.state.board)[:, ::-1]

    def apply_move(self, move) -> None:
        """Place the mover's mark at move = (x, y). Mutates internal state."""
        if self.is_over():
            raise RuntimeError("Cannot apply move: the game is already over.")
        place_mark(self.state, move[0], move[1])

    def result(self) -> Tuple[Result, Optional[np.ndarray]]:
        return evaluate(self.state)

    def is_over(self) -> bool:
        return evaluate(self.state)[0] != Result.NONE

    def winner(self) -> Mark:
        """Mark owning the reported line, EMPTY if there is none."""
        result, line = evaluate(self.state)
        if result != Result.LINE:
            return Mark.EMPTY
        return Mark(int(line[line != Mark.EMPTY][0]))

    def state_string(self) -> str:
        board = self.state.board
        n = board.shape[0]
        lines = ["╭" + "┬".join(["───"] * n) + "╮"]
        for i in range(n):
            row = "│ " + " │ ".join(Mark(int(board[i, j])).glyph for j in range(n)) + " │"
            lines.append(row)
            if i < n - 1:
                lines.append("├" + "┼".join(["───"] * n) + "┤")
        lines.append("╰" + "┴".join(["───"] * n) + "╯")
        lines.append(f"\nNext: {self.current_player().glyph}  Turn: {self.state.turn}")
        return "\n".join(lines)
