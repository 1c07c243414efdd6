"""
Exhaustive minimax move search.

Every empty cell is tried in row-major order and every subtree is searched to
the end of the game; there is no pruning and no transposition cache. A 3x3
board has fewer than 9! move sequences, so the exact answer is cheap.

Scores are from the point of view of the side that made the top-level call:
+1 win, 0 draw, -1 loss.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from tictactoe.core.errors import MoveError, SearchError
from tictactoe.core.types import Mark, Result, SearchResult, SCORE_DRAW, SCORE_LOSS, SCORE_WIN
from tictactoe.games.game_state import GameState
from tictactoe.games.tic_tac_toe import evaluate_cells, place_mark

_EMPTY = int(Mark.EMPTY)


def search(state: GameState, maximizing: bool = True) -> SearchResult:
    """
    Find the best move for the player to move in `state`.

    Args:
        state: Position to search. Never mutated; each candidate is played on
               a private copy.
        maximizing: True when the mover is the side the score is reported
                    for. Flips at each level of recursion.

    Returns:
        SearchResult(score, x, y). A move that ends the game is returned as
        soon as it is found. Otherwise the first cell in scan order with the
        strictly best score wins ties.

        Only call this on a running game (evaluate() gives Result.NONE). On a
        full board nothing is scanned and the initial sentinel (-inf or +inf)
        comes back with (0, 0).

    Raises:
        SearchError: a candidate cell could not be played. That means the
            emptiness check and place_mark disagree, which is a bug, not a
            position to skip.
    """
    return _search(state, state.board.tolist(), maximizing)


def _search(state: GameState, cells: List[List[int]], maximizing: bool) -> SearchResult:
    # `cells` is state.board.tolist(); each child is unpacked once and
    # shared by its evaluation and its subtree.
    n = len(cells)

    best_score = -math.inf if maximizing else math.inf
    best_x, best_y = 0, 0

    for y in range(n):
        for x in range(n):
            if cells[y][x] != _EMPTY:
                continue

            child = state.copy()
            try:
                place_mark(child, x, y)
            except MoveError as e:
                raise SearchError(
                    f"Search failed to play ({x},{y}) on turn {state.turn}"
                ) from e

            child_cells = child.board.tolist()
            result, _ = evaluate_cells(child_cells, child.turn)
            if result == Result.LINE:
                return SearchResult(SCORE_WIN if maximizing else SCORE_LOSS, x, y)
            if result == Result.STALEMATE:
                return SearchResult(SCORE_DRAW, x, y)

            # The child's coordinates describe the reply, not this move.
            score = _search(child, child_cells, not maximizing).score

            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_x, best_y = x, y

    return SearchResult(best_score, best_x, best_y)


def best_move(state: GameState) -> Tuple[int, int]:
    """Coordinates (x, y) of the optimal move for the player to move."""
    result = search(state, maximizing=True)
    return result.x, result.y
