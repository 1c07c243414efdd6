"""
tictactoe - exact tic-tac-toe engine.

Given a board, decides whether the game is over and, if it is not, plays the
optimal reply found by full-depth minimax.

Quick Start:
    from tictactoe import GameState, evaluate, search, place_mark

    state = GameState.from_board([[88, 0, 0], [0, 0, 0], [0, 0, 0]])
    result, winning_line = evaluate(state)
    score, x, y = search(state)
    place_mark(state, x, y)

    # or, with the JSON wire format
    from tictactoe import play_turn
    play_turn('{"board": [[88, 0, 0], [0, 0, 0], [0, 0, 0]]}')

Modules:
    core        - Mark / Result types and exceptions
    games       - GameState, place_mark, evaluate
    search      - minimax move search
    serializers - JSON request/response codec
"""

from tictactoe.api import play_turn, respond

from tictactoe.core import (
    Mark,
    Result,
    SearchResult,
    MoveError,
    OutOfBoundsError,
    CellOccupiedError,
    SearchError,
    BoardFormatError,
)
from tictactoe.games import GameState, TicTacToe, place_mark, evaluate
from tictactoe.selection import search, best_move

__version__ = "1.0.0"

__all__ = [
    # Main API
    "play_turn",
    "respond",
    "GameState",
    "TicTacToe",
    "place_mark",
    "evaluate",
    "search",
    "best_move",
    # Types
    "Mark",
    "Result",
    "SearchResult",
    # Errors
    "MoveError",
    "OutOfBoundsError",
    "CellOccupiedError",
    "SearchError",
    "BoardFormatError",
]
