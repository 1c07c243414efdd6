"""
Games module - board state, rules and terminal detection.
"""

from tictactoe.games.game_state import GameState
from tictactoe.games.game_rules import (
    make_board,
    copy_board,
    in_bounds,
    count_marks,
    empty_cells,
    scan_lines,
)
from tictactoe.games.tic_tac_toe import TicTacToe, place_mark, evaluate

__all__ = [
    "GameState",
    "TicTacToe",
    "place_mark",
    "evaluate",
    "make_board",
    "copy_board",
    "in_bounds",
    "count_marks",
    "empty_cells",
    "scan_lines",
]
