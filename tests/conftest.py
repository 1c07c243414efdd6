"""
Shared test fixtures for tictactoe tests.

Boards are written with the module-level shorthands X, O and _ so that test
positions read like the board they describe (rows top to bottom).
"""

import pytest

from tictactoe.core.types import Mark
from tictactoe.games.game_rules import make_board
from tictactoe.games.game_state import GameState
from tictactoe.games.tic_tac_toe import TicTacToe

X = int(Mark.CROSS)
O = int(Mark.NAUGHT)
_ = int(Mark.EMPTY)


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def empty_state() -> GameState:
    """Empty 3x3 board, turn 1."""
    return GameState(make_board(3), turn=1)


@pytest.fixture
def naughts_win_state() -> GameState:
    """0 to move with an immediate win at (x=2, y=0)."""
    return GameState.from_board([
        [X, _, _],
        [X, X, O],
        [_, _, O],
    ])


@pytest.fixture
def naughts_defend_state() -> GameState:
    """0 to move and must block X's middle row at (x=2, y=1)."""
    return GameState.from_board([
        [O, _, _],
        [X, X, _],
        [_, _, _],
    ])


@pytest.fixture
def stalemate_grid():
    """Full board with no line."""
    return [
        [X, O, X],
        [X, X, O],
        [O, X, O],
    ]


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def game() -> TicTacToe:
    """Fresh TicTacToe game."""
    return TicTacToe()
