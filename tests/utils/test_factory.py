"""
Tests for tictactoe.utils.factory
"""

import numpy as np
import pytest

from tictactoe.core.errors import BoardFormatError
from tictactoe.core.types import Mark
from tictactoe.games.tic_tac_toe import TicTacToe
from tictactoe.utils.factory import create_game

X = int(Mark.CROSS)
O = int(Mark.NAUGHT)
_ = int(Mark.EMPTY)


class TestCreateGame:
    """create_game function tests."""

    def test_creates_game_instance(self):
        game = create_game()
        assert isinstance(game, TicTacToe)

    def test_new_game_initial_state(self):
        state = create_game().get_state()

        assert state.board.shape == (3, 3)
        assert np.all(state.board == _)
        assert state.turn == 1

    def test_from_grid(self):
        game = create_game([[X, _, _], [_, O, _], [_, _, _]])

        assert game.get_state().turn == 3
        assert game.current_player() == Mark.CROSS

    def test_bad_grid_raises(self):
        with pytest.raises(BoardFormatError):
            create_game([[X, _], [_, _, _]])


class TestStateIndependence:
    """Game state independence tests."""

    def test_multiple_games_independent(self):
        """Multiple created games have independent state."""
        game1 = create_game()
        game2 = create_game()

        game1.apply_move(game1.valid_moves()[0])

        assert game2.current_player() == Mark.CROSS
        assert np.all(game2.get_state().board == _)

    def test_grid_not_aliased(self):
        grid = np.zeros((3, 3), dtype=np.int8)
        game = create_game(grid)

        game.apply_move((1, 1))
        assert grid[1, 1] == _
