"""
Factory functions for creating games.
"""

from typing import Optional

from tictactoe.games.game_rules import make_board
from tictactoe.games.game_state import Grid, GameState
from tictactoe.games.tic_tac_toe import TicTacToe
from tictactoe.utils.config import Config, DEFAULT_CONFIG


def create_game(grid: Optional[Grid] = None, config: Config = DEFAULT_CONFIG) -> TicTacToe:
    """
    Create a game, empty or from an existing grid.

    Args:
        grid: Raw N x N grid of mark values. Copied; turn is derived from it.
        config: Supplies the board size for a new game.

    Returns:
        Game with its own, independent state
    """
    if grid is None:
        return TicTacToe(GameState(make_board(config.board_size), turn=1))
    return TicTacToe(GameState.from_board(grid))
