"""
Public API: answer one move of a game.

Usage:
    from tictactoe import play_turn

    response = play_turn({"board": [[88, 0, 0], [0, 0, 0], [0, 0, 0]]})
    response["board"]       # board after the engine's reply
    response["nextPlayer"]  # 88 - back to X
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from tictactoe.core.errors import MoveError, SearchError
from tictactoe.core.types import Result
from tictactoe.games.game_state import GameState
from tictactoe.games.tic_tac_toe import evaluate, place_mark
from tictactoe.selection.minimax import search
from tictactoe.serializers import Payload, decode_request, encode_response

logger = logging.getLogger(__name__)


def respond(state: GameState) -> Dict[str, Any]:
    """
    Play the engine's reply on `state` (if the game is still running) and
    return the response object.

    `state` is mutated at most once, by the chosen move.

    Raises:
        SearchError: the search broke its own invariant. Not retryable.
    """
    result, _ = evaluate(state)
    if result == Result.NONE:
        try:
            found = search(state, maximizing=True)
            try:
                place_mark(state, found.x, found.y)
            except MoveError as e:
                raise SearchError(f"Search chose an unplayable cell ({found.x},{found.y})") from e
        except SearchError:
            logger.exception("Move search failed on turn %d", state.turn)
            raise
        logger.debug("Played (%d,%d), score %s", found.x, found.y, found.score)
    else:
        logger.debug("Game already over (%s), no move played", result.name)

    result, winning_line = evaluate(state)
    logger.info("Turn %d: %s", state.turn, result.name)
    return encode_response(state, result, winning_line)


def play_turn(payload: Payload) -> Dict[str, Any]:
    """
    Decode a request, answer it and return the response object.

    Raises:
        BoardFormatError: the request is not a valid board.
        SearchError: see respond().
    """
    return respond(decode_request(payload))


__all__ = [
    "play_turn",
    "respond",
]
