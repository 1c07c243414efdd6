"""
JSON wire codec.

Request:   {"board": [[0, 88, 0], [48, 0, 0], [0, 0, 0]]}
Response:  {"board": [[...]], "result": 1, "winningRow": [[...]],
            "turn": 6, "nextPlayer": 48}

Cells are Mark values (0 empty, 88 'X', 48 '0'). "result" is omitted while
the game is running and "winningRow" is omitted unless there is a line.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

import numpy as np

from tictactoe.core.errors import BoardFormatError
from tictactoe.core.types import BOARD_SIZE, Mark, Result
from tictactoe.games.game_rules import make_board
from tictactoe.games.game_state import GameState

Payload = Union[str, bytes, bytearray, Dict[str, Any]]


def _decode_cell(value: Any) -> int:
    """Accept a mark value (88) or its glyph ("X"); blank strings are empty."""
    if isinstance(value, bool):
        raise BoardFormatError(f"Invalid cell value: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if not value.strip():
            return int(Mark.EMPTY)
        try:
            return int(Mark.from_glyph(value))
        except ValueError as e:
            raise BoardFormatError(str(e)) from e
    raise BoardFormatError(f"Invalid cell value: {value!r}")


def decode_request(payload: Payload, size: int = BOARD_SIZE) -> GameState:
    """
    Turn a request body into a GameState.

    A request without a board (or with "board": null) is an empty
    `size` x `size` board, i.e. the first move of a new game.

    Raises:
        BoardFormatError: malformed JSON, wrong shape, or unknown cell value.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise BoardFormatError(f"Could not interpret request: {e}") from e

    if not isinstance(payload, dict):
        raise BoardFormatError("Request must be a JSON object")

    raw = payload.get("board")
    if raw is None:
        return GameState(make_board(size), turn=1)

    if not isinstance(raw, list) or not all(isinstance(row, list) for row in raw):
        raise BoardFormatError("'board' must be a list of rows")

    grid = [[_decode_cell(v) for v in row] for row in raw]
    return GameState.from_board(grid)


def encode_response(
    state: GameState,
    result: Result,
    winning_line: Optional[np.ndarray] = None,
) -> Dict[str, Any]:
    """Build the response object for `state` (plain Python types only)."""
    response: Dict[str, Any] = {"board": state.board.tolist()}
    if result != Result.NONE:
        response["result"] = int(result)
    if winning_line is not None:
        response["winningRow"] = winning_line.tolist()
    response["turn"] = state.turn
    response["nextPlayer"] = int(state.current_mark())
    return response


def dumps_response(response: Dict[str, Any]) -> str:
    return json.dumps(response)
