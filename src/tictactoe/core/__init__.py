"""
Core module - fundamental types, constants and exceptions.
"""

from tictactoe.core.types import (
    Mark,
    Result,
    SearchResult,
    BOARD_SIZE,
    BOARD_DTYPE,
    SCORE_WIN,
    SCORE_DRAW,
    SCORE_LOSS,
)
from tictactoe.core.errors import (
    MoveError,
    OutOfBoundsError,
    CellOccupiedError,
    SearchError,
    BoardFormatError,
)

__all__ = [
    # Types
    "Mark",
    "Result",
    "SearchResult",
    # Constants
    "BOARD_SIZE",
    "BOARD_DTYPE",
    "SCORE_WIN",
    "SCORE_DRAW",
    "SCORE_LOSS",
    # Errors
    "MoveError",
    "OutOfBoundsError",
    "CellOccupiedError",
    "SearchError",
    "BoardFormatError",
]
