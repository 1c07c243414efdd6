"""
Core types and constants.

This module contains the fundamental types used throughout the engine:
- Mark: cell occupant, valued by its wire token
- Result: outcome of evaluating a board
- SearchResult: score and coordinates returned by the minimax search
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


# Default board dimension. Only grid construction reads this; everything else
# takes N from the board's shape.
BOARD_SIZE = 3

# Board storage type. The mark tokens below all fit in int8.
BOARD_DTYPE = "int8"


class Mark(IntEnum):
    """
    Cell occupant.

    Values are the tokens carried on the wire (the character codes of the
    glyphs), so a board serializes losslessly as plain integers.
    """

    EMPTY = 0
    CROSS = ord("X")   # first mover
    NAUGHT = ord("0")  # second mover

    @property
    def glyph(self) -> str:
        return " " if self is Mark.EMPTY else chr(self.value)

    @classmethod
    def from_glyph(cls, glyph: str) -> "Mark":
        """Parse 'X' / '0' (also accepts 'O' and 'o' for naught)."""
        g = glyph.strip().upper()
        if g == "X":
            return cls.CROSS
        if g in ("0", "O"):
            return cls.NAUGHT
        raise ValueError(f"Unknown mark glyph: {glyph!r}")


class Result(IntEnum):
    """Outcome of a board evaluation. Values are the wire result codes."""

    NONE = 0
    LINE = 1
    STALEMATE = 2


class SearchResult(NamedTuple):
    """Best score found by the search and the cell that achieves it."""

    score: float
    x: int
    y: int


# Scores, from the point of view of the side that started the search.
SCORE_WIN = 1
SCORE_DRAW = 0
SCORE_LOSS = -1
