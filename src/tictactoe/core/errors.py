"""
Exceptions raised by the engine.

Move errors are ordinary, recoverable conditions for whoever called
place_mark. SearchError means the search broke its own invariant and should
be treated as fatal.
"""


class MoveError(ValueError):
    """A mark could not be placed."""

    def __init__(self, message: str, x: int, y: int):
        super().__init__(message)
        self.x = x
        self.y = y


class OutOfBoundsError(MoveError):
    """Coordinate outside the grid."""


class CellOccupiedError(MoveError):
    """Target cell already holds a mark."""


class SearchError(RuntimeError):
    """The search failed to place a mark on a cell it saw as empty."""


class BoardFormatError(ValueError):
    """Input could not be turned into a square grid of marks."""
