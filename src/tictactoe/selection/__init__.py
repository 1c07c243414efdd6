"""
Selection module - exact move selection by full-depth minimax.

Provides the main entry points:
- search(): score and coordinates of the best move
- best_move(): coordinates only
"""

from tictactoe.selection.minimax import search, best_move

__all__ = [
    "search",
    "best_move",
]
