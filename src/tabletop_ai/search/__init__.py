"""
Search module - adversarial game-tree search.

Provides minimax with alpha-beta pruning over any GameBase, plus a
runner for searching off the caller's thread.
"""

from tabletop_ai.search.minimax import MinimaxSearch, find_best_move
from tabletop_ai.search.runner import SearchRunner

__all__ = [
    "MinimaxSearch",
    "find_best_move",
    "SearchRunner",
]
