"""
Search module - evaluation, minimax search and move policies.

Provides the main entry points:
- Searcher.choose_move(): best move for autonomous play
- Searcher.guided_evaluate(): per-move advisory scores
- select_move(): difficulty-aware move choice
"""

from checkers_ai.search.minimax import Searcher, evaluate, material
from checkers_ai.search.policy import random_move, select_move, win_chance
from checkers_ai.search.parallel import ParallelSearch

__all__ = [
    "Searcher",
    "evaluate",
    "material",
    "random_move",
    "select_move",
    "win_chance",
    "ParallelSearch",
]
