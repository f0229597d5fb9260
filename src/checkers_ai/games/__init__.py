"""
Games module - checkers rules engine.
"""

from checkers_ai.games.game_state import GameState
from checkers_ai.games.game_base import GameBase
from checkers_ai.games.game_rules import in_bounds, is_playable, initial_board, piece_of, code_for
from checkers_ai.games.checkers import Checkers

__all__ = [
    "GameState",
    "GameBase",
    "Checkers",
    "in_bounds",
    "is_playable",
    "initial_board",
    "piece_of",
    "code_for",
]
