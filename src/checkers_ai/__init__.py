"""
Checkers AI - English draughts rules engine and minimax opponent.

This package provides an 8x8 checkers rules engine with mandatory and chained
captures, and a minimax search with alpha-beta pruning that plays the
automated side at three difficulty levels or scores the human's options.

Quick Start:
    from checkers_ai import create_game, Searcher, Player

    game = create_game()
    searcher = Searcher(seed=7)
    game.move_piece((5, 0), (4, 1))
    move = searcher.choose_move(game, Player.AUTOMATED, depth=3)
    game.apply_move(move)

Modules:
    core    - Fundamental types (Player, Move, Outcome), constants, errors
    games   - GameState container and the Checkers rules engine
    search  - Evaluation, minimax, difficulty policy, root-parallel search
    utils   - Configuration and factories
"""

from checkers_ai.api import start_game

from checkers_ai.core import (
    Player,
    Outcome,
    State,
    Difficulty,
    Piece,
    Move,
    CheckersError,
    RejectedMove,
    InvariantViolation,
)
from checkers_ai.games import Checkers, GameState
from checkers_ai.search import Searcher, ParallelSearch, evaluate, select_move, win_chance
from checkers_ai.utils.config import Config, DEFAULT_CONFIG
from checkers_ai.utils.factory import create_game, create_searcher

__version__ = "1.0.0"

__all__ = [
    # Main API
    "start_game",
    "create_game",
    "create_searcher",
    "Checkers",
    "GameState",
    "Searcher",
    "ParallelSearch",
    "evaluate",
    "select_move",
    "win_chance",
    "Config",
    "DEFAULT_CONFIG",
    # Types
    "Player",
    "Outcome",
    "State",
    "Difficulty",
    "Piece",
    "Move",
    # Errors
    "CheckersError",
    "RejectedMove",
    "InvariantViolation",
]
