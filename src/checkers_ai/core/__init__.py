"""
Core module - fundamental types, constants, and errors.

This module provides the building blocks used throughout the engine.
"""

from checkers_ai.core.types import (
    Coord,
    Player,
    Outcome,
    State,
    Difficulty,
    Piece,
    Move,
    INF,
    WIN_SCORE,
    GUIDED_PENALTY,
    GUIDED_REWARD,
    DRAW_THRESHOLD,
)
from checkers_ai.core.errors import CheckersError, RejectedMove, InvariantViolation

__all__ = [
    # Types
    "Coord",
    "Player",
    "Outcome",
    "State",
    "Difficulty",
    "Piece",
    "Move",
    # Constants
    "INF",
    "WIN_SCORE",
    "GUIDED_PENALTY",
    "GUIDED_REWARD",
    "DRAW_THRESHOLD",
    # Errors
    "CheckersError",
    "RejectedMove",
    "InvariantViolation",
]
