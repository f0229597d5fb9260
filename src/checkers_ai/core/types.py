"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the checkers engine:
- Player / Outcome / State enums
- Piece and Move value types
- Board encoding and score constants
"""

from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Optional, Tuple


Coord = Tuple[int, int]


class Player(Enum):
    """The two sides. Values double as the sign of their board codes."""

    HUMAN = 1
    AUTOMATED = -1

    @property
    def opponent(self) -> "Player":
        return Player.AUTOMATED if self is Player.HUMAN else Player.HUMAN


class Outcome(Enum):
    """Final result of a game."""

    HUMAN = "human"
    AUTOMATED = "automated"
    DRAW = "draw"

    @classmethod
    def win_for(cls, player: Player) -> "Outcome":
        return cls.HUMAN if player is Player.HUMAN else cls.AUTOMATED


class State(Enum):
    """Result from one player's point of view."""

    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


class Difficulty(str, Enum):
    """Automated opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Piece(NamedTuple):
    side: Player
    is_king: bool = False


class Move(NamedTuple):
    """
    A single step or jump.

    `captured` is the coordinate of the jumped piece, or None for a simple step.
    Equality is structural, so moves compare equal across regenerations.
    """

    src: Coord
    dst: Coord
    captured: Optional[Coord] = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        sep = "x" if self.is_capture else "-"
        return f"{self.src[0]},{self.src[1]}{sep}{self.dst[0]},{self.dst[1]}"


# ─── Board encoding ───────────────────────────────────────────────────────────
#
#   0 = empty
#   Positive = Human:     1 = man, 2 = king
#   Negative = Automated: -1 = man, -2 = king
#
# piece > 0 → Human, piece < 0 → Automated, abs(piece) == KING → king

BOARD_SIZE = 8
EMPTY = 0
MAN = 1
KING = 2

PIECES_PER_SIDE = 12
DRAW_THRESHOLD = 40

# ─── Scores ───────────────────────────────────────────────────────────────────

# Finite sentinels keep score arithmetic ordinary: WIN_SCORE is far outside
# any material total and INF bounds every reachable score.
INF = 1_000_000.0
WIN_SCORE = 900_000.0

# Advisory scale used only by guided evaluation.
GUIDED_PENALTY = -1000.0
GUIDED_REWARD = 1000.0

MAN_VALUE = 10.0
KING_VALUE = 30.0
ADVANCE_BONUS = 1.5
BACK_ROW_BONUS = 5.0
