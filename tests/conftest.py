"""
Shared test fixtures for checkers_ai tests.

Design principles:
- Positions are written as 8-row text layouts (see utils.factory.parse_layout)
- Searchers are always seeded so move choices are reproducible
- Minimal, focused fixtures
"""

from typing import Callable, List

import pytest

from checkers_ai.core.types import Player
from checkers_ai.games.checkers import Checkers
from checkers_ai.search.minimax import Searcher
from checkers_ai.utils.factory import create_game


# =============================================================================
# Layouts
# =============================================================================
#
#   '.' empty   'h' Human man   'H' Human king   'a' Automated man   'A' Automated king
#   Row 0 is the top of the board (Human promotes there).

EMPTY_ROW = "........"

# Human man on (5,2) must jump (4,3); the man on (6,7) could otherwise step.
FORCED_CAPTURE = [
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    "...a....",
    "..h.....",
    ".......h",
    EMPTY_ROW,
]

# Automated man on (1,0) can jump (2,1) then (4,3); a Human man waits on (7,6).
DOUBLE_JUMP = [
    EMPTY_ROW,
    "a.......",
    ".h......",
    EMPTY_ROW,
    "...h....",
    EMPTY_ROW,
    EMPTY_ROW,
    "......h.",
]

# Automated man on (5,2) jumps (6,3) onto the back row; as a king it could
# then jump (6,5), but crowning ends the turn.
CROWNING_JUMP = [
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    "..a.....",
    "...h.h..",
    EMPTY_ROW,
]

# One Human king and one Automated man, nothing in contact.
KING_SHUFFLE = [
    ".......a",
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    ".H......",
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
]


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def make_game() -> Callable[..., Checkers]:
    """Build a game from a layout: make_game(rows, turn=..., quiet_moves=...)."""
    def _make(layout: List[str], turn: Player = Player.HUMAN, quiet_moves: int = 0) -> Checkers:
        return create_game(layout, turn=turn, quiet_moves=quiet_moves)
    return _make


@pytest.fixture
def game() -> Checkers:
    """Standard opening, Human to move."""
    return create_game()


@pytest.fixture
def automated_opening() -> Checkers:
    """Standard opening with the Automated side to move."""
    return create_game(turn=Player.AUTOMATED)


@pytest.fixture
def forced_capture_game() -> Checkers:
    return create_game(FORCED_CAPTURE)


@pytest.fixture
def double_jump_game() -> Checkers:
    return create_game(DOUBLE_JUMP, turn=Player.AUTOMATED)


@pytest.fixture
def crowning_game() -> Checkers:
    return create_game(CROWNING_JUMP, turn=Player.AUTOMATED)


@pytest.fixture
def king_shuffle_game() -> Checkers:
    """Human king free to step, draw counter one short of the threshold."""
    return create_game(KING_SHUFFLE, quiet_moves=39)


# =============================================================================
# Search Fixtures
# =============================================================================

@pytest.fixture
def searcher() -> Searcher:
    """Seeded searcher."""
    return Searcher(seed=1234)

