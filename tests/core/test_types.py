"""
Tests for checkers_ai.core.types

Player/Outcome helpers, Move value semantics, and the score constants the
search relies on.
"""

import pytest

from checkers_ai.core.types import (
    GUIDED_PENALTY,
    GUIDED_REWARD,
    INF,
    KING,
    MAN,
    WIN_SCORE,
    Difficulty,
    Move,
    Outcome,
    Piece,
    Player,
)


class TestPlayer:
    """Tests for the Player enum."""

    def test_opponent(self):
        assert Player.HUMAN.opponent is Player.AUTOMATED
        assert Player.AUTOMATED.opponent is Player.HUMAN

    def test_values_are_board_signs(self):
        """Board codes are side.value * MAN or side.value * KING."""
        assert Player.HUMAN.value * KING == 2
        assert Player.AUTOMATED.value * MAN == -1


class TestOutcome:
    """Tests for the Outcome enum."""

    def test_win_for(self):
        assert Outcome.win_for(Player.HUMAN) is Outcome.HUMAN
        assert Outcome.win_for(Player.AUTOMATED) is Outcome.AUTOMATED


class TestDifficulty:
    """Difficulty parses from its string value."""

    @pytest.mark.parametrize("raw,expected", [
        ("easy", Difficulty.EASY),
        ("medium", Difficulty.MEDIUM),
        ("hard", Difficulty.HARD),
    ])
    def test_from_value(self, raw, expected):
        assert Difficulty(raw) is expected

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            Difficulty("impossible")


class TestMove:
    """Move is a structural value type."""

    def test_step_is_not_capture(self):
        move = Move((5, 0), (4, 1))
        assert move.captured is None
        assert move.is_capture is False

    def test_jump_is_capture(self):
        assert Move((5, 2), (3, 4), (4, 3)).is_capture is True

    def test_structural_equality(self):
        """Moves regenerated from the same position compare equal."""
        assert Move((5, 2), (3, 4), (4, 3)) == Move((5, 2), (3, 4), (4, 3))
        assert Move((5, 2), (3, 4), (4, 3)) != Move((5, 2), (3, 4))
        assert len({Move((1, 0), (2, 1)), Move((1, 0), (2, 1))}) == 1

    def test_immutable(self):
        move = Move((5, 0), (4, 1))
        with pytest.raises(AttributeError):
            move.src = (0, 0)

    def test_str(self):
        assert str(Move((5, 0), (4, 1))) == "5,0-4,1"
        assert str(Move((5, 2), (3, 4), (4, 3))) == "5,2x3,4"


class TestPiece:

    def test_defaults_to_man(self):
        assert Piece(Player.HUMAN).is_king is False


class TestScoreConstants:
    """Sentinel ordering the search depends on."""

    def test_ordering(self):
        """-INF < -WIN_SCORE < guided scale < WIN_SCORE < INF."""
        assert -INF < -WIN_SCORE < GUIDED_PENALTY < 0 < GUIDED_REWARD < WIN_SCORE < INF

    def test_guided_scale_symmetric(self):
        assert GUIDED_PENALTY == -GUIDED_REWARD
