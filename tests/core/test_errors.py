"""
Tests for checkers_ai.core.errors
"""

import pytest

from checkers_ai.core.errors import CheckersError, InvariantViolation, RejectedMove


class TestHierarchy:
    """Engine errors also behave as their builtin counterparts."""

    def test_rejected_move_is_value_error(self):
        with pytest.raises(ValueError):
            raise RejectedMove("illegal")

    def test_invariant_violation_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            raise InvariantViolation("broken")

    @pytest.mark.parametrize("cls", [RejectedMove, InvariantViolation])
    def test_common_base(self, cls):
        assert issubclass(cls, CheckersError)


class TestDetails:

    def test_message_and_details(self):
        err = RejectedMove("Illegal move", details={"move": "5,0-4,1"})
        assert err.message == "Illegal move"
        assert err.details == {"move": "5,0-4,1"}
        assert str(err) == "Illegal move"

    def test_details_default_empty(self):
        assert CheckersError("x").details == {}
