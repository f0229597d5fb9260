"""
Error taxonomy for the rules engine and search.

All failures are local and synchronous. Having no legal moves is game
information, not an error, and is never raised.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CheckersError(Exception):
    """Base exception for engine errors.

    Attributes:
        message: Error description.
        details: Additional error details.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RejectedMove(CheckersError, ValueError):
    """Raised when a move is not in the current legal-move set, or the game is over."""

    pass


class InvariantViolation(CheckersError, RuntimeError):
    """Raised when the caller breaks an engine contract (e.g. searching a finished game)."""

    pass
