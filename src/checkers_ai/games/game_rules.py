"""
Board geometry helpers for 8x8 checkers.

Pure functions over the int8 encoding; nothing here knows about turns,
counters, or game results.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from checkers_ai.core.types import BOARD_SIZE, KING, MAN, Piece, Player

# Direction vectors (dr, dc), in generation order
KING_DIRS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
HUMAN_DIRS = ((-1, -1), (-1, 1))      # Human moves up the board
AUTOMATED_DIRS = ((1, -1), (1, 1))    # Automated moves down


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) is on the board."""
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def is_playable(r: int, c: int) -> bool:
    """Dark squares only: (row + col) odd."""
    return (r + c) % 2 == 1


def directions_for(code: int) -> Tuple[Tuple[int, int], ...]:
    """Diagonals a piece may step or jump along."""
    if abs(code) == KING:
        return KING_DIRS
    return HUMAN_DIRS if code > 0 else AUTOMATED_DIRS


def promotion_row(player: Player) -> int:
    """The opponent's back row, where this player's men are crowned."""
    return 0 if player is Player.HUMAN else BOARD_SIZE - 1


def owner_of(code: int) -> Optional[Player]:
    if code > 0:
        return Player.HUMAN
    if code < 0:
        return Player.AUTOMATED
    return None


def piece_of(code: int) -> Optional[Piece]:
    """Decode a board value into a Piece (None for an empty square)."""
    owner = owner_of(code)
    if owner is None:
        return None
    return Piece(owner, abs(code) == KING)


def code_for(piece: Piece) -> int:
    """Encode a Piece as a board value."""
    return piece.side.value * (KING if piece.is_king else MAN)


def initial_board() -> np.ndarray:
    """Twelve men per side on the three nearest dark rows."""
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if not is_playable(r, c):
                continue
            if r < 3:
                board[r, c] = -MAN
            elif r > 4:
                board[r, c] = MAN
    return board
