"""
GameState - checkers position container.

Optimized for fast copying: the board is a contiguous int8 array and every
other field is an immutable scalar or tuple.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from checkers_ai.core.types import Coord, Outcome, Player, PIECES_PER_SIDE


class GameState:
    """
    Complete, self-contained position.

    Uses int8 board (see checkers_ai.core.types for the encoding):
        0 = empty
        +1 / +2 = Human man / king
        -1 / -2 = Automated man / king

    forced_continuation holds the square of a piece that just captured and
    must capture again before the turn can pass.
    """
    __slots__ = (
        'board',
        'current_player',
        'winner',
        'human_pieces',
        'automated_pieces',
        'quiet_moves',
        'forced_continuation',
    )

    def __init__(
        self,
        board: np.ndarray,
        current_player: Player = Player.HUMAN,
        winner: Optional[Outcome] = None,
        human_pieces: int = PIECES_PER_SIDE,
        automated_pieces: int = PIECES_PER_SIDE,
        quiet_moves: int = 0,
        forced_continuation: Optional[Coord] = None,
    ):
        self.board = board
        self.current_player = current_player
        self.winner = winner
        self.human_pieces = human_pieces
        self.automated_pieces = automated_pieces
        self.quiet_moves = quiet_moves
        self.forced_continuation = forced_continuation

    def pieces_of(self, player: Player) -> int:
        return self.human_pieces if player is Player.HUMAN else self.automated_pieces

    def copy(self) -> "GameState":
        """Deep copy - the board array is duplicated, the rest is immutable."""
        return GameState(
            self.board.copy(),
            self.current_player,
            self.winner,
            self.human_pieces,
            self.automated_pieces,
            self.quiet_moves,
            self.forced_continuation,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.board, other.board)
            and self.current_player is other.current_player
            and self.winner is other.winner
            and self.human_pieces == other.human_pieces
            and self.automated_pieces == other.automated_pieces
            and self.quiet_moves == other.quiet_moves
            and self.forced_continuation == other.forced_continuation
        )

    __hash__ = None
