"""
Minimax search with alpha-beta pruning.

Scores are material-plus-position totals expressed from a perspective side.
The board evaluation itself is Automated-centric and is negated when the
perspective is Human.

Whose turn it is after a move decides whether the next ply maximizes: a
chain capture keeps the same side on move, so plies do not simply alternate.
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from checkers_ai.core.errors import InvariantViolation
from checkers_ai.core.types import (
    ADVANCE_BONUS,
    BACK_ROW_BONUS,
    BOARD_SIZE,
    GUIDED_PENALTY,
    GUIDED_REWARD,
    INF,
    KING,
    KING_VALUE,
    MAN,
    MAN_VALUE,
    WIN_SCORE,
    Move,
    Outcome,
    Player,
)
from checkers_ai.games.checkers import Checkers
from checkers_ai.games.game_state import GameState

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Piece-square tables
# ---------------------------------------------------------------------------

_ROWS = np.repeat(np.arange(BOARD_SIZE, dtype=np.float64)[:, None], BOARD_SIZE, axis=1)

# Automated men advance with the row index; Human men advance against it.
_AUTOMATED_MAN = MAN_VALUE + ADVANCE_BONUS * _ROWS + BACK_ROW_BONUS * (_ROWS == 0)
_AUTOMATED_KING = KING_VALUE + BACK_ROW_BONUS * (_ROWS == 0)
_HUMAN_MAN = MAN_VALUE + ADVANCE_BONUS * (BOARD_SIZE - 1 - _ROWS) + BACK_ROW_BONUS * (_ROWS == BOARD_SIZE - 1)
_HUMAN_KING = KING_VALUE + BACK_ROW_BONUS * (_ROWS == BOARD_SIZE - 1)


def material(board: np.ndarray) -> float:
    """Automated-centric material and position balance."""
    score = (
        _AUTOMATED_MAN[board == -MAN].sum()
        + _AUTOMATED_KING[board == -KING].sum()
        - _HUMAN_MAN[board == MAN].sum()
        - _HUMAN_KING[board == KING].sum()
    )
    return float(score)


def evaluate(state: GameState, perspective: Player) -> float:
    """
    Static score of a position for `perspective`.

    Finished games score WIN_SCORE / -WIN_SCORE / 0; otherwise the material
    balance, positive when `perspective` is ahead.
    """
    winner = state.winner
    if winner is not None:
        if winner is Outcome.DRAW:
            return 0.0
        return WIN_SCORE if winner is Outcome.win_for(perspective) else -WIN_SCORE

    score = material(state.board)
    return score if perspective is Player.AUTOMATED else -score


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

def require_searchable(game: Checkers, side: Player, caller: str) -> None:
    """Root searches need a live game with `side` on move."""
    if game.is_over():
        raise InvariantViolation(
            f"{caller} called on a finished game",
            details={"outcome": game.outcome().value},
        )
    if side is not game.current_player():
        raise InvariantViolation(
            f"{caller} called for {side.name} while {game.current_player().name} is on move",
            details={"side": side.name},
        )


class Searcher:
    """
    Depth-limited minimax with a seedable tie-breaking shuffle.

    Every explored branch works on a deep clone of the position, so the
    caller's game is never mutated.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.nodes = 0

    def search(
        self,
        game: Checkers,
        side: Player,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        *,
        advisory: bool = False,
    ) -> float:
        """
        Minimax value of `game` for `side`.

        Args:
            game: Position to search (not mutated).
            side: Perspective fixed at the root.
            depth: Remaining plies.
            alpha, beta: Alpha-beta window.
            maximizing: True when `side` is on move.
            advisory: Replace forced losses at maximizing nodes with
                      GUIDED_PENALTY and forced wins at minimizing nodes with
                      GUIDED_REWARD (guided display scale).
        """
        self.nodes += 1
        if depth <= 0 or game.is_over():
            return evaluate(game.state, side)

        moves = game.legal_moves(game.current_player())

        if maximizing:
            best = -INF
            for move in moves:
                child = game.deep_clone()
                child.apply_move(move, validated=True)
                value = self.search(
                    child, side, depth - 1, alpha, beta,
                    child.current_player() is side, advisory=advisory,
                )
                best = max(best, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            if advisory and best <= -WIN_SCORE:
                return GUIDED_PENALTY
            return best

        best = INF
        for move in moves:
            child = game.deep_clone()
            child.apply_move(move, validated=True)
            value = self.search(
                child, side, depth - 1, alpha, beta,
                child.current_player() is side, advisory=advisory,
            )
            best = min(best, value)
            beta = min(beta, value)
            if beta <= alpha:
                break
        if advisory and best >= WIN_SCORE:
            return GUIDED_REWARD
        return best

    def score_move(self, game: Checkers, side: Player, move: Move, depth: int, *, advisory: bool = False) -> float:
        """Value of playing `move` now, searched `depth - 1` plies further."""
        child = game.deep_clone()
        child.apply_move(move, validated=True)
        return self.search(
            child, side, depth - 1, -INF, INF,
            child.current_player() is side, advisory=advisory,
        )

    def choose_move(self, game: Checkers, side: Player, depth: int) -> Optional[Move]:
        """
        Best move for `side` at `depth` plies, or None if `side` cannot move.

        Moves are shuffled first so equal scores are broken uniformly; the
        first strictly better score wins.
        """
        require_searchable(game, side, "choose_move")

        moves = game.legal_moves(side)
        if not moves:
            return None

        self.rng.shuffle(moves)
        start_nodes = self.nodes

        best_move: Optional[Move] = None
        best_value = -INF
        for move in moves:
            value = self.score_move(game, side, move, depth)
            if value > best_value:
                best_value = value
                best_move = move

        logger.debug(
            "choose_move side=%s depth=%d moves=%d nodes=%d best=%s score=%.1f",
            side.name, depth, len(moves), self.nodes - start_nodes, best_move, best_value,
        )
        return best_move or moves[0]

    def guided_evaluate(self, game: Checkers, side: Player = Player.HUMAN, depth: int = 4) -> List[Tuple[Move, float]]:
        """
        Advisory score for every legal move of `side`, in generation order.

        Presentation input only; the searcher's RNG is not touched.
        """
        require_searchable(game, side, "guided_evaluate")

        return [
            (move, self.score_move(game, side, move, depth, advisory=True))
            for move in game.legal_moves(side)
        ]
