"""
Difficulty policy - how the automated side picks a move.

- EASY:   random, preferring captures
- MEDIUM: minimax at the configured medium depth
- HARD:   minimax at the configured hard depth
"""

from __future__ import annotations

import math
from typing import List, Optional, TYPE_CHECKING

from checkers_ai.core.types import Difficulty, Move, Player
from checkers_ai.search.minimax import Searcher

if TYPE_CHECKING:
    from checkers_ai.games.checkers import Checkers
    from checkers_ai.utils.config import Config


def random_move(moves: List[Move], searcher: Searcher) -> Move:
    """Uniform pick, restricted to captures when any are present."""
    captures = [m for m in moves if m.is_capture]
    return searcher.rng.choice(captures or moves)


def select_move(
    game: "Checkers",
    difficulty: Difficulty,
    searcher: Searcher,
    config: "Config",
    side: Optional[Player] = None,
) -> Optional[Move]:
    """
    Select the automated move for `side` (default: side to act).

    Returns None when `side` has no legal moves.
    """
    side = side or game.current_player()

    if difficulty is Difficulty.EASY:
        moves = game.legal_moves(side)
        if not moves:
            return None
        return random_move(moves, searcher)

    return searcher.choose_move(game, side, config.depth_for(difficulty))


def win_chance(score: float) -> int:
    """
    Map a guided score to a display percentage in [1, 99].

    50 is even; each point of score moves the estimate by 2.
    """
    return math.floor(min(99.0, max(1.0, 50 + score * 2)))
