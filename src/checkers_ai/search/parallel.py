"""
Root-parallel move choice.

Each root move is scored in its own worker process on an independent clone,
so no state is shared between branches. The shuffle and the first-strictly-
best rule are the same as Searcher.choose_move, so for the same RNG state
both paths return the same move.
"""

from __future__ import annotations

import logging
from multiprocessing.pool import Pool
from typing import Optional, Tuple

from checkers_ai.core.types import INF, Move, Player
from checkers_ai.games.checkers import Checkers
from checkers_ai.search.minimax import Searcher, require_searchable
from checkers_ai.utils.config import DEFAULT_WORKER_COUNT

logger = logging.getLogger(__name__)


def _score_job(job: Tuple[Checkers, Player, Move, int]) -> float:
    game, side, move, depth = job
    return Searcher().score_move(game, side, move, depth)


class ParallelSearch:
    """
    Scores root moves over a process pool.

    Use as a context manager so the pool is torn down with the session.
    """

    def __init__(self, searcher: Searcher, num_workers: int = DEFAULT_WORKER_COUNT):
        self.searcher = searcher
        self.num_workers = num_workers
        self._pool: Optional[Pool] = None

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._pool is None:
            self._pool = Pool(processes=self.num_workers)
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        if self._pool is None:
            return
        if force:
            self._pool.terminate()
        else:
            self._pool.close()
        self._pool.join()
        self._pool = None

    def choose_move(self, game: Checkers, side: Player, depth: int) -> Optional[Move]:
        """Same contract as Searcher.choose_move."""
        require_searchable(game, side, "choose_move")

        moves = game.legal_moves(side)
        if not moves:
            return None

        self.searcher.rng.shuffle(moves)
        values = self._ensure_pool().map(_score_job, [(game, side, m, depth) for m in moves])

        best_move: Optional[Move] = None
        best_value = -INF
        for move, value in zip(moves, values):
            if value > best_value:
                best_value = value
                best_move = move

        logger.debug(
            "parallel choose_move side=%s depth=%d moves=%d workers=%d best=%s score=%.1f",
            side.name, depth, len(moves), self.num_workers, best_move, best_value,
        )
        return best_move or moves[0]
