"""
Configuration defaults.
"""

import multiprocessing as mp
import os
from typing import Dict, Optional

from checkers_ai.core.types import DRAW_THRESHOLD, Difficulty


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

SEARCH_DEPTHS: Dict[Difficulty, int] = {
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 5,
}

GUIDED_DEPTH = 4

# Pool size when root-parallel search is asked for without a count
DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from e


class Config:
    """
    Engine configuration with sensible defaults.

    num_workers > 1 scores root moves over a process pool; 1 searches serially.
    """

    def __init__(
        self,
        depths: Optional[Dict[Difficulty, int]] = None,
        guided_depth: int = GUIDED_DEPTH,
        draw_threshold: int = DRAW_THRESHOLD,
        seed: Optional[int] = None,
        num_workers: int = 1,
    ):
        self.depths = dict(SEARCH_DEPTHS)
        if depths:
            self.depths.update(depths)
        self.guided_depth = guided_depth
        self.draw_threshold = draw_threshold
        self.seed = seed
        self.num_workers = num_workers

        if any(d < 1 for d in self.depths.values()) or guided_depth < 1:
            raise ValueError("Search depths must be at least 1")
        if num_workers < 1:
            raise ValueError("num_workers must be at least 1")

    @property
    def parallel(self) -> bool:
        return self.num_workers > 1

    def depth_for(self, difficulty: Difficulty) -> int:
        """Search depth for a minimax difficulty (EASY does not search)."""
        if difficulty not in self.depths:
            raise KeyError(f"No search depth for difficulty '{difficulty.value}'")
        return self.depths[difficulty]

    @classmethod
    def from_env(cls) -> "Config":
        """Defaults overridden by CHECKERS_SEED / CHECKERS_WORKERS / CHECKERS_GUIDED_DEPTH."""
        kwargs = {}
        seed = _env_int("CHECKERS_SEED")
        if seed is not None:
            kwargs["seed"] = seed
        workers = _env_int("CHECKERS_WORKERS")
        if workers is not None:
            kwargs["num_workers"] = workers
        guided = _env_int("CHECKERS_GUIDED_DEPTH")
        if guided is not None:
            kwargs["guided_depth"] = guided
        return cls(**kwargs)


# Default configuration
DEFAULT_CONFIG = Config()
