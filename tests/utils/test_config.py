"""
Tests for checkers_ai.utils.config
"""

import pytest

from checkers_ai.core.types import Difficulty
from checkers_ai.utils.config import (
    DEFAULT_CONFIG,
    DEFAULT_WORKER_COUNT,
    GUIDED_DEPTH,
    SEARCH_DEPTHS,
    Config,
)


class TestDefaults:

    def test_search_depths(self):
        assert SEARCH_DEPTHS == {Difficulty.MEDIUM: 3, Difficulty.HARD: 5}
        assert GUIDED_DEPTH == 4

    def test_default_config(self):
        assert DEFAULT_CONFIG.depth_for(Difficulty.MEDIUM) == 3
        assert DEFAULT_CONFIG.depth_for(Difficulty.HARD) == 5
        assert DEFAULT_CONFIG.guided_depth == 4
        assert DEFAULT_CONFIG.draw_threshold == 40
        assert DEFAULT_CONFIG.seed is None
        assert DEFAULT_CONFIG.num_workers == 1
        assert DEFAULT_CONFIG.parallel is False

    def test_easy_has_no_depth(self):
        with pytest.raises(KeyError):
            DEFAULT_CONFIG.depth_for(Difficulty.EASY)


class TestOverrides:

    def test_partial_depths(self):
        """Overrides merge over the defaults."""
        config = Config(depths={Difficulty.HARD: 7})
        assert config.depth_for(Difficulty.HARD) == 7
        assert config.depth_for(Difficulty.MEDIUM) == 3

    def test_parallel_with_several_workers(self):
        assert Config(num_workers=3).parallel is True
        assert Config(num_workers=1).parallel is False

    def test_default_worker_count(self):
        assert DEFAULT_WORKER_COUNT >= 1

    def test_overrides_do_not_leak(self):
        Config(depths={Difficulty.MEDIUM: 1})
        assert SEARCH_DEPTHS[Difficulty.MEDIUM] == 3

    @pytest.mark.parametrize("kwargs", [
        {"depths": {Difficulty.MEDIUM: 0}},
        {"guided_depth": 0},
        {"num_workers": 0},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            Config(**kwargs)


class TestFromEnv:
    """Environment overrides."""

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv("CHECKERS_SEED", "17")
        monkeypatch.setenv("CHECKERS_WORKERS", "3")
        monkeypatch.setenv("CHECKERS_GUIDED_DEPTH", "2")
        config = Config.from_env()
        assert config.seed == 17
        assert config.num_workers == 3
        assert config.parallel is True
        assert config.guided_depth == 2

    def test_unset_uses_defaults(self, monkeypatch):
        for name in ("CHECKERS_SEED", "CHECKERS_WORKERS", "CHECKERS_GUIDED_DEPTH"):
            monkeypatch.delenv(name, raising=False)
        config = Config.from_env()
        assert config.seed is None
        assert config.guided_depth == GUIDED_DEPTH

    def test_blank_ignored(self, monkeypatch):
        monkeypatch.setenv("CHECKERS_SEED", "  ")
        assert Config.from_env().seed is None

    def test_non_integer(self, monkeypatch):
        monkeypatch.setenv("CHECKERS_WORKERS", "many")
        with pytest.raises(ValueError, match="CHECKERS_WORKERS"):
            Config.from_env()
