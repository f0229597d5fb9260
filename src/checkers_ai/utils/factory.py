"""
Factory functions for creating games and searchers.
"""

from typing import Optional, Sequence

import numpy as np

from checkers_ai.core.types import BOARD_SIZE, Player
from checkers_ai.games.checkers import Checkers
from checkers_ai.games.game_rules import is_playable
from checkers_ai.games.game_state import GameState
from checkers_ai.search.minimax import Searcher
from checkers_ai.utils.config import Config, DEFAULT_CONFIG

# Layout characters -> board codes
LAYOUT_CODES = {".": 0, "h": 1, "H": 2, "a": -1, "A": -2}


def parse_layout(rows: Sequence[str]) -> np.ndarray:
    """
    Build a board from 8 text rows (whitespace ignored).

    '.' empty, 'h'/'H' Human man/king, 'a'/'A' Automated man/king.

    Raises:
        ValueError: on a malformed layout or a piece on a light square.
    """
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Layout needs {BOARD_SIZE} rows, got {len(rows)}")

    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for r, raw in enumerate(rows):
        row = "".join(raw.split())
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Row {r} needs {BOARD_SIZE} cells, got {len(row)}: '{raw}'")
        for c, ch in enumerate(row):
            if ch not in LAYOUT_CODES:
                raise ValueError(f"Unknown layout character '{ch}' at ({r},{c})")
            code = LAYOUT_CODES[ch]
            if code and not is_playable(r, c):
                raise ValueError(f"Piece on non-playable square ({r},{c})")
            board[r, c] = code
    return board


def create_game(
    layout: Optional[Sequence[str]] = None,
    turn: Player = Player.HUMAN,
    quiet_moves: int = 0,
    config: Config = DEFAULT_CONFIG,
) -> Checkers:
    """
    Create a game, either the standard opening or from a text layout.

    Args:
        layout: Optional 8 rows (see parse_layout). None = standard opening.
        turn: Side to act.
        quiet_moves: Starting value of the draw counter.
        config: Supplies the draw threshold.

    Returns:
        Configured game instance (termination already evaluated)
    """
    if layout is None:
        game = Checkers(draw_threshold=config.draw_threshold)
        if turn is Player.HUMAN and quiet_moves == 0:
            return game
        board = game.get_state().board
    else:
        board = parse_layout(layout)

    state = GameState(board, current_player=turn, quiet_moves=quiet_moves)
    return Checkers(state, draw_threshold=config.draw_threshold)


def create_searcher(config: Config = DEFAULT_CONFIG) -> Searcher:
    """Searcher seeded from the configuration (None = unseeded)."""
    return Searcher(seed=config.seed)
