"""
Public API for playing checkers against the engine.

Usage:
    from checkers_ai import start_game, Difficulty

    start_game(difficulty=Difficulty.HARD, guided=True)
"""

from __future__ import annotations

import logging
import re
import time
from contextlib import nullcontext
from typing import Iterable, Optional, Tuple

from checkers_ai.core.errors import RejectedMove
from checkers_ai.core.types import Coord, Difficulty, Move, Outcome, Player, State
from checkers_ai.games.checkers import Checkers
from checkers_ai.search import ParallelSearch, Searcher, select_move, win_chance
from checkers_ai.utils.config import Config, DEFAULT_CONFIG
from checkers_ai.utils.factory import create_game, create_searcher

logger = logging.getLogger(__name__)

_COORD_PAIR = re.compile(r"^\s*(\d)\s*,\s*(\d)\s*(?:[-x ]|->)\s*(\d)\s*,\s*(\d)\s*$")


def parse_move_text(raw: str) -> Tuple[Coord, Coord]:
    """Parse 'r,c r,c' (or 'r,c-r,c' / 'r,cxr,c') into (src, dst)."""
    match = _COORD_PAIR.match(raw)
    if match is None:
        raise ValueError(f"Expected 'row,col row,col', got '{raw.strip()}'")
    r1, c1, r2, c2 = (int(g) for g in match.groups())
    return (r1, c1), (r2, c2)


def format_hints(game: Checkers, searcher: Searcher, depth: int) -> Iterable[str]:
    """Guided-mode lines: one estimated win chance per legal move."""
    for move, score in searcher.guided_evaluate(game, game.current_player(), depth):
        yield f"  {move}: {win_chance(score)}%"


def _ai_turn(
    game: Checkers,
    difficulty: Difficulty,
    searcher: Searcher,
    config: Config,
    pool: Optional[ParallelSearch] = None,
) -> Optional[Move]:
    """AI selects and applies a move. Returns the move or None if it has none."""
    side = game.current_player()
    if pool is not None and difficulty is not Difficulty.EASY:
        move = pool.choose_move(game, side, config.depth_for(difficulty))
    else:
        move = select_move(game, difficulty, searcher, config, side)

    if move is None:
        return None
    game.apply_move(move, validated=True)
    return move


def _human_turn(game: Checkers, searcher: Searcher, config: Config, guided: bool) -> Move:
    """Prompt for a move until a legal one is entered, apply it, return it."""
    moves = game.valid_moves()
    print(f"\nYour turn ({game.current_player().name})")
    if game.get_state().forced_continuation is not None:
        print("Keep jumping!")
    if guided:
        print("Estimated win chance per move:")
        for line in format_hints(game, searcher, config.guided_depth):
            print(line)

    while True:
        try:
            src, dst = parse_move_text(input("Move (row,col row,col): "))
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue

        move = game.find_move(src, dst)
        if move is None:
            if moves and moves[0].is_capture:
                print("You must take the jump!")
            else:
                print(f"Illegal move: {src} -> {dst}")
            continue

        try:
            game.apply_move(move)
        except RejectedMove as e:
            print(f"Illegal move: {e.message}")
            continue
        return move


def _result_banner(game: Checkers, human_set: set) -> str:
    outcome = game.outcome()
    if outcome is None:
        return "Game abandoned"
    if outcome is Outcome.DRAW:
        return "Draw"
    if human_set:
        return "You win!" if game.get_result(Player.HUMAN) is State.WIN else "You lose"
    return f"{outcome.name} wins"


def start_game(
    game: Optional[Checkers] = None,
    difficulty: Difficulty = Difficulty.MEDIUM,
    config: Config = DEFAULT_CONFIG,
    guided: bool = False,
    self_play: bool = False,
    parallel: bool = False,
) -> Optional[Outcome]:
    """
    Main entry point: play a game in the terminal.

    Parameters
    ----------
    game : Checkers, optional
        Position to start from (default: standard opening).
    difficulty : Difficulty
        Strength of the automated side.
    config : Config
        Search depths, draw threshold, seed and worker count.
    guided : bool
        Show an estimated win chance for each human move.
    self_play : bool
        The engine plays both sides; no input is read.
    parallel : bool
        Score root moves over a process pool.

    Returns
    -------
    The final Outcome, or None if the session was interrupted.
    """
    game = game or create_game(config=config)
    searcher = create_searcher(config)
    human_set = set() if self_play else {Player.HUMAN}
    pool = ParallelSearch(searcher, config.num_workers) if parallel else None

    logger.info(
        "Starting game: difficulty=%s guided=%s self_play=%s parallel=%s",
        difficulty.value, guided, self_play, parallel,
    )
    print(game.state_string())

    moves_played = 0
    started = time.monotonic()

    try:
        with (pool or nullcontext()):
            while not game.is_over():
                current = game.current_player()
                if current in human_set:
                    move = _human_turn(game, searcher, config, guided)
                    print(f"\nYou played: {move}")
                else:
                    move = _ai_turn(game, difficulty, searcher, config, pool)
                    if move is None:
                        break
                    print(f"\nAI ({current.name}) played: {move}")

                moves_played += 1
                logger.info("%s played %s", current.name, move)
                print(game.state_string())

    except KeyboardInterrupt:
        print("\nInterrupted - shutting down...")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    elapsed = int(time.monotonic() - started)
    print("\n" + "=" * 40)
    print(f"GAME OVER - {_result_banner(game, human_set)}")
    print("=" * 40)
    print(f"Moves: {moves_played}  Time: {elapsed // 60}m {elapsed % 60}s")

    logger.info("Game finished: %s after %d moves", game.outcome(), moves_played)
    return game.outcome()


__all__ = [
    "start_game",
    "parse_move_text",
    "format_hints",
]
