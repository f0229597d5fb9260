"""
Command-line interface for playing checkers against the engine.
"""

import argparse
import logging

from checkers_ai.api import start_game
from checkers_ai.core.types import Difficulty
from checkers_ai.utils.config import Config
from checkers_ai.utils.factory import create_game


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play English draughts against a minimax engine"
    )
    parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Engine strength (default: medium)",
    )
    parser.add_argument(
        "--guided",
        action="store_true",
        help="Show an estimated win chance for each of your moves",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the engine's tie-breaking for reproducible games",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Score root moves over N worker processes (default: CHECKERS_WORKERS, else serial search)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="Engine plays both sides (no human input)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Environment defaults, overridden by explicit flags."""
    config = Config.from_env()
    if args.seed is not None:
        config.seed = args.seed
    if args.workers:
        config.num_workers = args.workers
    return config


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = build_config(args)

    start_game(
        game=create_game(config=config),
        difficulty=Difficulty(args.difficulty),
        config=config,
        guided=args.guided,
        self_play=args.self_play,
        parallel=config.parallel,
    )


if __name__ == "__main__":
    main()
