"""
cli.py — Command-line entry point.

Parses options, configures logging and hands over to the controller.
"""

import argparse
import logging

from .config import HIGH_SCORE_FILE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsnake", description="Wrap-around snake with obstacles.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food and obstacle placement")
    parser.add_argument("--high-score-file", default=HIGH_SCORE_FILE,
                        help="JSON file holding the best score")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from .controller import GameController

    GameController(
        high_score_file=args.high_score_file,
        seed=args.seed,
        mute=args.mute,
    ).run()
