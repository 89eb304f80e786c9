"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.core.notation import STARTING_POSITION, PositionParseError
from chessrules.game.config import RulesConfig
from chessrules.game.state import load_position

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Play a game of chess on the console.",
    )
    parser.add_argument(
        "--position",
        default=STARTING_POSITION,
        help="starting position as '<placement> <w|b>' (default: standard start)",
    )
    parser.add_argument(
        "--unicode", action="store_true", help="draw pieces with unicode symbols"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--fifty-move-limit",
        type=int,
        default=RulesConfig().fifty_move_limit,
        help="half-moves without pawn move or capture before a draw",
    )
    parser.add_argument(
        "--repetition-threshold",
        type=int,
        default=RulesConfig().repetition_threshold,
        help="occurrences of one placement that draw the game",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch the console game. Returns the process exit code."""
    from chessrules.console import run_console

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RulesConfig(args.fifty_move_limit, args.repetition_threshold)
        game = load_position(args.position, config)
    except PositionParseError as exc:
        _LOGGER.error("Cannot load position (%s): %s", exc.kind.name, exc)
        return 2
    except ValueError as exc:
        _LOGGER.error("Invalid rules configuration: %s", exc)
        return 2

    run_console(game, sys.stdin, sys.stdout, unicode=args.unicode)
    return 0


if __name__ == "__main__":
    sys.exit(main())
