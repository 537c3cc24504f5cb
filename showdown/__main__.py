import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console

from .arguments import USAGE, InvalidArgumentsError, validate_arguments
from .session import run_session

LOGGER = logging.getLogger("showdown")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showdown",
        description="Shuffle a deck, deal five-card hands and rank them",
    )
    # Kept as raw strings; validate_arguments owns the format rules.
    parser.add_argument("cards_per_hand", help="Integer 1-13 (hands are always dealt 5 cards)")
    parser.add_argument("players", help="Integer 1-13; 5 x players must fit in the 52-card deck")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible shuffle")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        config = validate_arguments(args.cards_per_hand, args.players, seed=args.seed)
    except InvalidArgumentsError as exc:
        LOGGER.debug("Rejected arguments (%s)", exc.code)
        print("Cards Shuffle", file=sys.stderr)
        print(f"The program initiated with invalid input arguments: {exc.msg}\n", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    run_session(config, Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
