"""
Command-line entry point.

Usage:
    termsweeper [--level {1,2,3,beginner,intermediate,advanced}] [--seed N]
"""
import argparse
import sys
from typing import List, Optional

from rich.console import Console

from .console import KeyReader, choose_level, play, say_goodbye
from .engine import Difficulty, Game, SweeperError


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="termsweeper",
        description="Minesweeper in the terminal",
    )
    parser.add_argument(
        "-l",
        "--level",
        type=Difficulty.parse,
        default=None,
        help=(
            "Level to play: 1-3 or beginner/intermediate/advanced "
            "(anything else means beginner). Omit to pick from a menu."
        ),
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    return parser


def run(args: argparse.Namespace, console: Console) -> None:
    """Pick a level if needed, then play until the player quits."""
    with KeyReader() as read:
        difficulty = args.level or choose_level(console, read)
        if difficulty is not None:
            play(Game(difficulty, seed=args.seed), console, read)
    say_goodbye(console)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the game. Returns the exit status."""
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        run(args, console)
    except SweeperError as error:
        Console(stderr=True).print(f"[red]Error:[/red] {error}")
        return 1
    except KeyboardInterrupt:
        say_goodbye(console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
