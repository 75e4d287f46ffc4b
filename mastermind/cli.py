"""
Command-line entry point.

  mastermind         Start the game (use color blocks)
  mastermind -n      Start the game (use numbers)
  mastermind -v      Display version information
  mastermind -h      Display help information
"""

import argparse
import logging
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from . import console
from .config import load_settings
from .session import Session


def build_parser() -> argparse.ArgumentParser:
    # -h prints the game rules too, so argparse's own help is turned off
    parser = argparse.ArgumentParser(prog="mastermind", add_help=False)
    parser.add_argument("-n", "--numbers", action="store_true", help="Show numbers instead of color blocks")
    parser.add_argument("-v", "--version", action="store_true", help="Display version information")
    parser.add_argument("-h", "--help", action="store_true", help="Display help information")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        print(console.render_version())
        return 0
    if args.help:
        print(console.render_usage())
        return 0

    settings = load_settings()
    if args.numbers:
        settings = settings.model_copy(update={"display": "numbers"})

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    just_fix_windows_console()

    return Session(settings).run()


if __name__ == "__main__":
    sys.exit(main())
