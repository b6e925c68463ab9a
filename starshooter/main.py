"""Command-line entry point that starts the game."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .game import Game


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, then run the game until its window is closed."""
    parser = argparse.ArgumentParser(prog="starshooter", description="A vertical space shooter.")
    parser.add_argument(
        "--assets",
        default="assets",
        help="directory holding images, sounds, fonts and the save file",
    )
    args = parser.parse_args(argv)
    game = Game(args.assets)
    game.init()
    try:
        game.run()
    finally:
        game.clean()
    return 0


if __name__ == "__main__":
    sys.exit(main())