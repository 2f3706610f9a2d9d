#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--seed N]
"""
import argparse
import sys

import numpy as np

from src.minesweeper import Console, Game


def play(args: argparse.Namespace) -> int:
    """Play one game on the console and return the exit status."""
    rng = np.random.default_rng(args.seed)
    game = Game.new(rng=rng)

    try:
        Console(game).play()
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed, exiting.")
        return 1
    return 0


def main() -> None:
    """Parse arguments and run the game."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play on an 8x8 board from the terminal"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    args = parser.parse_args()
    sys.exit(play(args))


if __name__ == "__main__":
    main()
