#!/usr/bin/env python3
"""
Snek! - terminal snake

Controls:
- Arrow keys or WASD to turn
- R to restart after game over
- Esc or Q to quit
"""

import argparse
import curses
import logging
import sys

from .game import SnekGame
from .settings import COLS, RESTART_HINT, ROWS
from .terminal import CursesTerminal


logger = logging.getLogger("snek")

MIN_HEIGHT = ROWS + 2
MIN_WIDTH = max(COLS, len(RESTART_HINT)) + 1


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="snek", description="Terminal snake game")
    parser.add_argument("--log-file", help="write log records to this file")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    return parser.parse_args(argv)


def configure_logging(log_file=None, debug=False):
    """Logs go to a file only; the screen belongs to curses."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(threadName)s %(name)s %(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def main(stdscr):
    """Main function that runs the game"""
    height, width = stdscr.getmaxyx()
    if height < MIN_HEIGHT or width < MIN_WIDTH:
        stdscr.addstr(0, 0, "Terminal too small!")
        stdscr.addstr(1, 0, f"Minimum size: {MIN_WIDTH}x{MIN_HEIGHT}")
        stdscr.addstr(2, 0, "Press any key to exit...")
        stdscr.getch()
        return 1

    game = SnekGame(CursesTerminal(stdscr))
    return game.run()


def run(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.debug)
    try:
        return curses.wrapper(main)
    except KeyboardInterrupt:
        print("Game interrupted by user.")
        return 130


if __name__ == "__main__":
    sys.exit(run())
