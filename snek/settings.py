"""
Fixed game constants.

The board size, the tick pace and the starting position are compile-time
values; nothing here is read from files or the environment.
"""

from dataclasses import dataclass
from typing import Tuple


ROWS = 15
COLS = 30

# Seconds between two simulation ticks
TICK_INTERVAL = 0.1

START_HEAD = (7, 14)
START_TAIL = (7, 13)

WINDOW_TITLE = "Snek!"

EMPTY_GLYPH = "."
SNAKE_GLYPH = "@"
FOOD_GLYPH = "$"

GAME_OVER_TEXT = "GAME OVER!"
RESTART_HINT = "R: restart | Esc/Q: quit"


@dataclass(frozen=True)
class GameSettings:
    rows: int = ROWS
    cols: int = COLS
    tick_interval: float = TICK_INTERVAL
    start_head: Tuple[int, int] = START_HEAD
    start_tail: Tuple[int, int] = START_TAIL
    title: str = WINDOW_TITLE

    def __post_init__(self):
        if self.rows < 1 or self.cols < 2:
            raise ValueError(f"Board too small: {self.rows}x{self.cols}")
