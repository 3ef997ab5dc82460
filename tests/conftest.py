import random
import threading
from typing import List

import pytest

from snek.terminal import Key, Terminal


class FakeTerminal(Terminal):
    """
    In-memory terminal: a character grid plus a scripted key queue.

    A queued key may be a callable; it is called when read and its result is
    used as the key, which lets a test wait for game events before pressing.
    Once the queue is empty, read_key() returns Escape.
    """

    def __init__(self, rows=20, cols=40, keys=None):
        self.rows = rows
        self.cols = cols
        self.keys = list(keys or [])
        self.screen = [[" "] * cols for _ in range(rows)]
        self.x = 0
        self.y = 0
        self.flushes = 0
        self.title = None
        self.lock = threading.Lock()

    def clear_screen(self):
        with self.lock:
            self.screen = [[" "] * self.cols for _ in range(self.rows)]
            self.x = self.y = 0

    def move_cursor_to(self, x, y):
        self.x, self.y = x, y

    def move_cursor_down(self, n):
        self.y += n

    def clear_line(self):
        with self.lock:
            self.x = 0
            self.screen[self.y] = [" "] * self.cols

    def write_str(self, text):
        with self.lock:
            for ch in text:
                self.screen[self.y][self.x] = ch
                self.x += 1

    def flush(self):
        self.flushes += 1

    def read_key(self):
        if not self.keys:
            return Key.ESCAPE
        key = self.keys.pop(0)
        return key() if callable(key) else key

    def set_title(self, title):
        self.title = title

    def lines(self) -> List[str]:
        with self.lock:
            return ["".join(row) for row in self.screen]


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def rng():
    return random.Random(1234)
