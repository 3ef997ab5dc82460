"""
Terminal layer used by the renderer and the input listener.

`Terminal` is the small set of operations the game needs; `CursesTerminal`
provides them on top of curses. Output is buffered by curses until flush().
"""

import curses
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union


class TerminalError(Exception):
    """A terminal operation failed."""


class Key(Enum):
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    ESCAPE = "escape"
    UNKNOWN = "unknown"


# read_key() returns either a special Key or the typed character
KeyPress = Union[Key, str]

ESCAPE_CODE = 27


class Terminal(ABC):

    @abstractmethod
    def clear_screen(self):
        pass

    @abstractmethod
    def move_cursor_to(self, x: int, y: int):
        pass

    @abstractmethod
    def move_cursor_down(self, n: int):
        pass

    @abstractmethod
    def clear_line(self):
        pass

    @abstractmethod
    def write_str(self, text: str):
        pass

    @abstractmethod
    def flush(self):
        pass

    @abstractmethod
    def read_key(self) -> KeyPress:
        """Block until a key is pressed."""

    @abstractmethod
    def set_title(self, title: str):
        pass


class CursesTerminal(Terminal):
    """
    Curses implementation.

    Drawing goes to the main screen and keys are read from a separate 1x1
    window, so the blocking getch() on the input thread never refreshes the
    screen the simulation thread draws on. This does not make the two threads
    safe against each other: ncurses is not thread-safe, and a refresh() on one
    thread can overlap the getch() on the other. The split only keeps the two
    calls on separate windows.
    """

    KEY_MAP = {
        curses.KEY_UP: Key.ARROW_UP,
        curses.KEY_DOWN: Key.ARROW_DOWN,
        curses.KEY_LEFT: Key.ARROW_LEFT,
        curses.KEY_RIGHT: Key.ARROW_RIGHT,
        ESCAPE_CODE: Key.ESCAPE,
    }

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._y = 0
        self._x = 0
        try:
            curses.set_escdelay(25)
            curses.curs_set(0)
            curses.noecho()
            curses.cbreak()
            height, width = stdscr.getmaxyx()
            self.input_window = curses.newwin(1, 1, height - 1, width - 1)
            self.input_window.keypad(True)
        except curses.error as exc:
            raise TerminalError(f"Terminal setup failed: {exc}") from exc

    def clear_screen(self):
        self.stdscr.erase()
        self._y = self._x = 0

    def move_cursor_to(self, x: int, y: int):
        self._x = x
        self._y = y

    def move_cursor_down(self, n: int):
        self._y += n

    def clear_line(self):
        self._x = 0
        try:
            self.stdscr.move(self._y, 0)
            self.stdscr.clrtoeol()
        except curses.error as exc:
            raise TerminalError(f"Cannot clear line {self._y}: {exc}") from exc

    def write_str(self, text: str):
        try:
            self.stdscr.addstr(self._y, self._x, text)
        except curses.error as exc:
            raise TerminalError(f"Cannot write at ({self._x}, {self._y}): {exc}") from exc
        self._x += len(text)

    def flush(self):
        try:
            self.stdscr.refresh()
        except curses.error as exc:
            raise TerminalError(f"Screen refresh failed: {exc}") from exc

    def read_key(self) -> KeyPress:
        try:
            code = self.input_window.getch()
        except curses.error as exc:
            raise TerminalError(f"Reading a key failed: {exc}") from exc
        # getch() reports EOF or a hung-up terminal as ERR instead of raising
        if code == curses.ERR:
            raise TerminalError("Reading a key failed: terminal returned ERR")
        if code in self.KEY_MAP:
            return self.KEY_MAP[code]
        if 32 <= code <= 126:
            return chr(code)
        return Key.UNKNOWN

    def set_title(self, title: str):
        # xterm-style OSC 0 sequence, ignored by terminals without titles
        sys.stdout.write(f"\x1b]0;{title}\x07")
        sys.stdout.flush()
