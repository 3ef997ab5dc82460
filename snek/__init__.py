"""
Snek! - a real-time terminal snake game.
"""

import logging

from .control import Axis, Control, Direction, Polarity
from .field import Cell, Field, TickOutcome, Tile, wrap_step
from .game import Simulation, SnekGame
from .listener import InputListener
from .renderer import FieldRenderer
from .settings import COLS, ROWS, GameSettings
from .terminal import CursesTerminal, Key, Terminal, TerminalError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    'Axis', 'Polarity', 'Direction', 'Control',
    'Cell', 'Tile', 'TickOutcome', 'Field', 'wrap_step',
    'FieldRenderer', 'InputListener', 'Simulation', 'SnekGame',
    'Terminal', 'CursesTerminal', 'Key', 'TerminalError',
    'GameSettings', 'ROWS', 'COLS',
]
