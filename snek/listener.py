"""
Keyboard handling for the input thread.
"""

import logging
from typing import Optional

from .control import Control, Direction
from .terminal import Key, KeyPress


logger = logging.getLogger(__name__)


DIRECTION_KEYS = {
    Key.ARROW_UP: Direction.UP,
    Key.ARROW_DOWN: Direction.DOWN,
    Key.ARROW_LEFT: Direction.LEFT,
    Key.ARROW_RIGHT: Direction.RIGHT,
    'w': Direction.UP, 'W': Direction.UP,
    's': Direction.DOWN, 'S': Direction.DOWN,
    'a': Direction.LEFT, 'A': Direction.LEFT,
    'd': Direction.RIGHT, 'D': Direction.RIGHT,
}

QUIT_KEYS = {Key.ESCAPE, 'q', 'Q'}
RESTART_KEYS = {'r', 'R'}


class InputListener:
    """Translates key presses into turns on the shared Control."""

    def __init__(self, control: Control):
        self.control = control

    def handle(self, key: KeyPress) -> Optional[str]:
        """Handle one key press; returns 'quit', 'restart' or None."""
        if key in QUIT_KEYS:
            return 'quit'

        if key in RESTART_KEYS:
            return 'restart'

        direction = DIRECTION_KEYS.get(key)
        if direction is not None:
            if not self.control.propose(direction):
                logger.debug("Ignored turn to %s", direction.name)
        return None
