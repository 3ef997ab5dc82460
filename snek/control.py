"""
Direction state shared between the input thread and the simulation thread.
"""

import logging
import threading
from enum import Enum


logger = logging.getLogger(__name__)


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Polarity(Enum):
    POSITIVE = 1
    NEGATIVE = -1


class Direction(Enum):
    UP = (Axis.VERTICAL, Polarity.NEGATIVE)
    DOWN = (Axis.VERTICAL, Polarity.POSITIVE)
    LEFT = (Axis.HORIZONTAL, Polarity.NEGATIVE)
    RIGHT = (Axis.HORIZONTAL, Polarity.POSITIVE)

    @property
    def axis(self) -> Axis:
        return self.value[0]

    @property
    def polarity(self) -> Polarity:
        return self.value[1]


class Control:
    """
    The current and the next requested direction, guarded by one lock.

    The input thread calls propose() per key press, the simulation thread
    calls commit() once per tick. The lock is held only inside these calls.
    """

    def __init__(self, initial: Direction = Direction.RIGHT):
        self._lock = threading.Lock()
        self._current = initial
        self._next = initial

    @property
    def current(self) -> Direction:
        with self._lock:
            return self._current

    def propose(self, direction: Direction) -> bool:
        """Request a turn; only turns across the current axis are kept."""
        with self._lock:
            if direction.axis == self._current.axis:
                return False
            self._next = direction
            return True

    def commit(self) -> Direction:
        """Make the pending direction current and return it."""
        with self._lock:
            self._current = self._next
            return self._current

    def reset(self, direction: Direction = Direction.RIGHT):
        with self._lock:
            self._current = direction
            self._next = direction
        logger.debug("Control reset to %s", direction.name)
