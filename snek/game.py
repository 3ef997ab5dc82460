"""
Game loop: the simulation thread and the input loop around it.

Two threads run during a round. The simulation thread owns the field, ticks
it at a fixed pace and draws every frame. The main thread blocks on key
presses and only talks to the simulation through the shared Control and the
shutdown event.
"""

import logging
import random
import threading
from typing import Optional

from .control import Control
from .field import Field, TickOutcome
from .listener import InputListener
from .renderer import FieldRenderer
from .settings import GameSettings
from .terminal import Terminal


logger = logging.getLogger(__name__)


class Simulation(threading.Thread):
    def __init__(self, field: Field, control: Control, renderer: FieldRenderer,
                 shutdown: threading.Event, tick_interval: float):
        super().__init__(name="snek-simulation", daemon=True)
        self.field = field
        self.control = control
        self.renderer = renderer
        self.shutdown = shutdown
        self.tick_interval = tick_interval
        self.game_over = threading.Event()
        self.error: Optional[Exception] = None

    def tick(self) -> TickOutcome:
        """Commit the pending turn, advance the field and draw the result."""
        direction = self.control.commit()
        outcome = self.field.advance(direction)
        if outcome is TickOutcome.COLLIDED:
            self.renderer.draw_game_over(self.field)
        else:
            self.renderer.draw(self.field)
        return outcome

    def run(self):
        try:
            while not self.shutdown.is_set():
                if self.tick() is TickOutcome.COLLIDED:
                    logger.info("Game over, snake length %d", self.field.length)
                    self.game_over.set()
                    break
                # Returns early when a quit is requested
                self.shutdown.wait(self.tick_interval)
        except Exception as exc:
            logger.exception("Simulation stopped by an error")
            self.error = exc
            self.shutdown.set()


class SnekGame:
    def __init__(self, terminal: Terminal, settings: GameSettings = GameSettings(),
                 rng: Optional[random.Random] = None):
        self.terminal = terminal
        self.settings = settings
        self.rng = rng or random.Random()

        self.control = Control()
        self.listener = InputListener(self.control)
        self.renderer = FieldRenderer(terminal)
        self.shutdown = threading.Event()
        self.simulation: Optional[Simulation] = None
        self.rounds = 0

    def new_round(self):
        """Start a fresh field on a new simulation thread."""
        if self.simulation is not None:
            self.simulation.join()
        self.control.reset()
        field = Field.new(self.settings, self.rng)
        self.simulation = Simulation(field, self.control, self.renderer, self.shutdown,
                                     self.settings.tick_interval)
        self.rounds += 1
        logger.info("Round %d started", self.rounds)
        self.simulation.start()

    def start(self):
        self.terminal.set_title(self.settings.title)
        self.new_round()

    def stop(self):
        self.shutdown.set()
        if self.simulation is not None:
            self.simulation.join()

    def handle_key(self, key) -> bool:
        """Process one key press; returns False once the player quits."""
        action = self.listener.handle(key)
        if action == 'quit':
            logger.info("Quit requested")
            return False
        if action == 'restart' and self.simulation.game_over.is_set():
            self.new_round()
        return True

    def run(self) -> int:
        """Play until the player quits and return the process exit status."""
        self.start()
        try:
            while not self.shutdown.is_set():
                if not self.handle_key(self.terminal.read_key()):
                    break
        finally:
            self.stop()

        if self.simulation.error is not None:
            raise self.simulation.error
        return 0
