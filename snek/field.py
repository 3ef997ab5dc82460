"""
The playfield and the per-tick advancement of the snake.

The snake body is an ordered deque of cells (tail on the left, head on the
right). The grid of tiles mirrors it for constant-time occupancy lookups and
for rendering. Edges wrap around: leaving one side re-enters on the opposite
side of the same row or column.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterable, List, Optional

from .control import Axis, Direction, Polarity
from .settings import GameSettings


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cell:
    row: int
    col: int


class Tile(Enum):
    EMPTY = "empty"
    SNAKE = "snake"
    FOOD = "food"


class TickOutcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    COLLIDED = "collided"


def wrap_step(position: int, polarity: Polarity, limit: int) -> int:
    """Move one step along an axis of length `limit`, wrapping at both ends."""
    if polarity is Polarity.POSITIVE:
        return 0 if position == limit - 1 else position + 1
    return limit - 1 if position == 0 else position - 1


class Field:
    def __init__(self, rows: int, cols: int, rng: Optional[random.Random] = None):
        self.rows = rows
        self.cols = cols
        self._rng = rng or random.Random()
        self._grid: List[List[Tile]] = [[Tile.EMPTY] * cols for _ in range(rows)]
        self._body: Deque[Cell] = deque()

    @classmethod
    def new(cls, settings: GameSettings = GameSettings(), rng: Optional[random.Random] = None) -> "Field":
        """The starting position: a two-segment snake and one piece of food."""
        body = [Cell(*settings.start_tail), Cell(*settings.start_head)]
        field = cls.from_body(body, settings.rows, settings.cols, rng=rng)
        field.place_food()
        return field

    @classmethod
    def from_body(cls, body: Iterable[Cell], rows: int, cols: int,
                  food: Optional[Cell] = None, rng: Optional[random.Random] = None) -> "Field":
        """Build a field from body cells ordered tail first, head last."""
        field = cls(rows, cols, rng=rng)
        for cell in body:
            field._check_bounds(cell)
            if field._grid[cell.row][cell.col] is Tile.SNAKE:
                raise ValueError(f"Snake overlaps itself at {cell}")
            field._grid[cell.row][cell.col] = Tile.SNAKE
            field._body.append(cell)
        if not field._body:
            raise ValueError("Snake needs at least one segment")
        if food is not None:
            field._check_bounds(food)
            if field._grid[food.row][food.col] is not Tile.EMPTY:
                raise ValueError(f"Food cell {food} is occupied")
            field._grid[food.row][food.col] = Tile.FOOD
        return field

    def _check_bounds(self, cell: Cell):
        if not (0 <= cell.row < self.rows and 0 <= cell.col < self.cols):
            raise ValueError(f"{cell} is outside the {self.rows}x{self.cols} field")

    @property
    def head(self) -> Cell:
        return self._body[-1]

    @property
    def tail(self) -> Cell:
        return self._body[0]

    @property
    def length(self) -> int:
        return len(self._body)

    @property
    def body(self) -> List[Cell]:
        return list(self._body)

    def tile_at(self, cell: Cell) -> Tile:
        return self._grid[cell.row][cell.col]

    def rows_of_tiles(self) -> List[List[Tile]]:
        return [list(row) for row in self._grid]

    def empty_cells(self) -> List[Cell]:
        return [Cell(row, col)
                for row in range(self.rows)
                for col in range(self.cols)
                if self._grid[row][col] is Tile.EMPTY]

    def food_cells(self) -> List[Cell]:
        return [Cell(row, col)
                for row in range(self.rows)
                for col in range(self.cols)
                if self._grid[row][col] is Tile.FOOD]

    def place_food(self) -> Optional[Cell]:
        """Put food on a uniformly chosen empty cell, if there is one."""
        empty = self.empty_cells()
        if not empty:
            logger.info("No empty cell left, food not placed")
            return None
        cell = self._rng.choice(empty)
        self._grid[cell.row][cell.col] = Tile.FOOD
        logger.debug("Food placed at (%d, %d)", cell.row, cell.col)
        return cell

    def next_head(self, direction: Direction) -> Cell:
        head = self.head
        if direction.axis is Axis.HORIZONTAL:
            return Cell(head.row, wrap_step(head.col, direction.polarity, self.cols))
        return Cell(wrap_step(head.row, direction.polarity, self.rows), head.col)

    def advance(self, direction: Direction) -> TickOutcome:
        """
        Move the snake one cell in `direction`.

        Food under the new head is eaten and respawned elsewhere, and the tail
        stays put so the snake grows. Running into any body segment, the tail
        included, is a collision and leaves the field untouched. Otherwise the
        tail retracts by one segment.
        """
        new_head = self.next_head(direction)
        tile = self.tile_at(new_head)

        if tile is Tile.SNAKE:
            logger.info("Collision at (%d, %d), length %d", new_head.row, new_head.col, self.length)
            return TickOutcome.COLLIDED

        # The head cell must be claimed before the respawn scan so food
        # never lands under the head.
        self._grid[new_head.row][new_head.col] = Tile.SNAKE
        self._body.append(new_head)

        if tile is Tile.FOOD:
            self.place_food()
            return TickOutcome.ATE

        old_tail = self._body.popleft()
        self._grid[old_tail.row][old_tail.col] = Tile.EMPTY
        return TickOutcome.MOVED
