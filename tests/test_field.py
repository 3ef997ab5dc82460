import random

import pytest

from snek.control import Control, Direction, Polarity
from snek.field import Cell, Field, TickOutcome, Tile, wrap_step
from snek.settings import COLS, ROWS, GameSettings


@pytest.mark.parametrize("limit", [1, 2, 15, 30])
def test_wrap_step_stays_in_range_and_reverses(limit):
    for position in range(limit):
        forward = wrap_step(position, Polarity.POSITIVE, limit)
        backward = wrap_step(position, Polarity.NEGATIVE, limit)
        assert 0 <= forward < limit
        assert 0 <= backward < limit
        assert wrap_step(forward, Polarity.NEGATIVE, limit) == position
        assert wrap_step(backward, Polarity.POSITIVE, limit) == position


def test_wrap_step_edges():
    assert wrap_step(29, Polarity.POSITIVE, 30) == 0
    assert wrap_step(0, Polarity.NEGATIVE, 30) == 29


def test_new_field(rng):
    field = Field.new(rng=rng)
    assert (field.rows, field.cols) == (ROWS, COLS)
    assert field.head == Cell(7, 14)
    assert field.tail == Cell(7, 13)
    assert field.length == 2
    assert len(field.food_cells()) == 1
    assert field.tile_at(field.food_cells()[0]) is Tile.FOOD


def test_first_ordinary_move(rng):
    field = Field.from_body([Cell(7, 13), Cell(7, 14)], ROWS, COLS, food=Cell(0, 0), rng=rng)

    assert field.advance(Direction.RIGHT) is TickOutcome.MOVED

    assert field.head == Cell(7, 15)
    assert field.tail == Cell(7, 14)
    assert field.tile_at(Cell(7, 14)) is Tile.SNAKE
    assert field.tile_at(Cell(7, 15)) is Tile.SNAKE
    assert field.tile_at(Cell(7, 13)) is Tile.EMPTY


def test_move_into_empty_keeps_length(rng):
    body = [Cell(3, 3), Cell(3, 4), Cell(3, 5), Cell(4, 5)]
    field = Field.from_body(body, 10, 10, food=Cell(0, 0), rng=rng)

    assert field.advance(Direction.DOWN) is TickOutcome.MOVED

    assert field.length == 4
    assert field.tile_at(Cell(3, 3)) is Tile.EMPTY
    assert field.tail == Cell(3, 4)
    assert field.head == Cell(5, 5)
    assert field.food_cells() == [Cell(0, 0)]


def test_eating_grows_and_respawns_food(rng):
    field = Field.from_body([Cell(2, 2), Cell(2, 3)], 6, 6, food=Cell(2, 4), rng=rng)

    assert field.advance(Direction.RIGHT) is TickOutcome.ATE

    assert field.length == 3
    assert field.tail == Cell(2, 2)
    assert field.head == Cell(2, 4)
    food = field.food_cells()
    assert len(food) == 1
    assert food[0] not in field.body


def test_movement_wraps_around_edges(rng):
    field = Field.from_body([Cell(0, 28), Cell(0, 29)], ROWS, COLS, food=Cell(5, 5), rng=rng)
    field.advance(Direction.RIGHT)
    assert field.head == Cell(0, 0)

    field.advance(Direction.UP)
    assert field.head == Cell(ROWS - 1, 0)


@pytest.mark.parametrize("length", range(2, 9))
def test_running_into_own_neck_collides(length):
    body = [Cell(0, col) for col in range(length)]
    field = Field.from_body(body, 3, 10)
    before = field.rows_of_tiles()

    assert field.advance(Direction.LEFT) is TickOutcome.COLLIDED
    assert field.rows_of_tiles() == before
    assert field.length == length


@pytest.mark.parametrize("length", range(6, 11))
def test_running_into_body_loop_collides(length):
    # A hook: right along row 1, down, then back left along row 2 and up
    # so the head sits just below a body segment.
    body = [Cell(1, col) for col in range(2, length - 1)]
    last = body[-1].col
    body += [Cell(2, last), Cell(2, last - 1), Cell(2, last - 2)]
    field = Field.from_body(body, 5, 12)

    assert field.advance(Direction.UP) is TickOutcome.COLLIDED


def test_running_into_tail_collides():
    # The tail still occupies its cell when the head arrives
    body = [Cell(0, 0), Cell(0, 1), Cell(1, 1), Cell(1, 0)]
    field = Field.from_body(body, 4, 4)
    assert field.advance(Direction.UP) is TickOutcome.COLLIDED


def test_eating_the_last_food_on_a_full_field():
    field = Field.from_body([Cell(0, 0), Cell(0, 1)], 1, 3, food=Cell(0, 2))

    assert field.advance(Direction.RIGHT) is TickOutcome.ATE

    assert field.length == 3
    assert field.food_cells() == []
    assert field.empty_cells() == []


def test_food_respawns_on_the_only_empty_cell():
    field = Field.from_body([Cell(0, 0), Cell(0, 1)], 1, 4, food=Cell(0, 2))
    field.advance(Direction.RIGHT)
    assert field.food_cells() == [Cell(0, 3)]


def test_place_food_is_uniform_over_empty_cells():
    counts = {}
    for seed in range(2000):
        field = Field.from_body([Cell(0, 0)], 2, 2, rng=random.Random(seed))
        cell = field.place_food()
        counts[cell] = counts.get(cell, 0) + 1

    assert set(counts) == {Cell(0, 1), Cell(1, 0), Cell(1, 1)}
    for count in counts.values():
        assert 550 < count < 780


def test_place_food_without_room():
    field = Field.from_body([Cell(0, 0), Cell(0, 1)], 1, 2)
    assert field.place_food() is None
    assert field.food_cells() == []


def test_from_body_rejects_bad_positions():
    with pytest.raises(ValueError):
        Field.from_body([], 3, 3)
    with pytest.raises(ValueError):
        Field.from_body([Cell(0, 0), Cell(0, 0)], 3, 3)
    with pytest.raises(ValueError):
        Field.from_body([Cell(3, 0)], 3, 3)
    with pytest.raises(ValueError):
        Field.from_body([Cell(0, 0)], 3, 3, food=Cell(0, 0))


def test_settings_reject_tiny_board():
    with pytest.raises(ValueError):
        GameSettings(rows=0)


def test_corridor_snake_never_reverses(rng):
    # A one-row corridor: only horizontal moves make sense, and mashing the
    # opposite key must not turn the snake into its own neck.
    control = Control(Direction.RIGHT)
    field = Field.from_body([Cell(0, 0), Cell(0, 1), Cell(0, 2)], 1, 8, food=Cell(0, 6), rng=rng)
    for _ in range(20):
        control.propose(Direction.LEFT)
        assert field.advance(control.commit()) is not TickOutcome.COLLIDED
        if field.length == field.cols - 1:
            break
