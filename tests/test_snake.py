import random

import pytest

from snakegate.gamemap import GameMap
from snakegate.gate import GateManager
from snakegate.maps import stage_map
from snakegate.point import Direction, Point
from snakegate.snake import Snake


@pytest.fixture
def gates():
    gm = GateManager(GameMap(stage_map(1)), random.Random(0))
    gm.gate_a, gm.gate_b = Point(5, 0), Point(0, 5)
    return gm


@pytest.fixture
def snake(gates):
    return Snake(gates)


def test_initial_body(snake):
    assert snake.body == [Point(30, 11), Point(29, 11), Point(28, 11), Point(27, 11)]
    assert snake.head == Point(30, 11)


@pytest.mark.parametrize(
    "direction, head",
    [
        (Direction.RIGHT, Point(31, 11)),
        (Direction.LEFT, Point(29, 11)),
        (Direction.UP, Point(30, 10)),
        (Direction.DOWN, Point(30, 12)),
    ],
)
def test_move_shifts_body(snake, direction, head):
    before = list(snake.body)
    snake.move(direction)
    assert snake.head == head
    assert snake.body[1:] == before[:-1]
    assert len(snake.body) == len(before)


def test_move_stop_keeps_head(snake):
    before = list(snake.body)
    snake.move(Direction.STOP)
    assert snake.body == [before[0], before[0], before[1], before[2]]


def test_collision(snake):
    assert snake.is_collision(Point(29, 11))
    assert not snake.is_collision(Point(30, 11))
    snake.move(Direction.LEFT)
    assert snake.is_collision(snake.head)


def test_is_gate(snake):
    assert snake.is_gate(Point(5, 0))
    assert snake.is_gate(Point(0, 5))
    assert not snake.is_gate(Point(30, 11))


def test_grow_and_shrink(snake):
    snake.grow()
    assert len(snake.body) == 5
    assert snake.body[-1] == Point()
    snake.shrink()
    snake.shrink()
    assert snake.body == [Point(30, 11), Point(29, 11), Point(28, 11)]


def test_shrink_empty_raises(snake):
    snake.body = []
    with pytest.raises(IndexError):
        snake.shrink()


def test_set_head(snake):
    snake.set_head(Point(3, 4))
    assert snake.head == Point(3, 4)
    assert snake.body[1] == Point(29, 11)


def test_handle_gate_teleports(snake):
    snake.set_head(Point(5, 0))
    direction = snake.handle_gate(Direction.UP)
    assert direction is Direction.RIGHT
    assert snake.head == Point(0, 5)
    assert snake.body[1] == Point(0, 5)


def test_handle_gate_off_gate_does_nothing(snake):
    before = list(snake.body)
    assert snake.handle_gate(Direction.LEFT) is Direction.LEFT
    assert snake.body == before