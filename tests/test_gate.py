import random

import pytest

from snakegate.gamemap import GameMap
from snakegate.gate import GateManager
from snakegate.maps import stage_map
from snakegate.point import Direction, Point


class FakeScreen:
    def __init__(self):
        self.calls = []

    def addstr(self, y, x, text):
        self.calls.append((y, x, text))


SMALL = ["21112", "1   1", "21112"]


def make(rows, seed=0):
    return GateManager(GameMap(rows), random.Random(seed))


@pytest.mark.parametrize("seed", range(10))
def test_spawn_gates_on_distinct_walls(seed):
    gm = make(stage_map(1), seed)
    gm.spawn_gates(gm.game_map.width, gm.game_map.height)
    assert gm.gate_a != gm.gate_b
    assert gm.game_map.is_wall(gm.gate_a)
    assert gm.game_map.is_wall(gm.gate_b)


def test_spawn_gates_two_walls_uses_both():
    rows = ["2 1", "   ", "1 2"]
    gm = make(rows)
    gm.spawn_gates(3, 3)
    assert {gm.gate_a, gm.gate_b} == {Point(2, 0), Point(0, 2)}


def test_spawn_gates_too_few_walls_leaves_gates():
    gm = make(["2 1", "   "])
    gm.spawn_gates(3, 2)
    assert gm.gate_a == Point()
    assert gm.gate_b == Point()


def test_is_gate_and_position():
    gm = make(stage_map(1))
    gm.gate_a, gm.gate_b = Point(5, 0), Point(0, 5)
    assert gm.is_gate(Point(5, 0))
    assert gm.is_gate_position(Point(0, 5))
    assert not gm.is_gate(Point(1, 1))
    assert not gm.is_gate_position(Point(5, 5))


def test_valid_direction_keeps_open_preference():
    gm = make(stage_map(1))
    assert gm.valid_direction(Point(10, 0), Direction.DOWN) is Direction.DOWN
    assert gm.valid_direction(Point(0, 5), Direction.RIGHT) is Direction.RIGHT


def test_valid_direction_finds_alternative():
    gm = make(SMALL)
    assert gm.valid_direction(Point(2, 0), Direction.UP) is Direction.DOWN


def test_valid_direction_right_blocked_prefers_up_check():
    gm = make(SMALL)
    # Right of the middle bottom wall is wall; the cell above is open.
    assert gm.valid_direction(Point(2, 2), Direction.RIGHT) is Direction.UP


def test_other_gate_from_top_exits_edge_inward():
    gm = make(stage_map(1))
    gm.gate_a, gm.gate_b = Point(5, 0), Point(0, 5)
    assert gm.other_gate(Point(5, 0), Direction.UP) == (Point(0, 5), Direction.RIGHT)
    assert gm.other_gate(Point(0, 5), Direction.LEFT) == (Point(5, 0), Direction.DOWN)


def test_other_gate_bottom_and_right_edges():
    gm = make(stage_map(1))
    bottom = Point(7, gm.game_map.height - 1)
    right = Point(gm.game_map.width - 1, 4)
    gm.gate_a, gm.gate_b = bottom, right
    assert gm.other_gate(bottom, Direction.DOWN) == (right, Direction.LEFT)
    assert gm.other_gate(right, Direction.RIGHT) == (bottom, Direction.UP)


def test_other_gate_interior():
    rows = stage_map(4)
    x = rows[2].index("1", 1)
    inner = Point(x, 2)
    gm = make(rows)
    gm.gate_a, gm.gate_b = Point(5, 0), inner
    assert gm.other_gate(Point(5, 0), Direction.UP) == (inner, Direction.RIGHT)
    assert gm.other_gate(Point(5, 0), Direction.LEFT) == (inner, Direction.LEFT)
    assert gm.other_gate(Point(5, 0), Direction.STOP) == (inner, Direction.DOWN)


def test_draw_marks_gates():
    gm = make(stage_map(1))
    gm.gate_a, gm.gate_b = Point(5, 0), Point(0, 5)
    screen = FakeScreen()
    gm.draw(screen)
    assert screen.calls == [(1, 6, "A"), (6, 1, "B")]