"""A pair of gates on the board's walls that carry the snake between them."""

from __future__ import annotations

import random
from typing import Any

from .gamemap import WALL, GameMap
from .point import Direction, Point

_STEP = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}

# For each blocked preferred direction: the neighbouring cell to test
# (as an offset from the gate) and the direction to take if it is open.
_FALLBACKS: dict[Direction, tuple[tuple[Point, Direction], ...]] = {
    Direction.UP: (
        (Point(-1, 0), Direction.LEFT),
        (Point(1, 0), Direction.RIGHT),
        (Point(0, -1), Direction.UP),
        (Point(0, 1), Direction.DOWN),
    ),
    Direction.DOWN: (
        (Point(-1, 0), Direction.LEFT),
        (Point(1, 0), Direction.RIGHT),
        (Point(0, 1), Direction.DOWN),
        (Point(0, -1), Direction.UP),
    ),
    Direction.LEFT: (
        (Point(0, -1), Direction.DOWN),
        (Point(0, 1), Direction.UP),
        (Point(-1, 0), Direction.LEFT),
        (Point(1, 0), Direction.RIGHT),
    ),
    Direction.RIGHT: (
        (Point(0, -1), Direction.UP),
        (Point(0, 1), Direction.DOWN),
        (Point(1, 0), Direction.RIGHT),
        (Point(-1, 0), Direction.LEFT),
    ),
}


class GateManager:
    """Places two gates on wall cells and works out where the snake exits."""

    def __init__(self, game_map: GameMap, rng: random.Random | None = None) -> None:
        self.game_map = game_map
        self.rng = rng if rng is not None else random.Random()
        self.gate_a = Point()
        self.gate_b = Point()

    def spawn_gates(self, width: int, height: int) -> None:
        """Put both gates on two distinct, randomly chosen wall cells."""
        rows = self.game_map.map_data
        walls = [
            Point(x, y)
            for y in range(height)
            for x in range(width)
            if rows[y][x] == WALL
        ]
        if len(walls) >= 2:
            self.gate_a = walls.pop(self.rng.randrange(len(walls)))
            self.gate_b = walls[self.rng.randrange(len(walls))]

    def is_gate(self, p: Point) -> bool:
        """True if ``p`` is one of the two gates."""
        return p in (self.gate_a, self.gate_b)

    def is_gate_position(self, p: Point) -> bool:
        """True if ``p`` is one of the two gates."""
        return self.is_gate(p)

    def _is_open(self, p: Point) -> bool:
        game_map = self.game_map
        if not (0 <= p.x < game_map.width and 0 <= p.y < game_map.height):
            return False
        row = game_map.map_data[p.y]
        return p.x < len(row) and row[p.x] != WALL

    def valid_direction(self, gate: Point, preferred: Direction) -> Direction:
        """Direction to leave ``gate`` by, keeping ``preferred`` if it is open."""
        if self._is_open(gate + _STEP.get(preferred, Point())):
            return preferred
        for offset, direction in _FALLBACKS.get(preferred, ()):
            if self._is_open(gate + offset):
                return direction
        return preferred

    def other_gate(self, p: Point, direction: Direction) -> tuple[Point, Direction]:
        """Return the gate opposite ``p`` and the direction to leave it by."""
        exit_gate = self.gate_b if p == self.gate_a else self.gate_a
        height = self.game_map.height
        width = self.game_map.width

        if exit_gate.y == 0:
            preferred = Direction.DOWN
        elif exit_gate.y == height - 1:
            preferred = Direction.UP
        elif exit_gate.x == 0:
            preferred = Direction.RIGHT
        elif exit_gate.x == width - 1:
            preferred = Direction.LEFT
        elif direction in (Direction.UP, Direction.RIGHT):
            preferred = Direction.RIGHT
        elif direction is Direction.LEFT:
            preferred = Direction.LEFT
        else:
            preferred = Direction.DOWN

        return exit_gate, self.valid_direction(exit_gate, preferred)

    def draw(self, screen: Any) -> None:
        """Mark the gates as ``A`` and ``B``."""
        screen.addstr(self.gate_a.y + 1, self.gate_a.x + 1, "A")
        screen.addstr(self.gate_b.y + 1, self.gate_b.x + 1, "B")