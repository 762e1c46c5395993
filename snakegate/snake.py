"""The snake: a head followed by its body segments."""

from __future__ import annotations

from .gate import GateManager
from .point import Direction, Point

_STEP = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}

START_HEAD = Point(30, 11)
START_LENGTH = 4


class Snake:
    """A list of segments, head first."""

    def __init__(self, gate_manager: GateManager) -> None:
        self.gate_manager = gate_manager
        self.growth = False
        self.body: list[Point] = [
            Point(START_HEAD.x - i, START_HEAD.y) for i in range(START_LENGTH)
        ]

    def move(self, direction: Direction) -> None:
        """Advance the head one cell; every segment follows the one before."""
        new_head = self.body[0] + _STEP.get(direction, Point())
        self.body = [new_head, *self.body[:-1]]

    def is_collision(self, p: Point) -> bool:
        """True if ``p`` lies on the body behind the head."""
        return p in self.body[1:]

    def is_gate(self, p: Point) -> bool:
        """True if ``p`` is one of the gates."""
        return p in (self.gate_manager.gate_a, self.gate_manager.gate_b)

    def grow(self) -> None:
        """Append a segment at the origin."""
        self.body.append(Point())

    def shrink(self) -> None:
        """Drop the last segment."""
        if not self.body:
            raise IndexError("the snake has no segments left")
        self.body.pop()

    @property
    def head(self) -> Point:
        """The head segment."""
        return self.body[0]

    def set_head(self, new_head: Point) -> None:
        """Move the head to ``new_head`` without moving the body."""
        self.body[0] = new_head

    def handle_gate(self, direction: Direction) -> Direction:
        """Carry the head through a gate it stands on; return the new direction."""
        if not self.is_gate(self.head):
            return direction
        new_head, direction = self.gate_manager.other_gate(self.head, direction)
        self.set_head(new_head)
        if len(self.body) > 1:
            self.body[1] = new_head
        return direction