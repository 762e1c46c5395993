"""The walled board the snake moves on."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .point import Point

WALL = "1"


class GameMap:
    """A rectangular board given as rows of characters.

    ``'1'`` marks a wall a gate may sit on, ``'2'`` a corner wall and
    ``' '`` an open cell.
    """

    def __init__(self, map_data: Sequence[str]) -> None:
        self.map_data: list[str] = []
        self.width = 0
        self.height = 0
        self.change_map(map_data)

    def change_map(self, new_map_data: Sequence[str]) -> None:
        """Replace the board with new rows."""
        rows = list(new_map_data)
        if not rows:
            raise ValueError("a map needs at least one row")
        self.map_data = rows
        self.height = len(rows)
        self.width = len(rows[0])

    def _cell(self, p: Point) -> str:
        if not (0 <= p.y < self.height and 0 <= p.x < len(self.map_data[p.y])):
            raise IndexError(f"{p} lies outside the map")
        return self.map_data[p.y][p.x]

    def is_wall(self, p: Point) -> bool:
        """True if the cell at ``p`` is a (non-corner) wall."""
        return self._cell(p) == WALL

    def draw(self, screen: Any) -> None:
        """Write every row to ``screen``, offset by one row and column."""
        for y, row in enumerate(self.map_data):
            screen.addstr(y + 1, 1, row)