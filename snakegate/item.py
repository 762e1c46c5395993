"""Growth, poison and speed items scattered over the board."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any

from .gamemap import GameMap
from .point import Point

OPEN = " "
GROWTH_COUNT = 3
POISON_COUNT = 3
SPEED_COUNT = 2


class ItemManager:
    """Keeps track of the items currently on the board."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.growth_items: list[Point] = []
        self.poison_items: list[Point] = []
        self.speed_items: list[Point] = []

    def spawn_items(
        self,
        width: int,
        height: int,
        game_map: GameMap,
        snake_body: Iterable[Point],
    ) -> None:
        """Replace all items with freshly placed ones on open cells."""
        occupied = set(snake_body)
        rows = game_map.map_data

        def is_free(p: Point) -> bool:
            return rows[p.y][p.x] == OPEN and p not in occupied

        if not any(
            is_free(Point(x, y)) for y in range(height) for x in range(width)
        ):
            raise ValueError("no open cell to place an item on")

        def pick() -> Point:
            while True:
                p = Point(self.rng.randrange(width), self.rng.randrange(height))
                if is_free(p):
                    return p

        self.growth_items = []
        self.poison_items = []
        self.speed_items = []
        for _ in range(GROWTH_COUNT):
            self.growth_items.append(pick())
            self.poison_items.append(pick())
        self.speed_items = [pick() for _ in range(SPEED_COUNT)]

    def is_item(self, p: Point) -> bool:
        """True if any item lies at ``p``."""
        return p in self.growth_items or p in self.poison_items or p in self.speed_items

    def is_growth_item(self, p: Point) -> bool:
        """True if a growth item lies at ``p``."""
        return p in self.growth_items

    def is_speed_item(self, p: Point) -> bool:
        """True if a speed item lies at ``p``."""
        return p in self.speed_items

    def remove_item(self, p: Point) -> None:
        """Remove one item at ``p``: growth first, then poison, then speed."""
        for items in (self.growth_items, self.poison_items, self.speed_items):
            if p in items:
                items.remove(p)
                return

    def draw(self, screen: Any) -> None:
        """Mark items as ``G``, ``P`` and ``S``."""
        for mark, items in (
            ("G", self.growth_items),
            ("P", self.poison_items),
            ("S", self.speed_items),
        ):
            for item in items:
                screen.addstr(item.y + 1, item.x + 1, mark)