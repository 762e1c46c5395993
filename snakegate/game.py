"""The game loop: stages, scoring, missions and the terminal front end."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Sequence
from typing import Any

from .gamemap import GameMap
from .gate import GateManager
from .item import ItemManager
from .maps import stage_map
from .point import Direction, Point
from .snake import Snake

# Key codes as reported by a curses window with keypad mode on.
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261
KEY_QUIT = ord("q")

_KEY_DIRECTIONS = {
    KEY_LEFT: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_UP: Direction.UP,
    KEY_DOWN: Direction.DOWN,
}

CENTER = Point(61 // 2, 22 // 2)
START_TICK = 150
MIN_TICK = 50

GROWTH_SCORE = 20
POISON_PENALTY = 10
GATE_SCORE = 20
SPEED_SCORE = 5
SPEED_SCORE_AT_MIN = 10
SPEED_TICK_STEP = 15
MIN_LENGTH = 4

ITEM_RESPAWN_SECONDS = 6

MISSION_LENGTH = 10
MISSION_GROWTH = 5
MISSION_POISON = 2
MISSION_GATES = 1

# (stage reached, score needed, how much the tick drops)
STAGE_UPS: tuple[tuple[int, int, int], ...] = (
    (2, 100, 20),
    (3, 200, 10),
    (4, 300, 10),
)

_BOX_EDGE = "+------------------+"
_BOX_WIDTH = 20
_SCORE_BOX_HEIGHT = 9
_MISSION_BOX_HEIGHT = 6

_ASIDE = {
    Direction.LEFT: Point(1, 0),
    Direction.UP: Point(0, 1),
    Direction.DOWN: Point(0, -1),
}


def _tick_mark(done: bool) -> str:
    return "v" if done else " "


def draw_score_board(
    screen: Any,
    score: int,
    snake_length: int,
    max_length: int,
    growth_count: int,
    poison_count: int,
    gate_count: int,
    width: int,
) -> None:
    """Write a plain score board to the right of a board ``width`` wide."""
    column = width + 4
    screen.addstr(0, column, f"Score: {score}")
    screen.addstr(1, column, f"B: {snake_length} / {max_length}")
    screen.addstr(2, column, f"+: {growth_count}")
    screen.addstr(3, column, f"-: {poison_count}")
    screen.addstr(4, column, f"G: {gate_count}")


class SnakeGame:
    """State of one game, advanced by :meth:`step` and shown by :meth:`draw`."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.monotonic
        self.game_map = GameMap(stage_map(1))
        self.gate_manager = GateManager(self.game_map, self.rng)
        self.snake = Snake(self.gate_manager)
        self.item_manager = ItemManager(self.rng)

        self.score = 0
        self.max_length = 0
        self.growth_count = 0
        self.poison_count = 0
        self.gate_count = 0
        self.game_over = False
        self.won = False
        self.direction = Direction.RIGHT
        self.tick = START_TICK
        self.current_stage = 1

        now = self.clock()
        self.last_move_time = now
        self.last_item_spawn_time = now
        self.start_time = now

        self.item_manager.spawn_items(
            self.game_map.width, self.game_map.height, self.game_map, self.snake.body
        )
        self.gate_manager.spawn_gates(self.game_map.width, self.game_map.height)

    def move_center(self) -> None:
        """Put a four-segment snake in the middle, trailing against its heading."""
        step = _ASIDE.get(self.direction, Point(-1, 0))
        self.snake.body = [
            Point(CENTER.x + step.x * i, CENTER.y + step.y * i) for i in range(4)
        ]

    def change_map(self, new_map: Sequence[str]) -> None:
        """Switch to a new board, respawn items and gates and recentre the snake."""
        self.game_map.change_map(new_map)
        self.item_manager.spawn_items(
            self.game_map.width, self.game_map.height, self.game_map, self.snake.body
        )
        self.gate_manager.spawn_gates(self.game_map.width, self.game_map.height)
        self.move_center()

    def check_mission_complete(self) -> bool:
        """True once every mission goal has been reached."""
        return (
            self.max_length >= MISSION_LENGTH
            and self.growth_count >= MISSION_GROWTH
            and self.poison_count >= MISSION_POISON
            and self.gate_count >= MISSION_GATES
        )

    def handle_key(self, key: int) -> None:
        """React to one key code: arrows steer, ``q`` quits, others are ignored."""
        if key in _KEY_DIRECTIONS:
            self.direction = _KEY_DIRECTIONS[key]
        elif key == KEY_QUIT:
            self.game_over = True

    def _crashed(self, head: Point) -> bool:
        game_map = self.game_map
        if not (0 <= head.y < game_map.height and 0 <= head.x < len(game_map.map_data[head.y])):
            return True
        if game_map.is_wall(head) and not self.gate_manager.is_gate_position(head):
            return True
        return self.snake.is_collision(head)

    def _eat_growth(self) -> None:
        self.score += GROWTH_SCORE
        self.growth_count += 1
        body = self.snake.body
        if len(body) < 2:
            return
        tail, before_tail = body[-1], body[-2]
        if before_tail + Point(1, 0) == tail:
            body.append(tail + Point(1, 0))
        elif before_tail + Point(-1, 0) == tail:
            body.append(tail + Point(-1, 0))
        elif before_tail + Point(0, 1) == tail:
            body.append(tail + Point(1, 0))
        elif before_tail + Point(0, -1) == tail:
            body.append(tail + Point(-1, 0))

    def _eat_speed(self) -> None:
        if self.tick > MIN_TICK:
            self.score += SPEED_SCORE
            self.tick -= SPEED_TICK_STEP
        else:
            self.score += SPEED_SCORE_AT_MIN

    def _eat_poison(self) -> None:
        self.score -= POISON_PENALTY
        self.poison_count += 1
        self.snake.shrink()
        if len(self.snake.body) < MIN_LENGTH:
            self.game_over = True

    def _advance(self, now: float) -> None:
        snake = self.snake
        snake.move(self.direction)
        self.last_move_time = now

        if self._crashed(snake.head):
            self.game_over = True

        items = self.item_manager
        head = snake.head
        if items.is_item(head):
            if items.is_growth_item(head):
                self._eat_growth()
            elif items.is_speed_item(head):
                self._eat_speed()
            else:
                self._eat_poison()
            items.remove_item(head)

        if snake.is_gate(snake.head):
            new_head, self.direction = self.gate_manager.other_gate(
                snake.head, self.direction
            )
            snake.set_head(new_head)
            if self._crashed(snake.head):
                self.game_over = True
            else:
                self.gate_count += 1
                self.score += GATE_SCORE

        self.max_length = max(self.max_length, len(snake.body))

        if self.check_mission_complete():
            self.won = True
            self.game_over = True
            return

        if int(now - self.last_item_spawn_time) >= ITEM_RESPAWN_SECONDS:
            items.spawn_items(
                self.game_map.width, self.game_map.height, self.game_map, snake.body
            )
            self.last_item_spawn_time = now

    def _maybe_advance_stage(self) -> None:
        for stage, needed, tick_drop in STAGE_UPS:
            if self.current_stage == stage - 1 and self.score >= needed:
                self.current_stage = stage
                if self.tick > MIN_TICK:
                    self.tick -= tick_drop
                self.change_map(stage_map(stage))
                return

    def step(self, now: float | None = None) -> None:
        """Move the snake if a tick has passed by ``now`` and apply the rules."""
        if now is None:
            now = self.clock()
        if int((now - self.last_move_time) * 1000) >= self.tick:
            self._advance(now)
            if self.won:
                return
        self._maybe_advance_stage()

    def draw(self, screen: Any, now: float | None = None) -> None:
        """Render the board, snake, items and side panels onto ``screen``."""
        if now is None:
            now = self.clock()
        screen.erase()
        self.game_map.draw(screen)
        self.gate_manager.draw(screen)
        for i, segment in enumerate(self.snake.body):
            screen.addstr(segment.y + 1, segment.x + 1, "@" if i == 0 else "o")
        self.item_manager.draw(screen)

        start_x = self.game_map.width + 2
        start_y = 1
        self._draw_box(screen, start_y, start_x, _SCORE_BOX_HEIGHT)
        elapsed = int(now - self.start_time)
        lines = (
            "Score Board",
            f"score: {self.score}",
            f"B: ({len(self.snake.body)}) / ({self.max_length})",
            f"+: {self.growth_count}",
            f"-: {self.poison_count}",
            f"G: {self.gate_count}",
            f"tick: {self.tick}",
            f"Time: {elapsed}s",
        )
        for offset, text in enumerate(lines, start=1):
            screen.addstr(start_y + offset, start_x + 2, text)

        mission_y = _SCORE_BOX_HEIGHT + 3
        self._draw_box(screen, mission_y, start_x, _MISSION_BOX_HEIGHT)
        mission = (
            "Mission",
            f"B: {MISSION_LENGTH} ({_tick_mark(self.max_length >= MISSION_LENGTH)})",
            f"+: {MISSION_GROWTH} ({_tick_mark(self.growth_count >= MISSION_GROWTH)})",
            f"-: {MISSION_POISON} ({_tick_mark(self.poison_count >= MISSION_POISON)})",
            f"G: {MISSION_GATES} ({_tick_mark(self.gate_count >= MISSION_GATES)})",
        )
        for offset, text in enumerate(mission, start=1):
            screen.addstr(mission_y + offset, start_x + 2, text)

        screen.refresh()

    @staticmethod
    def _draw_box(screen: Any, top: int, left: int, height: int) -> None:
        screen.addstr(top, left, _BOX_EDGE)
        for i in range(1, height + 1):
            screen.addstr(top + i, left, "|")
            screen.addstr(top + i, left + _BOX_WIDTH - 1, "|")
        screen.addstr(top + height + 1, left, _BOX_EDGE)

    def _announce(self, screen: Any, message: str) -> None:
        screen.addstr(
            self.game_map.height // 2,
            (self.game_map.width - len(message)) // 2,
            message,
        )
        screen.refresh()
        screen.timeout(-1)
        screen.getch()

    def run(self, screen: Any) -> None:
        """Play until the game ends, reading keys from and drawing to ``screen``."""
        screen.keypad(True)
        while not self.game_over:
            screen.timeout(self.tick)
            self.draw(screen)
            self.handle_key(screen.getch())
            self.step(self.clock())
        if self.won or self.check_mission_complete():
            self._announce(screen, "Win")
        else:
            self._announce(screen, "Game Over")


class _TolerantScreen:
    """Wraps a curses window so writes past its edge are dropped."""

    def __init__(self, window: Any, error: type[Exception]) -> None:
        self._window = window
        self._error = error

    def addstr(self, y: int, x: int, text: str) -> None:
        try:
            self._window.addstr(y, x, text)
        except self._error:
            pass

    def __getattr__(self, name: str) -> Any:
        return getattr(self._window, name)


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="snakegate", description="Snake with gates, items and four stages."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for item and gate placement")
    args = parser.parse_args(argv)

    import curses

    def play(window: Any) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        game = SnakeGame(rng=random.Random(args.seed))
        game.run(_TolerantScreen(window, curses.error))

    curses.wrapper(play)
    return 0