# snakegate

A snake game for the terminal. The snake travels through walled maps, eats
items, and can pass through a pair of gates set into the walls.

## Running

```
pip install .
snakegate
snakegate --seed 42
```

`--seed` fixes the random placement of items and gates, so the same seed
gives the same layout. Steer with the arrow keys and press `q` to quit.

## Rules

- `@` is the snake's head and `o` its body. Running into a wall or into your
  own body ends the game.
- `G` is a growth item: the snake gets one segment longer and you score 20.
- `P` is poison: the snake loses a segment and you lose 10. The game ends if
  the snake becomes shorter than 4.
- `S` is a speed item: while the tick is above 50 ms it drops by 15 ms and
  you score 5; after that each one scores 10.
- `A` and `B` are gates sitting on wall cells. Entering one puts the head on
  the other and you score 20; the snake leaves it facing open floor where it
  can.
- Every 6 seconds all items are replaced with new ones.

The game starts at a tick of 150 ms. Reaching 100, 200 and 300 points takes
you to maps 2, 3 and 4. Each stage change shortens the tick (by 20, 10 and
10 ms, while it is above 50 ms), places new items and gates, and puts the
snake back in the middle of the map.

You win once all mission goals are met at the same time:

| Mission            | Goal |
|--------------------|------|
| Longest length     | 10   |
| Growth items eaten | 5    |
| Poison items eaten | 2    |
| Gates used         | 1    |

A score board (score, length, items eaten, gates used, tick and elapsed
time) and the mission box with its check marks are shown beside the map.
At the end "Win" or "Game Over" is shown until a key is pressed.

## Using it as a library

- `snakegate.game.SnakeGame(rng=None, clock=None)` holds the whole game
  state. Pass a curses-like screen to `run`, or drive it yourself:
  `handle_key(key)` steers or quits, `step(now)` moves the snake once a tick
  has passed and applies the rules, and `draw(screen, now)` renders it.
  `check_mission_complete()`, `change_map(rows)` and `move_center()` are
  available too. `snakegate.game.draw_score_board(...)` writes a compact
  score board.
- `snakegate.maps.stage_map(stage)` returns the rows of the map for stages
  1 to 4 and raises `ValueError` for any other stage.
- `snakegate.gamemap.GameMap`, `snakegate.gate.GateManager`,
  `snakegate.item.ItemManager`, `snakegate.snake.Snake` and
  `snakegate.point.Point` / `Direction` are the parts the game is built from.

Screens only need `addstr(y, x, text)`, `erase()` and `refresh()` for
drawing, plus `getch()`, `timeout(ms)` and `keypad(flag)` for `run`.

## Limitations

The `snakegate` command uses Python's built-in `curses` module, which is not
present on Windows by default. There are no saved high scores and no
settings beyond `--seed`.