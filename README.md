# snakearcade

A snake game played on a 32 × 32 grid in a 640 × 640 pygame window. Eat the
yellow food to grow and score points. There are always two pieces of food on
the board. The snake slows down a little with every piece it eats, down to a
minimum speed. Leaving one edge of the board brings you back in on the
opposite side. Running into your own body ends the game.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed with the package.

## Playing

```
snakearcade
```

The game first asks for your name and a difficulty level:

1. **Easy** — food only, slow snake.
2. **Normal** — a faster snake and a red poison cell that ends the game.
3. **Hard** — as Normal, plus a three-block cyan wall that also ends the game.

Any other number plays with food only at the starting speed.

Options:

| Option                    | Meaning                                                        |
|---------------------------|----------------------------------------------------------------|
| `--high-score-file PATH`  | File holding the best player and score (default `highest.txt`) |
| `--font PATH`             | TrueType font for the pause label (pygame's default otherwise) |

Controls:

| Key          | Action           |
|--------------|------------------|
| Arrow keys   | Change direction |
| Escape       | Pause            |
| Enter        | Resume           |
| Close window | Quit             |

The snake cannot turn straight back on itself unless it is only one cell long.
While paused, "PAUSE" is shown near the bottom-left corner. The window title
shows your current score and frames per second, updated once a second.

## High score

When the game ends, your name, score and size are printed. The best score is
kept in a two-line text file: the player's name, then the score. If you beat
it, your name and score replace it; otherwise the current record holder is
shown.

The file must already exist: if it is missing or its second line does not
start with a number, an error message is printed on standard error and no new
file is created. To start a record, create the file yourself, for example with
a name on the first line and `0` on the second.

## Using the pieces

The game logic works without a window and can be driven directly:

```python
import random
from snakearcade.game import Game

game = Game(32, 32, 2, rng=random.Random(1))
game.update(paused=False)
print(game.score, game.size, game.snake.alive)
```

- `snakearcade.snake` — `Snake`, with `update()`, `grow_body()`,
  `snake_cell(x, y)` and `head_cell`; `Direction` and `Point`.
- `snakearcade.controller` — `Controller.handle_input(events, snake, paused)`
  takes pygame events and returns the new `(running, paused)` pair;
  `change_direction(snake, new_direction, opposite)` turns the snake.
- `snakearcade.game` — `Game`, holding the snake, `foods`, `poison`, `wall`
  and `score`, with `update(paused)`, `run(controller, renderer,
  target_frame_duration)`, `place_food()`, `place_poison()`, `place_wall()`,
  `poison_cell(x, y)` and `wall_cell(x, y)`.
- `snakearcade.renderer` — `Renderer` draws the board with pygame and can be
  used as a context manager; `format_title(score, fps)` builds the window
  title.
- `snakearcade.main` — `main()`, plus `load_high_score(path)`,
  `save_high_score(path, username, score)` and the `HighScore` record.

## Tests

```
pip install .[test]
pytest
```