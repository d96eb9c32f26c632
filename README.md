# cnake

A classic snake game that runs in your terminal.

The board is a grid of dots, 20 × 20 cells unless you ask for another size.
The snake's head is drawn as `@`, its tail as `O` and apples as `+`. Each
apple eaten adds one segment to the tail, raises the score by one, puts a
new apple on the board and makes the snake move a little faster.

## Installing

```
pip install .
```

## Playing

```
cnake
```

Options:

| Option         | Default | Meaning                            |
|----------------|---------|------------------------------------|
| `--width N`    | 20      | cells per row; must be even        |
| `--height N`   | 20      | number of rows                     |

Both values must be positive integers.

Steer with the keys:

| Key | Direction |
|-----|-----------|
| `W` | up        |
| `A` | left      |
| `S` | down      |
| `D` | right     |

Keys are not case-sensitive, and every other key is ignored. The snake
starts in the middle of the board and heads up. It moves once every 500 ms
at first; each time the score changes the pause gets shorter, by 10 ms at
low scores down to 1 ms once the score is above 50.

The game ends when the snake runs into a wall or into its own tail, or when
you press Ctrl-C. The score is shown under the board while you play, and
"Game over!" is printed when the game ends.

The terminal must understand ANSI escape sequences, which is true of nearly
every modern terminal. Keys are read without echo: on Windows through the
console, elsewhere by putting the terminal in cbreak mode while a key is
awaited.

## Using it from Python

The pieces of the game are available as a library:

- `cnake.board.Point` is a named `(x, y)` pair in character columns and rows.
- `cnake.board.Board` holds the grid, the score and a lock. Cells are read
  and written with `board[point]`; `rows()` yields each row as shown on
  screen; `random_free_cell()`, `place_initial_apples()` and
  `spawn_apple(point=None)` place apples. A `random.Random` can be passed as
  `rng` for repeatable games and a text stream as `stream` to capture output.
- `cnake.tail.Tail` keeps the tail segments from oldest to newest:
  `grow(point)` adds one, `advance(point)` adds one and returns the cell that
  was freed.
- `cnake.game.Game` moves the snake one cell at a time through `step()`
  (which returns `True` when the game is over), changes heading through
  `set_direction(key)` with a `Direction` or one of the letters `W`, `A`,
  `S`, `D`, and draws the whole board with `render()`. Pass `apples=False`
  to start without apples.
- `cnake.game.next_delay(delay, score)` gives the pause, in milliseconds,
  after the score changed.
- `cnake.app.movement_loop()` and `cnake.app.input_loop()` are the two loops
  the command runs in separate threads; `cnake.app.read_key()` reads one key;
  `cnake.app.main()` starts a full game in the terminal.

```python
import io
import random

from cnake.game import Direction, Game

out = io.StringIO()
game = Game(rng=random.Random(1), stream=out)
game.set_direction(Direction.LEFT)
while not game.step():
    pass
print(game.score)
```

## What it does not do

There is no pause, no high-score table and no saved games; each run plays a
single game and exits.

## Running the tests

```
pip install ".[test]"
pytest
```