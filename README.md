# snakegame

A classic snake game that runs in your terminal, drawn with ANSI colours
and Unicode box characters.

## Installing

```
pip install .
```

## Playing

```
snakegame
```

The snake begins in the middle of a 20 × 15 board, three segments long,
heading right, and moves one cell every 150 ms.

| Key       | Action              |
|-----------|---------------------|
| `w` / `W` | turn up             |
| `a` / `A` | turn left           |
| `s` / `S` | turn down           |
| `d` / `D` | turn right          |
| `p` / `P` | pause or resume     |
| `q` / `Q` | quit                |

The snake cannot reverse straight back on itself. Each piece of food eaten
adds one segment and one point. The game ends when the snake leaves the
board or runs into its own body, and the final score is shown.

While running, the game switches a POSIX terminal to unbuffered,
non-echoing input and hides the cursor; both are restored on exit. When
standard input is not a terminal, keys are read from it as a stream.

If the game fails, `snakegame` prints `Something wrong: <reason>` to
standard error and exits with status -1.

## Using the pieces

The game logic can be used on its own, without a terminal:

```python
from snakegame.board import Board
from snakegame.snake import Snake
from snakegame.unit import Direction, Position

board = Board()
snake = Snake(Position(10, 7), 3, Direction.RIGHT)
snake.move()
snake.change_direction(Direction.UP)
snake.move()
print(snake.head, snake.head in board)
```

- `snakegame.unit` holds `Position`, `Color` and `Direction` (with
  `offset()` and `opposite()`).
- `snakegame.board` holds `Board` (`is_inside()`, and `in` tests) and `Food`.
- `snakegame.snake.Snake` has `move()`, `change_direction()`, `grow()`,
  `check_self_collision()` and the properties `head`, `body` and `direction`.
- `snakegame.renderer` builds screens as strings: `render_game()`,
  `render_board()`, `render_ui()`, `render_game_over()` and `clear_screen()`.
- `snakegame.ansi.ansi_print()` wraps a string in ANSI colour codes.
- `snakegame.terminal.Terminal` is a context manager for raw keyboard input;
  `key_to_direction()` maps WASD keys to directions.
- `snakegame.game.Game` runs the loop and accepts its own board, random
  generator, terminal and output stream.

## Running the tests

```
pip install .[test]
pytest
```