"""Drawing the game screen as ANSI-styled text."""

from __future__ import annotations

from snakegame.ansi import ansi_print
from snakegame.board import Board, Food
from snakegame.snake import Snake
from snakegame.unit import Color

SNAKE_CHAR = "██"
FOOD_CHAR = "● "
EMPTY_CHAR = "  "

_CLEAR = "\x1b[2J\x1b[H"


def clear_screen() -> str:
    """The sequence that clears the screen and homes the cursor."""
    return _CLEAR


def render_board(board: Board, snake: Snake, food: Food) -> str:
    """The framed grid with the food and the snake drawn on it."""
    cells = {}
    if food.position in board:
        cells[food.position] = ansi_print(FOOD_CHAR, Color.YELLOW, hi=True)
    snake_cell = ansi_print(SNAKE_CHAR, Color.GREEN, hi=True)
    for segment in snake.body:
        if segment in board:
            cells[segment] = snake_cell

    edge = "══" * board.width
    side = ansi_print("║", Color.RED)
    lines = [ansi_print(f"╔{edge}╗", Color.RED)]
    for y in range(board.height):
        row = "".join(cells.get(_pos(x, y), EMPTY_CHAR) for x in range(board.width))
        lines.append(f"{side}{row}{side}")
    lines.append(ansi_print(f"╚{edge}╝", Color.RED))
    return "".join(f"{line}\n" for line in lines)


def _pos(x: int, y: int):
    from snakegame.unit import Position

    return Position(x, y)


def render_ui(score: int, board_width: int) -> str:
    """The framed score panel shown under the board."""
    inner_width = board_width * 2
    horizontal = "─" * inner_width
    label = "Score: "
    value = str(score)
    padding = " " * max(inner_width - len(label) - len(value), 0)
    content = ansi_print(label, Color.WHITE) + ansi_print(value, Color.YELLOW, hi=True)
    lines = [
        ansi_print(f"┌{horizontal}┐", Color.WHITE),
        ansi_print(f"│{content}{padding}│", Color.WHITE),
        ansi_print(f"└{horizontal}┘", Color.WHITE),
    ]
    return "".join(f"{line}\n" for line in lines)


def render_game(board: Board, snake: Snake, food: Food, score: int) -> str:
    """A full frame: title, board and score panel."""
    title = ansi_print("=== Snake Game ===", Color.WHITE, hi=True)
    return (
        clear_screen()
        + f"{title}\n\n"
        + render_board(board, snake, food)
        + "\n"
        + render_ui(score, board.width)
    )


def render_game_over(score: int) -> str:
    """The framed game-over screen with the final score."""
    inner_width = Board.DEFAULT_WIDTH * 2
    horizontal = "═" * inner_width

    message = "GAME OVER!"
    left = (inner_width - len(message)) // 2
    right = (inner_width - len(message) + 1) // 2
    message_line = f"║{' ' * left}{message}{' ' * right}║"

    label = "Final Score: "
    value = str(score)
    padding = " " * max(inner_width - len(label) - len(value), 0)
    content = ansi_print(label, Color.YELLOW, hi=True) + ansi_print(value, Color.YELLOW, hi=True)

    lines = [
        ansi_print(f"╔{horizontal}╗", Color.RED),
        ansi_print(message_line, Color.RED, hi=True),
        ansi_print(f"╠{horizontal}╣", Color.RED),
        ansi_print(f"║{content}{padding}║", Color.RED),
        ansi_print(f"╚{horizontal}╝", Color.RED),
    ]
    return clear_screen() + "".join(f"{line}\n" for line in lines)