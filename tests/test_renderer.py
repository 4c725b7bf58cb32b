import re

from snakegame.ansi import ansi_print
from snakegame.board import Board, Food
from snakegame.renderer import (
    EMPTY_CHAR,
    FOOD_CHAR,
    SNAKE_CHAR,
    clear_screen,
    render_board,
    render_game,
    render_game_over,
    render_ui,
)
from snakegame.snake import Snake
from snakegame.unit import Color, Position

_ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


def visible(text):
    return _ANSI.sub("", text)


def test_clear_screen_sequence():
    assert clear_screen() == "\x1b[2J\x1b[H"


def test_render_board_frame_and_size():
    board = Board(6, 4)
    snake = Snake(Position(3, 2))
    text = render_board(board, snake, Food(Position(0, 0)))
    lines = text.splitlines()
    assert len(lines) == board.height + 2
    assert lines[0] == ansi_print("╔" + "══" * board.width + "╗", Color.RED)
    assert lines[-1] == ansi_print("╚" + "══" * board.width + "╝", Color.RED)
    widths = {len(visible(line)) for line in lines}
    assert widths == {board.width * 2 + 2}


def test_render_board_draws_snake_and_food():
    board = Board(6, 4)
    snake = Snake(Position(3, 2))
    text = render_board(board, snake, Food(Position(0, 0)))
    assert text.count(SNAKE_CHAR) == len(snake.body)
    assert text.count(FOOD_CHAR) == 1
    assert ansi_print(SNAKE_CHAR, Color.GREEN, hi=True) in text
    assert ansi_print(FOOD_CHAR, Color.YELLOW, hi=True) in text


def test_render_board_snake_covers_food():
    board = Board(6, 4)
    snake = Snake(Position(3, 2))
    text = render_board(board, snake, Food(snake.head))
    assert text.count(FOOD_CHAR) == 0
    assert text.count(SNAKE_CHAR) == len(snake.body)


def test_render_board_skips_cells_outside():
    board = Board(6, 4)
    snake = Snake(Position(1, 1))
    text = render_board(board, snake, Food(Position(5, 3)))
    inside = [segment for segment in snake.body if segment in board]
    assert text.count(SNAKE_CHAR) == len(inside)
    assert len(inside) < len(snake.body)


def test_render_board_empty_cells():
    board = Board(3, 2)
    snake = Snake(Position(0, 0), initial_length=1)
    text = render_board(board, snake, Food(Position(2, 1)))
    rows = [visible(line)[1:-1] for line in text.splitlines()[1:-1]]
    assert rows[0] == SNAKE_CHAR + EMPTY_CHAR + EMPTY_CHAR
    assert rows[1] == EMPTY_CHAR + EMPTY_CHAR + FOOD_CHAR


def test_render_ui_shows_score():
    text = render_ui(42, 10)
    lines = text.splitlines()
    assert len(lines) == 3
    assert "Score: " in visible(lines[1])
    assert "42" in visible(lines[1])
    assert len({len(visible(line)) for line in lines}) == 1


def test_render_game_layout():
    board = Board()
    snake = Snake(Position(board.width // 2, board.height // 2))
    text = render_game(board, snake, Food(Position(1, 1)), 3)
    assert text.startswith(clear_screen())
    assert "=== Snake Game ===" in text
    assert render_board(board, snake, Food(Position(1, 1))) in text
    assert text.endswith(render_ui(3, board.width))


def test_render_game_over():
    text = render_game_over(7)
    assert text.startswith(clear_screen())
    lines = visible(text[len(clear_screen()):]).splitlines()
    assert len(lines) == 5
    assert "GAME OVER!" in lines[1]
    assert "Final Score: 7" in lines[3]
    assert len({len(line) for line in lines}) == 1
    assert len(lines[0]) == Board.DEFAULT_WIDTH * 2 + 2