"""The game loop tying the board, snake, input and rendering together."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import IO

from snakegame.board import Board, Food
from snakegame.renderer import clear_screen, render_game, render_game_over
from snakegame.snake import Snake
from snakegame.terminal import Terminal
from snakegame.unit import Direction, Position


class Game:
    """One game of snake, played in a terminal."""

    FRAME_DELAY = 0.15

    def __init__(
        self,
        board: Board | None = None,
        rng: random.Random | None = None,
        terminal: Terminal | None = None,
        out: IO[str] | None = None,
    ) -> None:
        self.board = board if board is not None else Board()
        self._rng = rng if rng is not None else random.Random()
        self._terminal = terminal if terminal is not None else Terminal()
        self._out = out if out is not None else sys.stdout
        self.snake: Snake | None = None
        self.food: Food | None = None
        self.score = 0
        self.is_running = False
        self.is_paused = False

    def initialize(self) -> None:
        """Place a fresh snake and food and reset the score and state."""
        start = Position(self.board.width // 2, self.board.height // 2)
        self.snake = Snake(start, 3, Direction.RIGHT)
        self.generate_new_food()
        self.score = 0
        self.is_running = True
        self.is_paused = False
        self._out.flush()
        self._terminal.control_input()
        self._out.write(clear_screen())

    def run(self) -> None:
        """Set up the terminal, start a game and play it to the end."""
        with self._terminal:
            self.initialize()
            self._game_loop()

    def _game_loop(self) -> None:
        while self.is_running:
            frame_start = time.monotonic()
            self.handle_input()
            if not self.is_paused:
                self.update()
                self.render()
                if self.check_collision():
                    self.is_running = False
                    self._out.write(render_game_over(self.score))
                    self._out.flush()
                    self._terminal.control_input()
            else:
                self.render()
            elapsed = time.monotonic() - frame_start
            if elapsed < self.FRAME_DELAY:
                time.sleep(self.FRAME_DELAY - elapsed)

    def update(self) -> None:
        """Move the snake and let it eat the food if it reached it."""
        self.snake.move()
        if self.snake.head == self.food.position:
            self.snake.grow()
            self.score += 1
            self.generate_new_food()

    def handle_input(self) -> None:
        """Apply a pending direction key, then a pending pause or quit key."""
        direction = self._terminal.direction_input()
        if direction is not Direction.NONE:
            self.snake.change_direction(direction)

        key = self._terminal.control_input()
        if key is None:
            return
        if key in "pP":
            if self.is_paused:
                self.resume()
            else:
                self.pause()
        elif key in "qQ":
            self.quit()

    def render(self) -> None:
        """Draw the current frame."""
        self._out.write(render_game(self.board, self.snake, self.food, self.score))
        self._out.flush()

    def generate_new_food(self) -> None:
        """Put the food on a random cell not occupied by the snake."""
        occupied = set(self.snake.body)
        free_cells = self.board.width * self.board.height - sum(
            1 for cell in occupied if cell in self.board
        )
        if free_cells <= 0:
            raise RuntimeError("no free cell left for food")
        while True:
            candidate = Position(
                self._rng.randint(0, self.board.width - 1),
                self._rng.randint(0, self.board.height - 1),
            )
            if candidate not in occupied:
                break
        if self.food is None:
            self.food = Food(candidate)
        else:
            self.food.position = candidate

    def check_collision(self) -> bool:
        """Whether the snake left the board or ran into itself."""
        return self.snake.head not in self.board or self.snake.check_self_collision()

    def pause(self) -> None:
        self.is_paused = True

    def resume(self) -> None:
        self.is_paused = False

    def quit(self) -> None:
        self.is_running = False


def main(argv: list[str] | None = None) -> int:
    """Play a game of snake in the current terminal."""
    parser = argparse.ArgumentParser(
        prog="snakegame",
        description="Steer with WASD, P pauses, Q quits.",
    )
    parser.parse_args(argv)
    try:
        Game().run()
    except Exception as exc:
        print(f"Something wrong: {exc}", file=sys.stderr)
        return -1
    return 0