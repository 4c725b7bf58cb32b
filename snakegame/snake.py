"""The snake: a chain of cells that moves, turns and grows."""

from __future__ import annotations

from collections import deque

from snakegame.unit import Direction, Position


class Snake:
    """A snake whose head is the first cell of its body."""

    def __init__(
        self,
        start: Position,
        initial_length: int = 3,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self._body: deque[Position] = deque([start])
        self._body.extend(start + Position(-i, 0) for i in range(1, initial_length))
        self._direction = direction
        self._growing = False

    def move(self) -> None:
        """Advance one cell; the tail stays put if growth was requested."""
        self._body.appendleft(self._body[0] + self._direction.offset())
        if self._growing:
            self._growing = False
        else:
            self._body.pop()

    def change_direction(self, new_direction: Direction) -> None:
        """Turn to ``new_direction`` unless it would reverse the snake."""
        if new_direction is not Direction.NONE and new_direction is self._direction.opposite():
            return
        self._direction = new_direction

    def grow(self) -> None:
        """Lengthen the snake by one cell on its next move."""
        self._growing = True

    @property
    def head(self) -> Position:
        """The cell at the front of the snake."""
        return self._body[0]

    @property
    def body(self) -> tuple[Position, ...]:
        """All cells of the snake, head first."""
        return tuple(self._body)

    @property
    def direction(self) -> Direction:
        """The current heading."""
        return self._direction

    def check_self_collision(self) -> bool:
        """Whether the head overlaps any other part of the body."""
        head, *rest = self._body
        return head in rest