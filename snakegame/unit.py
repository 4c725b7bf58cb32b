"""Basic value types shared by the game: positions, colours and directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class Position:
    """A cell on the board, addressed by column ``x`` and row ``y``."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)


class Color(IntEnum):
    """Terminal colours; ``NOCHANGE`` leaves the current colour alone."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PINK = 5
    CYAN = 6
    WHITE = 7
    NOCHANGE = 8


class Direction(Enum):
    """A heading for the snake."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"

    def offset(self) -> Position:
        """The one-cell step taken when moving in this direction."""
        return _OFFSETS[self]

    def opposite(self) -> Direction:
        """The direction pointing the other way; ``NONE`` is its own opposite."""
        return _OPPOSITES[self]


_OFFSETS = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
    Direction.RIGHT: Position(1, 0),
    Direction.NONE: Position(0, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}