"""The playing field and the food placed on it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from snakegame.unit import Position


@dataclass(frozen=True)
class Board:
    """A rectangular grid of ``width`` columns by ``height`` rows."""

    DEFAULT_WIDTH: ClassVar[int] = 20
    DEFAULT_HEIGHT: ClassVar[int] = 15

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def is_inside(self, pos: Position) -> bool:
        """Whether ``pos`` lies within the grid."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def __contains__(self, pos: object) -> bool:
        return isinstance(pos, Position) and self.is_inside(pos)


@dataclass
class Food:
    """A piece of food at a position on the board."""

    position: Position = field(default_factory=Position)