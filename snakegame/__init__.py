"""A terminal snake game: board, snake, input, rendering and game loop."""

__version__ = "0.1.0"
__all__ = ["ansi", "board", "game", "renderer", "snake", "terminal", "unit"]