"""Keyboard input from a terminal switched to non-blocking, unechoed mode."""

from __future__ import annotations

import os
import sys
from types import TracebackType
from typing import IO

from snakegame.unit import Direction

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET_STYLE = "\x1b[0m"

_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


def key_to_direction(key: str | None) -> Direction:
    """Map a WASD key (either case) to a direction; anything else is ``NONE``."""
    if not key:
        return Direction.NONE
    return _KEY_DIRECTIONS.get(key.lower(), Direction.NONE)


def _terminal_fd(stream: IO[str]) -> int | None:
    try:
        if stream.isatty():
            return stream.fileno()
    except (AttributeError, OSError):
        pass
    return None


class Terminal:
    """A context manager that puts the terminal into raw, non-blocking input mode.

    On entry echo and line buffering are turned off and the cursor is hidden;
    on exit the previous settings and the cursor are restored. When ``stdin``
    is not a terminal, characters are simply read from the stream.
    """

    def __init__(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._fd = _terminal_fd(self._stdin)
        self._saved_attrs: list | None = None

    def __enter__(self) -> Terminal:
        if self._fd is not None and termios is not None:
            self._saved_attrs = termios.tcgetattr(self._fd)
            attrs = termios.tcgetattr(self._fd)
            attrs[3] &= ~(termios.ICANON | termios.ECHO)
            attrs[6][termios.VMIN] = 0
            attrs[6][termios.VTIME] = 0
            termios.tcsetattr(self._fd, termios.TCSANOW, attrs)
        self._stdout.write(HIDE_CURSOR)
        self._stdout.flush()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self._stdout.write(RESET_STYLE)
        self._stdout.write(SHOW_CURSOR)
        self._stdout.flush()
        if self._saved_attrs is not None and termios is not None and self._fd is not None:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved_attrs)
            self._saved_attrs = None
        return False

    def read_char(self) -> str | None:
        """Read one pending character, or ``None`` if there is none."""
        self._stdout.flush()
        if self._fd is not None:
            try:
                data = os.read(self._fd, 1)
            except BlockingIOError:
                return None
            return chr(data[0]) if data else None
        return self._stdin.read(1) or None

    def direction_input(self) -> Direction:
        """Read one character and interpret it as a direction key."""
        return key_to_direction(self.read_char())

    def control_input(self) -> str | None:
        """Read one character for game control, or ``None`` if none is waiting."""
        return self.read_char()