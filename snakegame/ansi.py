"""Wrapping text in ANSI colour and attribute escape sequences."""

from __future__ import annotations

from snakegame.unit import Color

_INIT = "\x1b["
_END = "m"
_HIGHLIGHT = "1"
_BLINK = "5"
_RESET = "\x1b[0m"


def ansi_print(
    text: str | None,
    fg: Color = Color.NOCHANGE,
    bg: Color = Color.NOCHANGE,
    hi: bool = False,
    blinking: bool = False,
) -> str:
    """Return ``text`` styled with the given colours and attributes.

    Empty or missing text yields an empty string. The styled text is always
    followed by a reset sequence.
    """
    if not text:
        return ""

    codes = []
    if hi:
        codes.append(_HIGHLIGHT)
    if blinking:
        codes.append(_BLINK)
    if fg != Color.NOCHANGE:
        codes.append(f"3{int(fg)}")
    if bg != Color.NOCHANGE:
        codes.append(f"4{int(bg)}")

    return f"{_INIT}{';'.join(codes)}{_END}{text}{_RESET}"