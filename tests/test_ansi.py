import pytest

from snakegame.ansi import ansi_print
from snakegame.unit import Color

RESET = "\x1b[0m"


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_gives_empty_string(text):
    assert ansi_print(text, Color.RED, Color.BLUE, hi=True, blinking=True) == ""


def test_plain_text_has_bare_sequence():
    assert ansi_print("abc") == "\x1b[mabc" + RESET


def test_foreground_only():
    assert ansi_print("x", Color.RED) == "\x1b[31mx" + RESET


def test_all_attributes_in_order():
    result = ansi_print("x", Color.GREEN, Color.BLACK, hi=True, blinking=True)
    assert result == "\x1b[1;5;32;40mx" + RESET


@pytest.mark.parametrize("fg", list(Color))
@pytest.mark.parametrize("bg", list(Color))
def test_sequence_is_well_formed(fg, bg):
    result = ansi_print("text", fg, bg, hi=True)
    assert result.startswith("\x1b[")
    assert result.endswith("text" + RESET)
    assert ";m" not in result


def test_highlight_keyword_matches_positional_nochange():
    assert ansi_print("s", hi=True) == ansi_print("s", Color.NOCHANGE, Color.NOCHANGE, True)


def test_foreground_and_background_differ():
    assert ansi_print("s", fg=Color.BLUE) != ansi_print("s", bg=Color.BLUE)


def test_text_appears_exactly_once():
    result = ansi_print("██", Color.GREEN, hi=True)
    assert result.count("██") == 1