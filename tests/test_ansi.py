import pytest

from merchstore.ansi import (
    BG_BLACK,
    BOLD,
    FG_GREEN,
    FG_RED,
    NORMAL,
    colorize,
)


def test_colorize_pins_red_sequence():
    assert colorize("x", FG_RED) == "\x1b[31mx\x1b[00m"


def test_colorize_without_attributes_only_resets():
    assert colorize("plain") == "plain" + NORMAL


def test_colorize_combines_attributes_in_order():
    result = colorize("banner", FG_GREEN, BG_BLACK, BOLD)
    assert result.startswith(FG_GREEN + BG_BLACK + BOLD)
    assert result.endswith(NORMAL)
    assert "banner" in result


@pytest.mark.parametrize("text", ["", "abc", "┃ > Item"])
def test_colorize_strips_back_to_text(text):
    result = colorize(text, FG_RED, BOLD)
    assert result[len(FG_RED + BOLD):-len(NORMAL)] == text


def test_colorize_converts_numbers_to_text():
    assert colorize(42, FG_RED) == FG_RED + "42" + NORMAL