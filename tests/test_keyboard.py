import io
import sys

import pytest

from termarte import keyboard
from termarte.keyboard import (
    ascii_to_vk,
    clear_screen,
    hide_cursor,
    is_key_pressed,
    key_pressed,
    show_cursor,
    wait_for_key,
)


@pytest.fixture
def typed(monkeypatch):
    keyboard._pending.clear()

    def feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    yield feed
    keyboard._pending.clear()


def test_hide_cursor_sequence():
    out = io.StringIO()
    hide_cursor(out)
    assert out.getvalue() == "\033[?25l"


def test_show_cursor_sequence():
    out = io.StringIO()
    show_cursor(out)
    assert out.getvalue() == "\033[?25h"


def test_clear_screen_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[H\033[0J\033[H"


@pytest.mark.parametrize("char", ["a", "z", "m"])
def test_lowercase_maps_to_uppercase(char):
    assert ascii_to_vk(char) == ord(char.upper())


@pytest.mark.parametrize("char", ["A", "Q", "0", "9"])
def test_letters_and_digits_map_to_themselves(char):
    assert ascii_to_vk(ord(char)) == ord(char)


def test_escape_maps_to_vk_escape():
    assert ascii_to_vk(27) == keyboard.VK_ESCAPE


def test_unmapped_character_gives_zero():
    assert ascii_to_vk("%") == 0


def test_multi_character_key_rejected():
    with pytest.raises(ValueError):
        ascii_to_vk("ab")


def test_key_pressed_reads_in_order(typed):
    typed("ab")
    assert key_pressed() == ord("a")
    assert key_pressed() == ord("b")
    assert key_pressed() is None


def test_key_pressed_without_input(typed):
    typed("")
    assert key_pressed() is None


def test_is_key_pressed_consumes_match(typed):
    typed("xy")
    assert is_key_pressed("x") is True
    assert key_pressed() == ord("y")


def test_is_key_pressed_keeps_other_key(typed):
    typed("ab")
    assert is_key_pressed("b") is False
    assert key_pressed() == ord("a")
    assert key_pressed() == ord("b")


def test_is_key_pressed_without_input(typed):
    typed("")
    assert is_key_pressed("q") is False


def test_wait_for_key_skips_other_keys(typed):
    typed("abcd")
    assert wait_for_key("c") == ord("c")
    assert key_pressed() == ord("d")


def test_wait_for_key_returns_none_at_end_of_input(typed):
    typed("abc")
    assert wait_for_key("z") is None
    assert key_pressed() is None