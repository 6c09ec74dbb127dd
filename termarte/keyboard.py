"""Cursor control, screen clearing and non-blocking key reading."""

from __future__ import annotations

import contextlib
import os
import select
import sys
from collections import deque
from typing import Iterator, Optional, TextIO, Union

try:
    import termios
except ImportError:  # not available on Windows
    termios = None  # type: ignore[assignment]

try:
    import msvcrt
except ImportError:  # only available on Windows
    msvcrt = None  # type: ignore[assignment]

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_SCREEN = "\033[H\033[0J\033[H"

VK_BACK = 0x08
VK_TAB = 0x09
VK_RETURN = 0x0D
VK_ESCAPE = 0x1B
VK_SPACE = 0x20

_SPECIAL_KEYS = {27: VK_ESCAPE, 13: VK_RETURN, 9: VK_TAB, 8: VK_BACK, 32: VK_SPACE}
_EXTENDED_PREFIXES = (0, 224)

# Codes read while probing for a specific key and handed back to the queue.
_pending: deque[int] = deque()

Key = Union[int, str, bytes]


def _emit(text: str, stream: Optional[TextIO]) -> None:
    stream = sys.stdout if stream is None else stream
    stream.write(text)
    stream.flush()


def hide_cursor(stream: Optional[TextIO] = None) -> None:
    """Make the terminal cursor invisible."""
    _emit(HIDE_CURSOR, stream)


def show_cursor(stream: Optional[TextIO] = None) -> None:
    """Make the terminal cursor visible."""
    _emit(SHOW_CURSOR, stream)


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear the screen and put the cursor at the top left corner."""
    _emit(CLEAR_SCREEN, stream)


def _to_code(key: Key) -> int:
    if isinstance(key, int):
        return key
    if len(key) != 1:
        raise ValueError(f"expected a single character, got {key!r}")
    return key[0] if isinstance(key, bytes) else ord(key)


def ascii_to_vk(code: Key) -> int:
    """Map an ASCII character to its virtual-key code, or 0 when it has none."""
    code = _to_code(code)
    if ord("A") <= code <= ord("Z") or ord("0") <= code <= ord("9"):
        return code
    if ord("a") <= code <= ord("z"):
        return code - (ord("a") - ord("A"))
    return _SPECIAL_KEYS.get(code, 0)


@contextlib.contextmanager
def _raw_mode(fd: int) -> Iterator[None]:
    if termios is None or not os.isatty(fd):
        yield
        return
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def _console_code(block: bool) -> Optional[int]:
    while True:
        if not block and not msvcrt.kbhit():
            return None
        code = msvcrt.getch()[0]
        if code not in _EXTENDED_PREFIXES:
            return code
        msvcrt.getch()  # discard the scan code that follows
        if not block:
            return None


def _read_stream(stream: TextIO) -> Optional[int]:
    char = stream.read(1)
    return _to_code(char) if char else None


def _next_code(block: bool) -> Optional[int]:
    if _pending:
        return _pending.popleft()
    stream = sys.stdin
    try:
        fd = stream.fileno()
    except (OSError, ValueError):
        return _read_stream(stream)
    if msvcrt is not None:
        if os.isatty(fd):
            return _console_code(block)
        return _read_stream(stream)
    with _raw_mode(fd):
        if not block and not select.select([fd], [], [], 0)[0]:
            return None
        data = os.read(fd, 1)
    return data[0] if data else None


def key_pressed() -> Optional[int]:
    """Return the code of a waiting key without blocking, or None if there is none.

    Extended keys (arrows, function keys) are discarded on Windows consoles.
    """
    return _next_code(block=False)


def is_key_pressed(key: Key) -> bool:
    """Tell whether the next waiting key is ``key``.

    A different key is kept and returned by the next read.
    """
    wanted = _to_code(key)
    code = _next_code(block=False)
    if code is None:
        return False
    if code != wanted:
        _pending.appendleft(code)
        return False
    return True


def wait_for_key(key: Key) -> Optional[int]:
    """Block until ``key`` is typed and return its code; None if input ends first."""
    wanted = _to_code(key)
    while True:
        code = _next_code(block=True)
        if code is None or code == wanted:
            return code