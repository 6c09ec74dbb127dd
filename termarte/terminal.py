"""Terminal setup: capability check, font height, window size and pausing."""

from __future__ import annotations

import os
import sys
import time
from typing import NoReturn, Optional, TextIO

DEFAULT_PAUSE_MESSAGE = "Pressione ENTER para continuar… "


def font_sequence(height: int) -> str:
    """Return the OSC 50 sequence that asks for a monospace font of ``height``."""
    return f"\033]50;xft:Monospace:size={height}\007"


def resize_sequence(columns: int, rows: int) -> str:
    """Return the CSI 8 sequence that resizes the window to ``columns`` x ``rows``."""
    return f"\033[8;{rows};{columns}t"


def _is_windows_terminal() -> bool:
    return bool(os.environ.get("WT_SESSION"))


def _write(stream: TextIO, text: str) -> bool:
    try:
        stream.write(text)
        stream.flush()
    except (OSError, ValueError):
        return False
    return True


def initialize(stream: Optional[TextIO] = None) -> bool:
    """Report whether ``stream`` is a terminal able to handle ANSI sequences."""
    stream = sys.stdout if stream is None else stream
    try:
        if not stream.isatty():
            return False
    except (OSError, ValueError):
        return False
    term = os.environ.get("TERM", "")
    if term == "dumb":
        return False
    if os.name == "nt":
        return True
    return bool(term)


def set_font(height: int, stream: Optional[TextIO] = None) -> bool:
    """Ask the terminal for a font of ``height``; False where it cannot be changed."""
    if _is_windows_terminal():
        return False
    stream = sys.stdout if stream is None else stream
    return _write(stream, font_sequence(height))


def resize(columns: int, rows: int, stream: Optional[TextIO] = None) -> bool:
    """Ask the terminal to resize its window; True when the request was written."""
    stream = sys.stdout if stream is None else stream
    return _write(stream, resize_sequence(columns, rows))


def pause(
    message: Optional[str] = None,
    stream: Optional[TextIO] = None,
    input_stream: Optional[TextIO] = None,
) -> bool:
    """Wait for ENTER when input is a terminal.

    With redirected input it only sleeps one second and returns False.
    """
    stream = sys.stdout if stream is None else stream
    input_stream = sys.stdin if input_stream is None else input_stream
    try:
        interactive = input_stream.isatty()
    except (OSError, ValueError):
        interactive = False
    if not interactive:
        time.sleep(1)
        return False
    stream.write(DEFAULT_PAUSE_MESSAGE if message is None else message)
    stream.flush()
    input_stream.readline()
    return True


def leave(status: int = 0) -> NoReturn:
    """Exit the program with ``status``."""
    sys.stdout.flush()
    raise SystemExit(status)