"""Truecolour ANSI sprites, terminal setup, key polling and background tasks."""

__version__ = "0.1.0"
__all__ = ["async_tasks", "demos", "keyboard", "sprite", "terminal"]