"""Coloured status lines printed to the terminal."""

import os
import sys

_RED = "31"
_GREEN = "32"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _paint(text: str, code: str) -> str:
    if sys.stdout.isatty():
        return f"\x1b[{code}m{text}\x1b[0m"
    return text


def warn(message: str) -> None:
    """Print a warning line in red."""
    mark = "!" if no_emoji() else "⚠️ "
    print(f"{_paint(mark, _RED)} {_paint(message, _RED)}")


def success(message: str) -> None:
    """Print a success line in green."""
    mark = "✓" if no_emoji() else "✅"
    print(f"{_paint(mark, _GREEN)} {_paint(message, _GREEN)}")