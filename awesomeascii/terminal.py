"""Terminal size detection."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

__all__ = ["TermSize", "get_terminal_size"]

_DEFAULT_ROWS = 25
_DEFAULT_COLS = 50


@dataclass(frozen=True)
class TermSize:
    """Size of a terminal window in character cells and pixels."""

    row: int
    col: int
    xpixel: int = 0
    ypixel: int = 0


def get_terminal_size() -> TermSize:
    """Return the size of the controlling terminal, or 50x25 when unknown."""
    fd = 1 if os.name == "nt" else 0
    try:
        size = os.get_terminal_size(fd)
    except (OSError, ValueError):
        print("Couldn't get tty size", file=sys.stderr)
        print("Falling back to use default value for tty", file=sys.stderr)
        return TermSize(row=_DEFAULT_ROWS, col=_DEFAULT_COLS)
    return TermSize(row=size.lines, col=size.columns)