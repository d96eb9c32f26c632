"""ANSI cursor helpers used to redraw single cells of the playing field."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

CLEAR_SCREEN = "\033[2J\033[H"


def _move(x: int, y: int) -> str:
    return f"\033[{y + 1};{x + 1}H"


def overwrite(
    point: Iterable[int],
    cursor: Iterable[int],
    text: str,
    stream: TextIO | None = None,
) -> None:
    """Write ``text`` at zero-based ``point`` and then park the cursor at ``cursor``."""
    out = sys.stdout if stream is None else stream
    x, y = point
    cx, cy = cursor
    out.write(f"{_move(x, y)}{text}{_move(cx, cy)}")
    out.flush()


def clear_screen(stream: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    out = sys.stdout if stream is None else stream
    out.write(CLEAR_SCREEN)
    out.flush()