"""Flat-offset motions over the concatenation of all lines.

Lines are joined with no separator: stepping from the last character of one
line lands on the first character of the next line. ``after`` and ``before``
are the building blocks for character-wise motions that may wrap lines.
"""

from __future__ import annotations

from typing import Optional

from motion_engine.buffer import TextBuffer
from motion_engine.cursor import Position


def after(buffer: TextBuffer, n: int, position: Position) -> Optional[Position]:
    """Position ``n`` characters past ``position``, or ``None`` past the end."""

    x, y = position
    if n == 0:
        return position

    line_len = len(buffer.get_line(y))
    if x + n < line_len:
        return (x + n, y)
    if y + 1 >= buffer.line_count:
        return None

    remaining = x + n - line_len
    row = y + 1
    while True:
        row_len = len(buffer.get_line(row))
        if remaining < row_len:
            return (remaining, row)
        if row + 1 >= buffer.line_count:
            return None
        remaining -= row_len
        row += 1


def before(buffer: TextBuffer, n: int, position: Position) -> Optional[Position]:
    """Position ``n`` characters ahead of ``position``, or ``None`` past the start."""

    x, y = position
    if x >= n:
        return (x - n, y)
    if y == 0:
        return None

    remaining = n - x
    row = y - 1
    while True:
        row_len = len(buffer.get_line(row))
        if remaining <= row_len:
            return (row_len - remaining, row)
        if row == 0:
            return None
        remaining -= row_len
        row -= 1


__all__ = ["after", "before"]
