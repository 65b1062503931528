"""Directional motions relative to a cursor.

Bounded variants always return an in-buffer position. Unbounded variants do
plain signed arithmetic so callers can tell whether a step would leave the
buffer before deciding how to clamp it.

Vertical motion keeps the cursor's stored column. ``up`` does not clamp it to
the destination line at all; ``down`` goes through ``bound_vertical`` and so
clamps horizontally too. A stored column past the end of the line is pulled
back onto it by both horizontal motions. A buffer with no lines bounds
everything to (0, 0).
"""

from __future__ import annotations

from motion_engine.buffer import TextBuffer
from motion_engine.cursor import Cursor, Position, SignedPosition


def bound_horizontal(buffer: TextBuffer, position: Position) -> Position:
    if buffer.line_count == 0:
        return (0, 0)
    x, y = position
    return (min(x, len(buffer.get_line(y))), y)


def bound_vertical(buffer: TextBuffer, position: Position) -> Position:
    x, y = position
    last_line = max(buffer.line_count - 1, 0)
    return bound_horizontal(buffer, (x, min(y, last_line)))


def in_bounds(buffer: TextBuffer, position: SignedPosition) -> bool:
    """Whether ``position`` is a legal resting place in ``buffer``."""

    x, y = position
    if y < 0 or y >= buffer.line_count or x < 0:
        return False
    return x <= len(buffer.get_line(y))


def right(buffer: TextBuffer, cursor: Cursor, n: int) -> Position:
    return bound_horizontal(buffer, (cursor.x + n, cursor.y))


def left(buffer: TextBuffer, cursor: Cursor, n: int) -> Position:
    return bound_horizontal(buffer, (max(cursor.x - n, 0), cursor.y))


def up(cursor: Cursor, n: int) -> Position:
    if n <= cursor.y:
        return (cursor.x, cursor.y - n)
    return (cursor.x, 0)


def down(buffer: TextBuffer, cursor: Cursor, n: int) -> Position:
    return bound_vertical(buffer, (cursor.x, cursor.y + n))


def right_unbounded(cursor: Cursor, n: int) -> SignedPosition:
    return (cursor.x + n, cursor.y)


def left_unbounded(cursor: Cursor, n: int) -> SignedPosition:
    return (cursor.x - n, cursor.y)


def up_unbounded(cursor: Cursor, n: int) -> SignedPosition:
    return (cursor.x, cursor.y - n)


def down_unbounded(cursor: Cursor, n: int) -> SignedPosition:
    return (cursor.x, cursor.y + n)


__all__ = [
    "bound_horizontal",
    "bound_vertical",
    "in_bounds",
    "right",
    "left",
    "up",
    "down",
    "right_unbounded",
    "left_unbounded",
    "up_unbounded",
    "down_unbounded",
]
