"""Single-line character search (the ``f``/``F`` family)."""

from __future__ import annotations

from typing import Optional


def next_occurrence(line: str, column: int, char: str, n: int) -> Optional[int]:
    """Column of the ``n``-th ``char`` at or right of ``column``.

    The cursor sits on a slot before the character at ``column``, so that
    character is the first one scanned.
    """

    if n <= 0:
        return None
    seen = 0
    for index in range(max(column, 0), len(line)):
        if line[index] == char:
            seen += 1
            if seen == n:
                return index
    return None


def previous_occurrence(line: str, column: int, char: str, n: int) -> Optional[int]:
    """Column of the ``n``-th ``char`` strictly left of ``column``."""

    if n <= 0:
        return None
    seen = 0
    for index in range(min(column, len(line)) - 1, -1, -1):
        if line[index] == char:
            seen += 1
            if seen == n:
                return index
    return None


__all__ = ["next_occurrence", "previous_occurrence"]
