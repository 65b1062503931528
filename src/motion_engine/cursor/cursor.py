"""Cursor records and coordinate aliases."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .mode import DEFAULT_MODE, Mode

Position = Tuple[int, int]  # (column, line), both >= 0
SignedPosition = Tuple[int, int]  # (column, line), may be negative or past the end


@dataclass(slots=True)
class Cursor:
    """A mode plus a position. Knows nothing about the buffer it points into.

    ``x`` may equal the length of line ``y``: that is the slot right after the
    last character, a legal resting place.
    """

    x: int = 0
    y: int = 0
    mode: Mode = DEFAULT_MODE

    @classmethod
    def new(cls) -> "Cursor":
        return cls(x=0, y=0, mode=DEFAULT_MODE)

    @property
    def pos(self) -> Position:
        return (self.x, self.y)

    def move_to(self, position: Position) -> None:
        self.x, self.y = position

    def copy(self) -> "Cursor":
        return replace(self)


def new_cursor() -> Cursor:
    return Cursor.new()


__all__ = ["Cursor", "Position", "SignedPosition", "new_cursor"]
