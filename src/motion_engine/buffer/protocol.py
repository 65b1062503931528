"""Read-only buffer capability consumed by the movement engine."""

from __future__ import annotations

from typing import Protocol


class TextBuffer(Protocol):
    """Minimal line-oriented view of a text buffer.

    Lines are plain ``str`` values: ``len(line)`` is the line length and
    indexing or iteration yields its characters. Motions never mutate the
    buffer.
    """

    @property
    def line_count(self) -> int:
        """Number of lines held by the buffer."""
        ...

    def get_line(self, index: int) -> str:
        """Return line ``index``; raise ``BufferIndexError`` when out of range."""
        ...


class BufferIndexError(RuntimeError):
    """Raised when a line index falls outside the buffer."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
