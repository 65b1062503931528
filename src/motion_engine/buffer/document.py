"""List-of-lines document implementing the ``TextBuffer`` capability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

from .protocol import BufferIndexError


@dataclass(frozen=True, slots=True)
class BufferDocument:
    """Immutable text storage handed to the movement engine.

    Hosts that own a richer buffer only need to expose ``line_count`` and
    ``get_line``; this class exists for embedding and for tests.
    """

    _lines: Tuple[str, ...] = field(default_factory=lambda: ("",))

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=tuple(text.split("\n")))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=tuple(lines) or ("",))

    def snapshot(self) -> Sequence[str]:
        return self._lines

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        if index < 0 or index >= len(self._lines):
            raise BufferIndexError(
                f"Line {index} out of range (line_count={len(self._lines)})",
                index=index,
            )
        return self._lines[index]
