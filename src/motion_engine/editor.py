"""Editor host: one buffer, one cursor registry, motions bound to the cursor."""

from __future__ import annotations

from typing import Optional, TypeVar

from motion_engine.buffer import TextBuffer
from motion_engine.cursor import (
    Cursor,
    CursorRegistry,
    Mode,
    Position,
    SignedPosition,
)
from motion_engine.motions import directional, flat, search
from motion_engine.runtime import telemetry

_T = TypeVar("_T")


class Editor:
    """Owns a read-only buffer view and the session's cursor registry.

    Every motion except ``goto`` is a query: it reads the buffer and the
    current cursor and returns coordinates. Whether to commit them is up to
    the caller (normally the mode layer), which does so through ``goto``.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        *,
        cursors: Optional[CursorRegistry] = None,
        logger_name: str | None = None,
    ) -> None:
        self.buffer = buffer
        self.cursors = cursors if cursors is not None else CursorRegistry()
        self._logger_name = logger_name or "motion_engine.motions"

    def cursor(self) -> Cursor:
        return self.cursors.current()

    def cursor_mut(self) -> Cursor:
        return self.cursors.current_mut()

    def next_cursor(self) -> int:
        return self.cursors.advance()

    @property
    def pos(self) -> Position:
        return self.cursors.current().pos

    @property
    def x(self) -> int:
        return self.pos[0]

    @property
    def y(self) -> int:
        return self.pos[1]

    def char_under_cursor(self) -> Optional[str]:
        """Character at the cursor, ``None`` on the after-last-character slot."""

        x, y = self.pos
        line = self.buffer.get_line(y)
        if 0 <= x < len(line):
            return line[x]
        return None

    def goto(self, position: Position) -> None:
        """Move the current cursor to ``position``. Does not bound."""

        with telemetry.span(
            "motion::goto",
            logger_name=self._logger_name,
            component="motions",
            metadata={"from": self.pos, "to": tuple(position)},
        ):
            self.cursors.current_mut().move_to(position)

    def set_mode(self, mode: Mode) -> None:
        self.cursors.current_mut().mode = mode

    def after(self, n: int, position: Position) -> Optional[Position]:
        return self._report("after", n, flat.after(self.buffer, n, position))

    def before(self, n: int, position: Position) -> Optional[Position]:
        return self._report("before", n, flat.before(self.buffer, n, position))

    def next(self, n: int) -> Optional[Position]:
        """Position ``n`` characters after the cursor (wraps lines, unlike ``right``)."""

        return self.after(n, self.pos)

    def previous(self, n: int) -> Optional[Position]:
        """Position ``n`` characters before the cursor (wraps lines, unlike ``left``)."""

        return self.before(n, self.pos)

    def right(self, n: int) -> Position:
        return directional.right(self.buffer, self.cursor(), n)

    def left(self, n: int) -> Position:
        return directional.left(self.buffer, self.cursor(), n)

    def up(self, n: int) -> Position:
        return directional.up(self.cursor(), n)

    def down(self, n: int) -> Position:
        return directional.down(self.buffer, self.cursor(), n)

    def right_unbounded(self, n: int) -> SignedPosition:
        return directional.right_unbounded(self.cursor(), n)

    def left_unbounded(self, n: int) -> SignedPosition:
        return directional.left_unbounded(self.cursor(), n)

    def up_unbounded(self, n: int) -> SignedPosition:
        return directional.up_unbounded(self.cursor(), n)

    def down_unbounded(self, n: int) -> SignedPosition:
        return directional.down_unbounded(self.cursor(), n)

    def in_bounds(self, position: SignedPosition) -> bool:
        return directional.in_bounds(self.buffer, position)

    def next_ocur(self, c: str, n: int) -> Optional[int]:
        x, y = self.pos
        column = search.next_occurrence(self.buffer.get_line(y), x, c, n)
        return self._report("next_ocur", n, column, char=c)

    def previous_ocur(self, c: str, n: int) -> Optional[int]:
        x, y = self.pos
        column = search.previous_occurrence(self.buffer.get_line(y), x, c, n)
        return self._report("previous_ocur", n, column, char=c)

    def _report(
        self, motion: str, n: int, result: Optional[_T], **extra: object
    ) -> Optional[_T]:
        if result is None:
            telemetry.record_event(
                "motion.miss",
                level="debug",
                data={"motion": motion, "count": n, "cursor": self.pos, **extra},
                logger_name=self._logger_name,
            )
        return result


__all__ = ["Editor"]
