"""Ordered set of live cursors with a cyclic "current" selector."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from motion_engine.runtime import telemetry

from .cursor import Cursor


class CursorRegistryError(RuntimeError):
    """Raised when the selector no longer points at a cursor.

    The registry keeps the selector in range on its own, so seeing this means
    something outside the engine corrupted it.
    """

    def __init__(self, message: str, *, selector: int | None = None) -> None:
        super().__init__(message)
        self.selector = selector


class CursorRegistry:
    """Owns every cursor of an editing session.

    Coordinates are not bounded against any buffer here; the movement engine
    does that where the cursor is used.
    """

    def __init__(
        self,
        cursors: Optional[Iterable[Cursor]] = None,
        *,
        selector: int = 0,
        logger_name: str | None = None,
    ) -> None:
        self._cursors: List[Cursor] = (
            list(cursors) if cursors is not None else [Cursor.new()]
        )
        if not self._cursors:
            raise ValueError("CursorRegistry requires at least one cursor")
        if not 0 <= selector < len(self._cursors):
            raise ValueError(
                f"selector {selector} out of range for {len(self._cursors)} cursors"
            )
        self.selector = selector
        self._logger_name = logger_name or "motion_engine.cursor"

    def __len__(self) -> int:
        return len(self._cursors)

    def __iter__(self) -> Iterator[Cursor]:
        return iter(self._cursors)

    def current(self) -> Cursor:
        """Return a detached copy of the current cursor."""

        return self._checked().copy()

    def current_mut(self) -> Cursor:
        """Return the live current cursor for in-place updates."""

        return self._checked()

    def advance(self) -> int:
        with telemetry.span(
            "cursor::advance",
            logger_name=self._logger_name,
            component="cursor",
            metadata={"from": self.selector, "count": len(self._cursors)},
        ) as handle:
            self.selector = (self.selector + 1) % len(self._cursors)
            handle.add_metadata("to", self.selector)
        return self.selector

    def _checked(self) -> Cursor:
        if not 0 <= self.selector < len(self._cursors):
            telemetry.record_event(
                "cursor.selector_out_of_range",
                level="error",
                data={"selector": self.selector, "count": len(self._cursors)},
                logger_name=self._logger_name,
            )
            raise CursorRegistryError(
                f"Cursor selector {self.selector} out of range", selector=self.selector
            )
        return self._cursors[self.selector]


__all__ = ["CursorRegistry", "CursorRegistryError"]
