"""Position and cursor model."""

from .cursor import Cursor, Position, SignedPosition, new_cursor
from .mode import DEFAULT_MODE, CommandMode, Mode, PrimitiveMode, mode_family
from .registry import CursorRegistry, CursorRegistryError

__all__ = [
    "Cursor",
    "Position",
    "SignedPosition",
    "new_cursor",
    "Mode",
    "CommandMode",
    "PrimitiveMode",
    "DEFAULT_MODE",
    "mode_family",
    "CursorRegistry",
    "CursorRegistryError",
]
