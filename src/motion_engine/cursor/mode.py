"""Mode tags carried by cursors.

The variant set belongs to the host's mode state machine. Motions copy the
tag around and never branch on it.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Union


class CommandMode(str, Enum):
    """Command family: keys are interpreted as commands."""

    NORMAL = "normal"


class PrimitiveMode(str, Enum):
    """Primitive family: keys are fed to the buffer more or less directly."""

    INSERT = "insert"


Mode = Union[CommandMode, PrimitiveMode]

DEFAULT_MODE: Mode = CommandMode.NORMAL


def mode_family(mode: Mode) -> Literal["command", "primitive"]:
    if isinstance(mode, CommandMode):
        return "command"
    if isinstance(mode, PrimitiveMode):
        return "primitive"
    raise TypeError(f"Unknown mode tag {mode!r}")


__all__ = [
    "CommandMode",
    "PrimitiveMode",
    "Mode",
    "DEFAULT_MODE",
    "mode_family",
]
