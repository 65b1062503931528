"""Cursor model and movement engine for modal text editors."""

__all__ = [
    "buffer",
    "cursor",
    "motions",
    "editor",
    "runtime",
]

__version__ = "0.1.0"
