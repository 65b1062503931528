"""Buffer capability consumed by motions, plus a simple document store."""

from .document import BufferDocument
from .protocol import BufferIndexError, TextBuffer

__all__ = [
    "BufferDocument",
    "BufferIndexError",
    "TextBuffer",
]
