"""Movement engine: pure motion functions over a ``TextBuffer``."""

from .directional import (
    bound_horizontal,
    bound_vertical,
    down,
    down_unbounded,
    in_bounds,
    left,
    left_unbounded,
    right,
    right_unbounded,
    up,
    up_unbounded,
)
from .flat import after, before
from .search import next_occurrence, previous_occurrence

__all__ = [
    "after",
    "before",
    "bound_horizontal",
    "bound_vertical",
    "in_bounds",
    "right",
    "left",
    "up",
    "down",
    "right_unbounded",
    "left_unbounded",
    "up_unbounded",
    "down_unbounded",
    "next_occurrence",
    "previous_occurrence",
]
