from __future__ import annotations

import pytest

from motion_engine.buffer import BufferDocument
from motion_engine.cursor import Cursor
from motion_engine.motions import (
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

LINES = ("abc", "", "hello world", "xy")


@pytest.fixture
def buffer() -> BufferDocument:
    return BufferDocument.from_lines(LINES)


def test_right_clamps_to_line_length(buffer: BufferDocument) -> None:
    assert right(buffer, Cursor(x=1, y=0), 5) == (3, 0)


def test_right_within_line(buffer: BufferDocument) -> None:
    assert right(buffer, Cursor(x=2, y=2), 4) == (6, 2)


def test_left_clamps_at_zero(buffer: BufferDocument) -> None:
    assert left(buffer, Cursor(x=2, y=3), 5) == (0, 3)
    assert left(buffer, Cursor(x=4, y=2), 3) == (1, 2)


def test_left_pulls_stored_column_back_onto_line(buffer: BufferDocument) -> None:
    assert left(buffer, Cursor(x=9, y=0), 1) == (3, 0)
    assert left(buffer, Cursor(x=9, y=1), 2) == (0, 1)
    assert left(buffer, Cursor(x=12, y=2), 3) == (9, 2)


@pytest.mark.parametrize("n", [0, 1, 2, 7, 50])
def test_horizontal_results_stay_on_line(buffer: BufferDocument, n: int) -> None:
    for y, line in enumerate(LINES):
        for x in range(len(line) + 4):
            cursor = Cursor(x=x, y=y)
            for new_x, new_y in (right(buffer, cursor, n), left(buffer, cursor, n)):
                assert new_y == y
                assert 0 <= new_x <= len(line)


def test_up_keeps_stored_column() -> None:
    assert up(Cursor(x=9, y=2), 1) == (9, 1)
    assert up(Cursor(x=9, y=2), 10) == (9, 0)


def test_down_clamps_line_and_column(buffer: BufferDocument) -> None:
    assert down(buffer, Cursor(x=9, y=2), 1) == (2, 3)
    assert down(buffer, Cursor(x=2, y=0), 100) == (2, 3)
    assert down(buffer, Cursor(x=2, y=0), 1) == (0, 1)


@pytest.mark.parametrize("n", [0, 1, 3, 4, 99])
def test_vertical_results_stay_in_buffer(buffer: BufferDocument, n: int) -> None:
    for y in range(len(LINES)):
        cursor = Cursor(x=4, y=y)
        assert 0 <= down(buffer, cursor, n)[1] < buffer.line_count
        assert up(cursor, n)[1] >= 0


def test_unbounded_motions_do_plain_arithmetic() -> None:
    cursor = Cursor(x=1, y=1)

    assert right_unbounded(cursor, 10) == (11, 1)
    assert left_unbounded(cursor, 3) == (-2, 1)
    assert up_unbounded(cursor, 2) == (1, -1)
    assert down_unbounded(cursor, 7) == (1, 8)


def test_bound_helpers(buffer: BufferDocument) -> None:
    assert bound_horizontal(buffer, (20, 2)) == (11, 2)
    assert bound_vertical(buffer, (20, 40)) == (2, 3)


def test_in_bounds(buffer: BufferDocument) -> None:
    assert in_bounds(buffer, (3, 0))
    assert in_bounds(buffer, (0, 1))
    assert not in_bounds(buffer, (4, 0))
    assert not in_bounds(buffer, (-1, 0))
    assert not in_bounds(buffer, (0, -1))
    assert not in_bounds(buffer, (0, 4))


class EmptyBuffer:
    line_count = 0

    def get_line(self, index: int) -> str:
        raise AssertionError(f"no line {index} in an empty buffer")


def test_bounded_motions_on_buffer_without_lines() -> None:
    empty = EmptyBuffer()
    cursor = Cursor(x=3, y=2)

    assert right(empty, cursor, 1) == (0, 0)
    assert left(empty, cursor, 1) == (0, 0)
    assert down(empty, cursor, 1) == (0, 0)
    assert bound_vertical(empty, (5, 5)) == (0, 0)
    assert not in_bounds(empty, (0, 0))
