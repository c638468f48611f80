import pytest

from aoc_solver.errors import OutOfBoundsError
from aoc_solver.grid.window import (
    VisitedMask,
    window_around,
    window_around_cell,
    window_around_span,
    window_text,
)
from aoc_solver.types import NumberSpan, Window


def test_window_in_interior(example_grid):
    w = window_around(example_grid, 2, 2, 3)
    assert w == Window(from_row=1, to_row=3, from_col=1, to_col=4)
    assert w.shape == (3, 4)


@pytest.mark.parametrize("row, col, expected", [
    (0, 0, Window(0, 1, 0, 1)),
    (0, 9, Window(0, 1, 8, 9)),
    (9, 0, Window(8, 9, 0, 1)),
    (9, 9, Window(8, 9, 8, 9)),
    (4, 3, Window(3, 5, 2, 4)),
])
def test_window_clipped_to_grid(example_grid, row, col, expected):
    assert window_around_cell(example_grid, row, col) == expected


def test_window_around_span_at_corner(example_grid):
    span = NumberSpan(row=0, start_col=0, end_col=2, value=467)
    w = window_around_span(example_grid, span)
    assert w == Window(0, 1, 0, 3)
    assert window_text(example_grid, w) == "467.\n...*"


@pytest.mark.parametrize("row, start_col, end_col, bad", [
    (10, 0, 0, (10, 0)),
    (0, -1, 2, (0, -1)),
    (0, 8, 10, (0, 10)),
    (0, -1, 10, (0, -1)),
])
def test_window_out_of_bounds(example_grid, row, start_col, end_col, bad):
    with pytest.raises(OutOfBoundsError) as exc:
        window_around(example_grid, row, start_col, end_col)
    assert (exc.value.row, exc.value.col) == bad


def test_window_cells_row_major():
    w = Window(from_row=1, to_row=2, from_col=3, to_col=4)
    assert list(w.cells()) == [(1, 3), (1, 4), (2, 3), (2, 4)]
    assert w.contains(2, 4)
    assert not w.contains(0, 3)


def test_visited_mask_marks_only_overlap():
    w = Window(from_row=0, to_row=2, from_col=2, to_col=4)
    visited = VisitedMask(w)
    # span runs from col 0 to col 3, overlapping cols 2..3 of the window
    visited.mark_span(NumberSpan(row=1, start_col=0, end_col=3, value=1234))
    assert visited.is_visited(1, 2)
    assert visited.is_visited(1, 3)
    assert not visited.is_visited(1, 4)
    assert not visited.is_visited(0, 2)
    assert visited.count == 2


def test_visited_mask_ignores_spans_outside_window():
    w = Window(from_row=0, to_row=1, from_col=0, to_col=1)
    visited = VisitedMask(w)
    visited.mark_span(NumberSpan(row=5, start_col=0, end_col=1, value=12))
    visited.mark_span(NumberSpan(row=0, start_col=4, end_col=6, value=123))
    assert visited.count == 0
    with pytest.raises(OutOfBoundsError):
        visited.is_visited(2, 0)
