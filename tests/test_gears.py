import logging

from aoc_solver.grid.parser import load_grid
from aoc_solver.schematic import gears
from aoc_solver.schematic.gears import find_adjacent_spans, find_gears, gear_ratio, sum_gear_ratios
from aoc_solver.types import NumberSpan


def test_example_gear_sum(example_grid):
    assert sum_gear_ratios(example_grid) == 467835


def test_example_gears(example_grid):
    assert find_gears(example_grid) == [
        (1, 3, 467 * 35),
        (8, 5, 755 * 598),
    ]


def test_star_with_one_number_is_not_a_gear(example_grid):
    # "617*" has a single neighbour
    assert gear_ratio(example_grid, 4, 3) == 0


def test_three_numbers_contribute_zero():
    grid = load_grid(
        "1.2\n"
        ".*.\n"
        "3..\n"
    )
    assert len(find_adjacent_spans(grid, 1, 1)) == 3
    assert gear_ratio(grid, 1, 1) == 0
    assert sum_gear_ratios(grid) == 0


def test_span_covering_several_window_cells_counted_once():
    grid = load_grid(
        "..*..\n"
        "1234.\n"
    )
    assert find_adjacent_spans(grid, 0, 2) == [NumberSpan(1, 0, 3, 1234)]
    assert gear_ratio(grid, 0, 2) == 0


def test_spans_extending_outside_window():
    grid = load_grid(
        "..*45\n"
        "123..\n"
    )
    assert find_adjacent_spans(grid, 0, 2) == [
        NumberSpan(0, 3, 4, 45),
        NumberSpan(1, 0, 2, 123),
    ]
    assert gear_ratio(grid, 0, 2) == 45 * 123


def test_equal_values_are_distinct_spans():
    grid = load_grid(
        "5.5\n"
        ".*.\n"
    )
    assert gear_ratio(grid, 1, 1) == 25


def test_numbers_on_same_row():
    grid = load_grid("12*34")
    assert sum_gear_ratios(grid) == 408


def test_gears_in_corners():
    grid = load_grid(
        "*1.3\n"
        "2.4*\n"
    )
    assert gear_ratio(grid, 0, 0) == 2
    assert gear_ratio(grid, 1, 3) == 12
    assert sum_gear_ratios(grid) == 14


def test_only_star_symbols_are_gears():
    grid = load_grid(
        "12#34\n"
    )
    assert sum_gear_ratios(grid) == 0


def test_gear_with_zero_value_still_listed():
    grid = load_grid("0*7")
    assert find_gears(grid) == [(0, 1, 0)]
    assert sum_gear_ratios(grid) == 0


def test_window_dump(monkeypatch, caplog):
    dump_logger = logging.getLogger("aoc_window_test")
    monkeypatch.setattr(gears, "WINDOW_DEBUG_ENABLED", True)
    monkeypatch.setattr(gears, "get_window_debug_logger", lambda: dump_logger)
    caplog.set_level(logging.DEBUG, logger="aoc_window_test")

    grid = load_grid("12*34")
    assert gear_ratio(grid, 0, 2) == 408
    assert "window around (0, 2)" in caplog.text
    assert "2*3" in caplog.text
