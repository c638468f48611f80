"""
Pytest configuration and fixtures
"""
import textwrap

import pytest

from aoc_solver.grid.parser import load_grid

EXAMPLE_SCHEMATIC = textwrap.dedent(
    """\
    467..114..
    ...*......
    ..35..633.
    ......#...
    617*......
    .....+.58.
    ..592.....
    ......755.
    ...$.*....
    .664.598..
    """
)

CALIBRATION_DIGITS = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]

CALIBRATION_WORDS = [
    "two1nine",
    "eightwothree",
    "abcone2threexyz",
    "xtwone3four",
    "4nineeightseven2",
    "zoneight234",
    "7pqrstsixteen",
]

CUBE_GAMES = [
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green",
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue",
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red",
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red",
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green",
]


@pytest.fixture
def example_text():
    return EXAMPLE_SCHEMATIC


@pytest.fixture
def example_grid():
    return load_grid(EXAMPLE_SCHEMATIC)


@pytest.fixture
def edge_grid():
    """A number touching the last column, followed by a row starting with digits."""
    return load_grid(".....*\n...123\n45....\n")


@pytest.fixture
def calibration_digits():
    return list(CALIBRATION_DIGITS)


@pytest.fixture
def calibration_words():
    return list(CALIBRATION_WORDS)


@pytest.fixture
def cube_games():
    return list(CUBE_GAMES)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from api_proto.local_api import app

    return TestClient(app)
