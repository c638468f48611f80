import pytest

from aoc_solver.calibration.decoder import calibration_value, iter_digits, sum_calibration


@pytest.mark.parametrize("line, expected", [
    ("1abc2", 12),
    ("pqr3stu8vwx", 38),
    ("a1b2c3d4e5f", 15),
    ("treb7uchet", 77),
    ("two1nine", 11),
    ("abc", 0),
])
def test_digits_only(line, expected):
    assert calibration_value(line, spelled=False) == expected


@pytest.mark.parametrize("line, expected", [
    ("two1nine", 29),
    ("eightwothree", 83),
    ("abcone2threexyz", 13),
    ("xtwone3four", 24),
    ("4nineeightseven2", 42),
    ("zoneight234", 14),
    ("7pqrstsixteen", 76),
    ("eightwo", 82),
    ("oneight", 18),
    ("TwO1NiNe", 29),
])
def test_spelled_words(line, expected):
    assert calibration_value(line) == expected


def test_overlapping_words_both_found():
    assert list(iter_digits("twone")) == [2, 1]
    assert list(iter_digits("twone", spelled=False)) == []


def test_sum_examples(calibration_digits, calibration_words):
    assert sum_calibration(calibration_digits, spelled=False) == 142
    assert sum_calibration(calibration_words) == 281
    assert sum_calibration(calibration_words, spelled=False) == 209


def test_blank_lines_are_skipped():
    assert sum_calibration(["", "1abc2", "   ", "treb7uchet"], spelled=False) == 89
