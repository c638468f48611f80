"""Command line entry point: ``python -m aoc_solver {day1,day2,day3} [FILENAME]``."""
import argparse
import logging
import sys

from . import solve_calibration, solve_cube_games, solve_schematic
from .errors import SolverError
from .inputs.loader import read_input_lines, read_input_text, resolve_input_path
from .logging_utils import get_logger
from .postprocess.render_result import format_report


def cmd_day1(args):
    """Sum the calibration values of a day 1 document."""
    path = resolve_input_path(1, args.filename)
    return 1, solve_calibration(read_input_lines(path))


def cmd_day2(args):
    """Sum the possible game ids and minimal-set powers of a day 2 record file."""
    path = resolve_input_path(2, args.filename)
    return 2, solve_cube_games(read_input_lines(path))


def cmd_day3(args):
    """Sum the part numbers and gear ratios of a day 3 schematic."""
    path = resolve_input_path(3, args.filename)
    return 3, solve_schematic(read_input_text(path))


def build_parser():
    p = argparse.ArgumentParser(prog="aoc_solver", description="Advent of Code 2023 solvers (days 1-3)")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd")
    for name, func, help_text in (
        ("day1", cmd_day1, "Trebuchet calibration values"),
        ("day2", cmd_day2, "Cube conundrum games"),
        ("day3", cmd_day3, "Gear ratios in the engine schematic"),
    ):
        s = sub.add_parser(name, help=help_text)
        s.add_argument("filename", nargs="?", default=None, help="Input file (defaults to the bundled sample)")
        s.set_defaults(func=func)
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    if not hasattr(args, "func"):
        p.print_help(sys.stderr)
        return 2

    logger = get_logger()
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    try:
        day, result = args.func(args)
    except SolverError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in format_report(day, result):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
