# aoc_solver/__init__.py
# -*- coding: utf-8 -*-
"""
aoc_solver パッケージの入口となるモジュールです。

cli.py や api_proto/local_api.py などから:

    from aoc_solver import solve_schematic

と呼び出されることを想定しています。

Day 3（回路図）では、入力を受け取り
1. グリッドの読み込みと検証
2. 記号に隣接する部品番号の合計
3. "*" のギア比の合計
4. 表示用の結果構築
を順番に呼び出します。

Day 1 / Day 2 の集計も同じ形で呼び出せるようにしています。
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence, Union

import pandas as pd

from .calibration.decoder import sum_calibration
from .cubes.records import parse_games, sum_possible_ids, sum_powers
from .grid.parser import Grid, grid_from_board, grid_from_dataframe, load_grid
from .logging_utils import get_logger
from .postprocess.render_result import (
    build_calibration_result,
    build_cubes_result,
    build_schematic_result,
)
from .schematic.gears import find_gears, sum_gear_ratios
from .schematic.parts import sum_part_numbers

__version__ = "0.1.0"

logger = get_logger()

SchematicInput = Union[str, Sequence[str], pd.DataFrame, Grid]


def _to_grid(source: SchematicInput) -> Grid:
    if isinstance(source, Grid):
        return source
    if isinstance(source, pd.DataFrame):
        return grid_from_dataframe(source)
    if isinstance(source, str):
        return load_grid(source)
    return grid_from_board(source)


def solve_schematic(source: SchematicInput, include_gears: bool = False) -> Dict[str, Any]:
    """
    Day 3 の回路図を解くメイン関数。

    Parameters
    ----------
    source : str, list of str, pandas.DataFrame or Grid
        回路図。テキスト全体、行のリスト、1 セル 1 文字の DataFrame のいずれか。
    include_gears : bool
        True ならギアの位置とギア比の一覧も結果に含めます。

    Returns
    -------
    dict
        'part_sum', 'gear_sum', 'shape'（と 'gears'）を持つ辞書。
    """
    logger.info("=== solve_schematic() START ===")

    grid = _to_grid(source)
    logger.info("Grid shape: %s", grid.shape)

    part_sum = sum_part_numbers(grid)
    logger.info("Sum of part numbers: %d", part_sum)

    gear_sum = sum_gear_ratios(grid)
    logger.info("Sum of gear ratios: %d", gear_sum)

    gears = find_gears(grid) if include_gears else None

    result = build_schematic_result(
        shape=grid.shape,
        part_sum=part_sum,
        gear_sum=gear_sum,
        gears=gears,
    )

    logger.info("=== solve_schematic() END ===")
    return result


def solve_calibration(lines: Iterable[str]) -> Dict[str, Any]:
    """Day 1: 数字のみ / 英単語込みの 2 通りでキャリブレーション値を合計します。"""
    lines = list(lines)
    logger.info("Calibration document: %d lines", len(lines))
    return build_calibration_result(
        digits_total=sum_calibration(lines, spelled=False),
        spelled_total=sum_calibration(lines, spelled=True),
    )


def solve_cube_games(lines: Iterable[str]) -> Dict[str, Any]:
    """Day 2: 可能なゲーム ID の合計と、最小構成のパワーの合計を求めます。"""
    records = parse_games(lines)
    logger.info("Parsed %d games.", len(records))

    possible_id_sum = sum_possible_ids(records)
    power_sum = sum_powers(records)

    return build_cubes_result(possible_id_sum, power_sum, games=len(records))


__all__ = [
    "Grid",
    "load_grid",
    "solve_schematic",
    "solve_calibration",
    "solve_cube_games",
]
