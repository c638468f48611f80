# -*- coding: utf-8 -*-
"""
集計結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


def build_schematic_result(
    shape: Tuple[int, int],
    part_sum: int,
    gear_sum: int,
    gears: Optional[List[Tuple[int, int, int]]] = None,
) -> Dict[str, Any]:
    """
    Day 3 の結果を辞書にまとめます。

    gears を渡した場合は、ギアの位置とギア比の一覧も含めます。
    """
    result: Dict[str, Any] = {
        "part_sum": int(part_sum),
        "gear_sum": int(gear_sum),
        "shape": (int(shape[0]), int(shape[1])),
    }
    if gears is not None:
        result["gears"] = [
            {"row": r, "col": c, "ratio": ratio} for r, c, ratio in gears
        ]
    return result


def build_calibration_result(digits_total: int, spelled_total: int) -> Dict[str, Any]:
    return {
        "digits_total": int(digits_total),
        "spelled_total": int(spelled_total),
    }


def build_cubes_result(possible_id_sum: int, power_sum: int, games: int) -> Dict[str, Any]:
    return {
        "possible_id_sum": int(possible_id_sum),
        "power_sum": int(power_sum),
        "games": int(games),
    }


def format_report(day: int, result: Dict[str, Any]) -> List[str]:
    """
    CLI で表示する行を作ります。
    """
    if day == 1:
        return [
            f"The sum of the calibration values (digits only) is: {result['digits_total']}",
            f"The sum of the calibration values (digits and words) is: {result['spelled_total']}",
        ]
    if day == 2:
        return [
            f"The sum of the possible game ids is: {result['possible_id_sum']}",
            f"The cumulative power of the minimal games is: {result['power_sum']}",
        ]
    if day == 3:
        return [
            f"The value of the sum of the valid part numbers is: {result['part_sum']}",
            f"The value of the sum of the gear ratios is: {result['gear_sum']}",
        ]
    raise ValueError(f"Unknown day: {day}")
