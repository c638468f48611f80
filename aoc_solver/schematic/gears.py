# -*- coding: utf-8 -*-
"""
ギア比（gear ratio）を集計するモジュールです。

"*" のマスごとに周囲 8 近傍ウィンドウを調べ、
重なっている「異なる」数字の並びがちょうど 2 つなら、
その 2 つの値の積をギア比とします。それ以外は 0 です。

ウィンドウ内を左上から行優先で走査し、
- 数字であり
- まだどの数字にも割り当てられていない
マスを見つけたときだけ derive_span で数字全体を復元します。
復元した数字のうちウィンドウと重なる部分は割り当て済みにするので、
同じ数字を 2 回数えることはありません。
"""

from __future__ import annotations

from typing import List, Tuple

from ..config import GEAR_PART_COUNT, GEAR_SYMBOL, WINDOW_DEBUG_ENABLED
from ..grid.parser import Grid
from ..grid.span_scanner import derive_span
from ..grid.window import VisitedMask, window_around_cell, window_text
from ..logging_utils import get_logger, get_window_debug_logger
from ..types import NumberSpan

logger = get_logger()


def find_adjacent_spans(grid: Grid, row: int, col: int) -> List[NumberSpan]:
    """
    (row, col) の周囲 8 近傍と重なる、異なる数字の並びを返します。

    並び順はウィンドウ内で最初に見つかった順（行優先）です。
    """
    window = window_around_cell(grid, row, col)
    visited = VisitedMask(window)
    spans: List[NumberSpan] = []

    for r, c in window.cells():
        if not grid.digit_mask[r, c] or visited.is_visited(r, c):
            continue
        span = derive_span(grid, r, c)
        visited.mark_span(span)
        spans.append(span)

    if WINDOW_DEBUG_ENABLED:
        get_window_debug_logger().debug(
            "window around (%d, %d) rows=%d..%d cols=%d..%d spans=%s\n%s",
            row, col,
            window.from_row, window.to_row, window.from_col, window.to_col,
            [s.value for s in spans],
            window_text(grid, window),
        )

    return spans


def _product(spans: List[NumberSpan]) -> int:
    ratio = 1
    for span in spans:
        ratio *= span.value
    return ratio


def gear_ratio(grid: Grid, row: int, col: int) -> int:
    """
    (row, col) の記号のギア比を返します。

    隣接する異なる数字がちょうど GEAR_PART_COUNT（=2）個のときだけ積を返し、
    それ以外（0 個、1 個、3 個以上）は 0 を返します。
    """
    spans = find_adjacent_spans(grid, row, col)
    if len(spans) != GEAR_PART_COUNT:
        logger.debug("(%d, %d): %d adjacent numbers, not a gear", row, col, len(spans))
        return 0

    ratio = _product(spans)
    logger.debug("(%d, %d): gear %s ratio=%d", row, col, [s.value for s in spans], ratio)
    return ratio


def find_gears(grid: Grid) -> List[Tuple[int, int, int]]:
    """ギアになっている "*" の (row, col, ギア比) を行優先で返します。"""
    gears: List[Tuple[int, int, int]] = []
    for r, c in zip(*(grid.data == GEAR_SYMBOL).nonzero()):
        spans = find_adjacent_spans(grid, int(r), int(c))
        if len(spans) == GEAR_PART_COUNT:
            gears.append((int(r), int(c), _product(spans)))
    return gears


def sum_gear_ratios(grid: Grid) -> int:
    """すべての "*" についてギア比を合計します。"""
    gears = find_gears(grid)
    total = sum(ratio for _, _, ratio in gears)
    logger.debug("Found %d gears, sum=%d", len(gears), total)
    return total
