# -*- coding: utf-8 -*-
"""
記号に隣接する部品番号（part number）を集計するモジュールです。

各数字の並びについて、周囲 8 近傍ウィンドウに記号が 1 つでもあれば
有効な部品番号とみなします。記号がいくつ隣接していても、
1 つの数字が加算されるのは 1 回だけです。
"""

from __future__ import annotations

from typing import List

from ..grid.parser import Grid
from ..grid.span_scanner import iter_spans
from ..grid.window import window_around_span
from ..logging_utils import get_logger
from ..types import NumberSpan

logger = get_logger()


def is_symbol_adjacent(grid: Grid, span: NumberSpan) -> bool:
    """数字の並びのウィンドウ内に記号があるかどうか。"""
    window = window_around_span(grid, span)
    return bool(grid.symbol_mask[window.slices].any())


def find_part_numbers(grid: Grid) -> List[NumberSpan]:
    """記号に隣接している数字の並びを、行優先の順で返します。"""
    return [span for span in iter_spans(grid) if is_symbol_adjacent(grid, span)]


def sum_part_numbers(grid: Grid) -> int:
    """
    有効な部品番号の合計を返します。

    Parameters
    ----------
    grid : Grid
        読み込み済みの回路図。

    Returns
    -------
    int
        記号に隣接する数字の値の合計（0 以上）。
    """
    parts = find_part_numbers(grid)
    total = sum(span.value for span in parts)
    logger.debug("Found %d part numbers, sum=%d", len(parts), total)
    return total
