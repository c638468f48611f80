# -*- coding: utf-8 -*-
"""
グリッドの各行から「数字の並び（NumberSpan）」を抽出するモジュールです。

- iter_row_spans : 1 行分の数字の並びを左から順に列挙
- iter_spans     : 全行分をまとめて列挙
- derive_span    : 任意の数字マスから、その数字の並び全体を復元

部品番号の合計（parts）とギア比の合計（gears）の両方が
derive_span を共通で使います。
"""

from __future__ import annotations

import enum
from typing import Iterator

from ..errors import OutOfBoundsError
from ..types import NumberSpan
from .parser import Grid


class SpanScanState(enum.Enum):
    """derive_span の走査状態。"""

    SCANNING_LEFT = "scanning_left"
    SCANNING_RIGHT = "scanning_right"
    DONE = "done"


def derive_span(grid: Grid, row: int, col: int) -> NumberSpan:
    """
    数字マス (row, col) を含む数字の並び全体を復元します。

    ウィンドウの中だけでなく、行全体を左右に走査して
    数字でないマスかグリッドの端に当たるまで広げます。
    どのマスから始めても同じ (start_col, end_col, value) になります。

    Parameters
    ----------
    grid : Grid
        対象のグリッド。
    row, col : int
        数字が入っているマスの座標。

    Returns
    -------
    NumberSpan
    """
    if not grid.is_digit_at(row, col):
        raise ValueError(f"Cell ({row}, {col}) is not a digit: {grid.get(row, col)!r}")

    digits = grid.digit_mask[row]
    start_col = end_col = col
    state = SpanScanState.SCANNING_LEFT

    while state is not SpanScanState.DONE:
        if state is SpanScanState.SCANNING_LEFT:
            if start_col > 0 and digits[start_col - 1]:
                start_col -= 1
            else:
                state = SpanScanState.SCANNING_RIGHT
        elif state is SpanScanState.SCANNING_RIGHT:
            if end_col < grid.cols - 1 and digits[end_col + 1]:
                end_col += 1
            else:
                state = SpanScanState.DONE

    text = "".join(grid.data[row, start_col:end_col + 1])
    return NumberSpan(row=row, start_col=start_col, end_col=end_col, value=int(text))


def iter_row_spans(grid: Grid, row: int) -> Iterator[NumberSpan]:
    """
    1 行の中の数字の並びを左から順に返します。

    行末に達した数字もその場で閉じます（次の行へは続きません）。
    何度呼び出しても、毎回行頭から列挙し直します。
    """
    if not 0 <= row < grid.rows:
        raise OutOfBoundsError(row, 0, grid.rows, grid.cols)

    digits = grid.digit_mask[row]
    col = 0
    while col < grid.cols:
        if not digits[col]:
            # 数字でなければスキップ
            col += 1
            continue

        span = derive_span(grid, row, col)
        yield span
        col = span.end_col + 1


def iter_spans(grid: Grid) -> Iterator[NumberSpan]:
    """グリッド全体の数字の並びを、行優先で返します。"""
    for row in range(grid.rows):
        yield from iter_row_spans(grid, row)
