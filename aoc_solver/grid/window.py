# -*- coding: utf-8 -*-
"""
数字の並びや記号マスの「周囲 8 近傍」を表すウィンドウを扱うモジュールです。

ウィンドウは対象を上下左右に 1 マスずつ広げた長方形で、
グリッドの端ではグリッドの範囲にクリップされます。
斜めのマスも隣接として扱います。
"""

from __future__ import annotations

import numpy as np

from ..errors import OutOfBoundsError
from ..types import NumberSpan, Window
from .parser import Grid


def window_around(grid: Grid, row: int, start_col: int, end_col: int) -> Window:
    """
    row 行の start_col..end_col（端を含む）を囲むウィンドウを返します。
    """
    for col in (start_col, end_col):
        if not grid.in_bounds(row, col):
            raise OutOfBoundsError(row, col, grid.rows, grid.cols)

    return Window(
        from_row=max(row - 1, 0),
        to_row=min(row + 1, grid.rows - 1),
        from_col=max(start_col - 1, 0),
        to_col=min(end_col + 1, grid.cols - 1),
    )


def window_around_span(grid: Grid, span: NumberSpan) -> Window:
    return window_around(grid, span.row, span.start_col, span.end_col)


def window_around_cell(grid: Grid, row: int, col: int) -> Window:
    """1 マスを長さ 1 の並びとみなしてウィンドウを作ります。"""
    return window_around(grid, row, col, col)


def window_text(grid: Grid, window: Window) -> str:
    """ウィンドウの中身を改行区切りの文字列にします（デバッグ用）。"""
    block = grid.data[window.slices]
    return "\n".join("".join(r) for r in block)


class VisitedMask:
    """
    ウィンドウ内の「すでにどれかの数字に割り当て済みのマス」を記録します。

    ギア 1 つ分の計算ごとに新しく作り、計算が終わったら捨てます。
    """

    def __init__(self, window: Window):
        self.window = window
        self._used = np.zeros(window.shape, dtype=bool)

    def is_visited(self, row: int, col: int) -> bool:
        if not self.window.contains(row, col):
            raise OutOfBoundsError(row, col, self.window.rows, self.window.cols)
        return bool(self._used[row - self.window.from_row, col - self.window.from_col])

    def mark_span(self, span: NumberSpan) -> None:
        """数字の並びのうち、ウィンドウと重なる部分を割り当て済みにします。"""
        w = self.window
        if not w.from_row <= span.row <= w.to_row:
            return
        lo = max(span.start_col, w.from_col)
        hi = min(span.end_col, w.to_col)
        if lo > hi:
            return
        self._used[span.row - w.from_row, lo - w.from_col:hi - w.from_col + 1] = True

    @property
    def count(self) -> int:
        return int(self._used.sum())
