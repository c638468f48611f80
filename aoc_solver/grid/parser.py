# -*- coding: utf-8 -*-
"""
回路図（schematic）のテキストを内部表現のグリッドに変換するモジュールです。

主な役割:
- テキスト / 行のリスト / pandas.DataFrame を numpy 配列に変換
- 行の長さがそろっているか（長方形か）をチェック
- 各セルが「数字」「空き(.)」「記号」のいずれかであることをチェック
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import BLANK_CELL, MAX_PART_DIGITS
from ..errors import FormatError, GridValidationError, OutOfBoundsError

# ASCII の数字
DIGIT_CHARS: Tuple[str, ...] = tuple(string.digits)

# 記号として扱う文字（句読点のうち "." 以外）
SYMBOL_CHARS: Tuple[str, ...] = tuple(c for c in string.punctuation if c != BLANK_CELL)

CELL_DTYPE = "<U1"


def is_digit(ch: str) -> bool:
    """ASCII の数字かどうか。"""
    return ch in DIGIT_CHARS


def is_symbol(ch: str) -> bool:
    """記号（"." 以外の句読点）かどうか。"""
    return ch in SYMBOL_CHARS


@dataclass(frozen=True, eq=False)
class Grid:
    """
    読み込み後は変更されない、長方形の文字グリッドです。

    Attributes
    ----------
    data : numpy.ndarray
        shape = (rows, cols)、dtype = "<U1" の 2次元配列（書き込み不可）。
    digit_mask : numpy.ndarray
        数字のマスが True になっている bool 配列。
    symbol_mask : numpy.ndarray
        記号のマスが True になっている bool 配列。
    """

    data: np.ndarray
    digit_mask: np.ndarray = field(init=False, repr=False)
    symbol_mask: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        if self.data.ndim != 2:
            raise FormatError(f"Grid must be 2D, got shape {self.data.shape}")
        if self.data.size == 0:
            raise FormatError("Input grid is empty")

        validate_cells(self.data)

        data = self.data.copy()
        data.flags.writeable = False
        digit_mask = np.isin(data, DIGIT_CHARS)
        validate_number_lengths(digit_mask)
        digit_mask.flags.writeable = False
        symbol_mask = np.isin(data, SYMBOL_CHARS)
        symbol_mask.flags.writeable = False

        # frozen dataclass なので object.__setattr__ で設定する
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "digit_mask", digit_mask)
        object.__setattr__(self, "symbol_mask", symbol_mask)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.data.shape

    @property
    def rows(self) -> int:
        return self.data.shape[0]

    @property
    def cols(self) -> int:
        return self.data.shape[1]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> str:
        """
        (row, col) の文字を返します。

        numpy の負のインデックス（末尾からの参照）は使わせず、
        範囲外は OutOfBoundsError にします。
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)
        return str(self.data[row, col])

    def is_digit_at(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)
        return bool(self.digit_mask[row, col])

    def row_text(self, row: int) -> str:
        if not 0 <= row < self.rows:
            raise OutOfBoundsError(row, 0, self.rows, self.cols)
        return "".join(self.data[row])

    def to_lines(self) -> List[str]:
        return [self.row_text(i) for i in range(self.rows)]


def validate_cells(data: np.ndarray) -> None:
    """
    すべてのセルが「数字」「空き(.)」「記号」のいずれかであることを確認します。

    最初に見つかった不正な文字の位置を GridValidationError で報告します。
    """
    allowed = np.isin(data, DIGIT_CHARS) | np.isin(data, SYMBOL_CHARS) | (data == BLANK_CELL)
    if allowed.all():
        return

    row, col = (int(v) for v in np.argwhere(~allowed)[0])
    ch = str(data[row, col])
    raise GridValidationError(f"Unexpected character {ch!r}", row, col, ch)


def validate_number_lengths(digit_mask: np.ndarray, max_digits: int = MAX_PART_DIGITS) -> None:
    """
    数字の並びが max_digits 桁を超えていないことを確認します。

    各行の左右に False を 1 列ずつ足してから差分をとると、
    +1 の位置が並びの先頭、-1 の位置が並びの末尾の次になります。
    """
    rows = digit_mask.shape[0]
    padded = np.zeros((rows, digit_mask.shape[1] + 2), dtype=np.int8)
    padded[:, 1:-1] = digit_mask
    edges = np.diff(padded, axis=1)

    # argwhere は行優先なので、先頭と末尾は同じ順番で対応する
    starts = np.argwhere(edges == 1)
    ends = np.argwhere(edges == -1)
    lengths = ends[:, 1] - starts[:, 1]

    too_long = np.flatnonzero(lengths > max_digits)
    if too_long.size == 0:
        return

    i = int(too_long[0])
    row, col = int(starts[i, 0]), int(starts[i, 1])
    raise GridValidationError(
        f"Number has {int(lengths[i])} digits (max {max_digits})", row, col
    )


def grid_from_board(lines: Sequence[str]) -> Grid:
    """
    行文字列のリストから Grid を作ります。

    末尾の空行は無視しますが、途中の空行は長さ不一致として扱います。
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and rows[-1] == "":
        rows.pop()

    if not rows:
        raise FormatError("Input grid is empty")

    width = len(rows[0])
    if width == 0:
        raise FormatError("Row is empty", row=0)
    for i, line in enumerate(rows):
        if len(line) != width:
            raise FormatError(
                f"Row length {len(line)} does not match first row length {width}", row=i
            )

    data = np.array([list(line) for line in rows], dtype=CELL_DTYPE)
    return Grid(data)


def load_grid(text: str) -> Grid:
    """
    入力テキスト全体から Grid を作ります。

    Parameters
    ----------
    text : str
        改行区切りの回路図。"\\r\\n" 改行にも対応します。

    Returns
    -------
    Grid

    Notes
    -----
    str.splitlines() は "\\x0c" や "\\u2028" でも行を分けてしまうので使いません。
    区切りは "\\n" だけで、それ以外の制御文字は validate_cells で不正文字になります。
    """
    return grid_from_board(text.split("\n"))


def normalize_cell(x: Any) -> str:
    """
    DataFrame の個々のセルを 1 文字の文字列に変換します。

    - None / NaN: ""（行が短くなるので、後で長さ不一致として検出される）
    - それ以外: str() したもの
    """
    if x is None:
        return ""
    if not isinstance(x, str) and pd.isna(x):
        return ""
    s = str(x)
    if len(s) > 1:
        raise FormatError(f"Grid cell must be a single character, got {s!r}")
    return s


def grid_from_dataframe(df: pd.DataFrame) -> Grid:
    """
    1 セル 1 文字の DataFrame から Grid を作ります。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ。

    Returns
    -------
    Grid
    """
    rows, cols = df.shape
    lines = []
    for i in range(rows):
        lines.append("".join(normalize_cell(df.iat[i, j]) for j in range(cols)))
    return grid_from_board(lines)
