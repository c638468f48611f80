# -*- coding: utf-8 -*-
"""
aoc_solver で使う例外クラスをまとめたモジュールです。

すべて SolverError を基底にしているので、呼び出し側は
``except SolverError`` でまとめて受け取ることができます。
また、組み込み例外（OSError / ValueError / IndexError）も継承しているため、
既存のコードが組み込み例外で捕まえていても動きます。
"""

from __future__ import annotations

from typing import Optional


class SolverError(Exception):
    """aoc_solver の基底例外。"""

    pass


class InputReadError(SolverError, OSError):
    """入力ファイルが存在しない、または読み込めない。"""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Input file could not be read: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class FormatError(SolverError, ValueError):
    """
    入力の形式が不正。

    - 空の入力
    - 行の長さがそろっていない（長方形でない）グリッド
    - Day 2 のレコード行が読み取れない
    """

    def __init__(self, message: str, row: Optional[int] = None):
        self.row = row
        if row is not None:
            message = f"{message} (line {row + 1})"
        super().__init__(message)


class OutOfBoundsError(SolverError, IndexError):
    """グリッドの範囲外アクセス。内部の不変条件違反（バグ）を表します。"""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{cols} grid"
        )


class GridValidationError(SolverError, ValueError):
    """グリッドに想定外の文字が含まれている、または数字が長すぎる。"""

    def __init__(self, message: str, row: int, col: int, char: str = ""):
        self.row = row
        self.col = col
        self.char = char
        super().__init__(f"{message} at row {row}, col {col}")
