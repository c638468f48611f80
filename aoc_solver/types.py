# -*- coding: utf-8 -*-
"""
aoc_solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


@dataclass(frozen=True)
class NumberSpan:
    """
    1 行の中で連続した数字の並び（部品番号）を表すクラスです。

    Attributes
    ----------
    row : int
        数字がある行番号。
    start_col : int
        先頭の数字の列番号（この列を含む）。
    end_col : int
        末尾の数字の列番号（この列を含む）。
    value : int
        数字の並びを整数として読んだ値。
    """

    row: int
    start_col: int
    end_col: int
    value: int

    def __post_init__(self):
        if self.start_col > self.end_col:
            raise ValueError(
                f"NumberSpan start_col must be <= end_col, got {self.start_col} > {self.end_col}"
            )

    @property
    def length(self) -> int:
        """桁数を返します。"""
        return self.end_col - self.start_col + 1

    def cells(self) -> Iterator[CellCoord]:
        """この数字が占めるマスの座標を左から順に返します。"""
        for col in range(self.start_col, self.end_col + 1):
            yield (self.row, col)


@dataclass(frozen=True)
class Window:
    """
    グリッドの一部分（軸に平行な長方形）を表すクラスです。

    from_row..to_row, from_col..to_col はどちらも端を含みます。
    グリッドの範囲にクリップ済みであることを前提とします。
    """

    from_row: int
    to_row: int
    from_col: int
    to_col: int

    @property
    def rows(self) -> int:
        return self.to_row - self.from_row + 1

    @property
    def cols(self) -> int:
        return self.to_col - self.from_col + 1

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def slices(self) -> Tuple[slice, slice]:
        """numpy 配列からこのウィンドウを切り出すためのスライス。"""
        return (
            slice(self.from_row, self.to_row + 1),
            slice(self.from_col, self.to_col + 1),
        )

    def contains(self, row: int, col: int) -> bool:
        return self.from_row <= row <= self.to_row and self.from_col <= col <= self.to_col

    def cells(self) -> Iterator[CellCoord]:
        """ウィンドウ内のマスを行優先（左上から右下へ）で返します。"""
        for row in range(self.from_row, self.to_row + 1):
            for col in range(self.from_col, self.to_col + 1):
                yield (row, col)


@dataclass(frozen=True)
class GameSet:
    """
    Day 2: 1 回の取り出しで見えたキューブの数。

    Attributes
    ----------
    red, green, blue : int
        各色のキューブの個数（出てこなかった色は 0）。
    """

    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def power(self) -> int:
        """3 色の個数の積。"""
        return self.red * self.green * self.blue


@dataclass(frozen=True)
class GameRecord:
    """
    Day 2: 1 ゲーム分の記録。

    Attributes
    ----------
    game_id : int
        "Game 12:" の 12。
    sets : tuple of GameSet
        ";" で区切られた取り出し結果（出現順）。
    """

    game_id: int
    sets: Tuple[GameSet, ...]
