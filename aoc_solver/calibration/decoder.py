# -*- coding: utf-8 -*-
"""
Day 1: キャリブレーション値を読み取るモジュールです。

各行の「最初の数字」と「最後の数字」をつなげた 2 桁の値を求め、
全行分を合計します。spelled=True のときは "one" 〜 "nine" の
英単語も数字として扱います（大文字小文字は区別しません）。

"eightwo" のように単語が重なっている場合は、8 と 2 の両方を数えます。
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from ..config import DIGIT_WORDS
from ..logging_utils import get_logger

logger = get_logger()


def _digit_at(line: str, pos: int, spelled: bool) -> Optional[int]:
    ch = line[pos]
    if "0" <= ch <= "9":
        return int(ch)
    if not spelled:
        return None
    for value, word in enumerate(DIGIT_WORDS, start=1):
        if line.startswith(word, pos):
            return value
    return None


def iter_digits(line: str, spelled: bool = True) -> Iterator[int]:
    """
    行の中の数字を左から順に返します。

    1 文字ずつ開始位置をずらして調べるので、
    重なっている英単語もそれぞれ 1 回ずつ見つかります。
    """
    lowered = line.lower()
    for pos in range(len(lowered)):
        value = _digit_at(lowered, pos, spelled)
        if value is not None:
            yield value


def calibration_value(line: str, spelled: bool = True) -> int:
    """
    1 行分のキャリブレーション値（最初の数字 * 10 + 最後の数字）。

    数字が 1 つもない行は 0 を返します。
    """
    first = last = None
    for value in iter_digits(line, spelled):
        if first is None:
            first = value
        last = value
    if first is None:
        return 0
    return first * 10 + last


def sum_calibration(lines: Iterable[str], spelled: bool = True) -> int:
    """全行のキャリブレーション値の合計。空行は無視します。"""
    total = 0
    count = 0
    for line in lines:
        line = line.strip()
        if not line:
            continue
        total += calibration_value(line, spelled)
        count += 1
    logger.debug("Calibration: %d lines, spelled=%s, total=%d", count, spelled, total)
    return total
