# -*- coding: utf-8 -*-
"""
Day 2: キューブゲームの記録を読み込み、集計するモジュールです。

入力の 1 行は次の形式です:

    Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green

- ";" で区切られた部分が 1 回分の取り出し（GameSet）
- 各ゲームの「最小構成」は色ごとの最大値
- 最小構成が CUBE_LIMITS に収まるゲームが「可能なゲーム」
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping

import pandas as pd

from ..config import CUBE_LIMITS
from ..errors import FormatError
from ..logging_utils import get_logger
from ..types import GameRecord, GameSet

GAME_RE = re.compile(r"^\s*Game\s+(\d+)\s*:(.*)$")
DRAW_RE = re.compile(r"^\s*(\d+)\s+([a-z]+)\s*$")

COLORS = ("red", "green", "blue")

logger = get_logger()


def parse_set(text: str, lineno: int | None = None) -> GameSet:
    """"3 blue, 4 red" のような 1 回分の取り出しを GameSet にします。"""
    counts: Dict[str, int] = {}
    for draw in text.split(","):
        if not draw.strip():
            continue
        m = DRAW_RE.match(draw)
        if not m:
            raise FormatError(f"Malformed cube count {draw.strip()!r}", row=lineno)
        count, color = int(m.group(1)), m.group(2)
        if color not in COLORS:
            raise FormatError(f"Unknown cube color {color!r}", row=lineno)
        # 同じ色が 2 回出てきたら大きい方を採用
        counts[color] = max(counts.get(color, 0), count)
    return GameSet(**counts)


def parse_game(line: str, lineno: int | None = None) -> GameRecord:
    """
    1 行分の記録を GameRecord にします。

    Parameters
    ----------
    line : str
        "Game <id>: ..." 形式の行。
    lineno : int, optional
        エラーメッセージ用の行番号（0 始まり）。
    """
    m = GAME_RE.match(line)
    if not m:
        raise FormatError(f"Malformed game record {line.strip()!r}", row=lineno)
    game_id = int(m.group(1))
    sets = tuple(parse_set(part, lineno) for part in m.group(2).split(";"))
    return GameRecord(game_id=game_id, sets=sets)


def parse_games(lines: Iterable[str]) -> List[GameRecord]:
    """空行を飛ばしながら全行を読み込みます。"""
    records: List[GameRecord] = []
    for i, line in enumerate(lines):
        if not line.strip():
            continue
        records.append(parse_game(line, lineno=i))
    return records


def minimal_set(record: GameRecord) -> GameSet:
    """ゲームを成立させるのに必要な最小のキューブ数（色ごとの最大値）。"""
    return GameSet(
        red=max((s.red for s in record.sets), default=0),
        green=max((s.green for s in record.sets), default=0),
        blue=max((s.blue for s in record.sets), default=0),
    )


def set_power(game_set: GameSet) -> int:
    return game_set.power


def is_possible(record: GameRecord, limits: Mapping[str, int] = CUBE_LIMITS) -> bool:
    """最小構成がすべての色で上限以下なら True。"""
    m = minimal_set(record)
    return all(getattr(m, color) <= limits.get(color, 0) for color in COLORS)


def games_to_frame(
    records: Iterable[GameRecord],
    limits: Mapping[str, int] = CUBE_LIMITS,
) -> pd.DataFrame:
    """
    ゲームごとの最小構成を 1 行 1 ゲームの DataFrame にまとめます。

    Returns
    -------
    pandas.DataFrame
        'id', 'red', 'green', 'blue', 'power', 'possible' 列を持つ DataFrame。
    """
    rows = []
    for rec in records:
        m = minimal_set(rec)
        rows.append({
            "id": rec.game_id,
            "red": m.red,
            "green": m.green,
            "blue": m.blue,
            "power": m.power,
            "possible": is_possible(rec, limits),
        })

    df = pd.DataFrame(rows, columns=["id", "red", "green", "blue", "power", "possible"])
    logger.debug("Cube games frame: %d games", len(df))
    return df


def sum_possible_ids(
    records: Iterable[GameRecord],
    limits: Mapping[str, int] = CUBE_LIMITS,
) -> int:
    df = games_to_frame(records, limits)
    return int(df.loc[df["possible"].astype(bool), "id"].sum())


def sum_powers(records: Iterable[GameRecord]) -> int:
    df = games_to_frame(records)
    return int(df["power"].sum())
