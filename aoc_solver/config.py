# -*- coding: utf-8 -*-
"""
aoc_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 入力ファイル（サンプル）の場所
- 部品番号の最大桁数
- Day 2 のキューブ上限数
- デバッグ用ウィンドウログの出力先
などを簡単に変更できます。
"""

from __future__ import annotations

import os
from typing import Dict, Tuple

# ==== 入力ファイル関連 =====================================================

# パッケージ同梱のサンプル入力を置くディレクトリ
BASE_DIR: str = os.path.dirname(os.path.abspath(__file__))
DATA_DIR: str = os.path.join(BASE_DIR, "data")

# ファイル名が省略されたときに使うサンプル入力（日ごと）
DEFAULT_INPUT_PATHS: Dict[int, str] = {
    1: os.path.join(DATA_DIR, "aoc-23-d1-ex1.txt"),
    2: os.path.join(DATA_DIR, "aoc-23-d2-ex1.txt"),
    3: os.path.join(DATA_DIR, "aoc-23-d3-ex1.txt"),
}

# ==== Day 3: 回路図（schematic）関連 =======================================

# 空きマスを表す文字。句読点だが「記号」としては扱わない
BLANK_CELL: str = "."

# ギア候補となる記号
GEAR_SYMBOL: str = "*"

# ギアと認められるのに必要な「隣接する部品番号」の個数（ちょうどこの数）
GEAR_PART_COUNT: int = 2

# 部品番号の最大桁数。
# これを超える数字の並びは入力不正（GridValidationError）として扱います。
MAX_PART_DIGITS: int = 7

# ==== Day 2: キューブゲーム関連 ============================================

# 袋に入っているキューブの数（色 -> 上限）
CUBE_LIMITS: Dict[str, int] = {
    "red": 12,
    "green": 13,
    "blue": 14,
}

# ==== Day 1: キャリブレーション関連 ========================================

# 英単語で書かれた数字（インデックス + 1 が値）
DIGIT_WORDS: Tuple[str, ...] = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
)

# ==== デバッグ関連 =========================================================

# ギア探索時に各ウィンドウの中身をファイルに書き出すかどうか。
# 環境変数 AOC_WINDOW_DEBUG=1 で有効になります。
WINDOW_DEBUG_ENABLED: bool = os.getenv("AOC_WINDOW_DEBUG", "0") == "1"

# ウィンドウダンプの出力先
WINDOW_DEBUG_LOG_PATH: str = os.path.join("logs", "window_debug.log")
