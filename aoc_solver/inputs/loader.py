# -*- coding: utf-8 -*-
"""
パズル入力（テキストファイル）を読み込むモジュールです。

- ファイル名が指定されていればそれを使う
- 省略されていれば config.DEFAULT_INPUT_PATHS のサンプルを使う
- 読めない場合は InputReadError を送出する
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..config import DEFAULT_INPUT_PATHS
from ..errors import InputReadError


def resolve_input_path(day: int, path: str | Path | None = None) -> Path:
    """
    実際に読み込む入力ファイルのパスを決めます。

    Parameters
    ----------
    day : int
        何日目のパズルか（1〜3）。
    path : str or Path, optional
        明示的に指定されたパス。

    Returns
    -------
    Path
    """
    if path is not None:
        return Path(path)
    default: Optional[str] = DEFAULT_INPUT_PATHS.get(day)
    if default is None:
        raise InputReadError(f"<day {day}>", "no input file given and no default configured")
    return Path(default)


def read_input_text(path: str | Path) -> str:
    """入力ファイル全体を文字列として返します。"""
    p = Path(path)
    if not p.is_file():
        raise InputReadError(str(p), "file not found")
    try:
        return p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(p), str(e)) from e


def read_input_lines(path: str | Path) -> List[str]:
    """
    入力ファイルを行のリストとして返します（改行は除去）。

    区切りは "\\n" だけです（"\\r\\n" の "\\r" は取り除きます）。
    """
    lines = [line.rstrip("\r") for line in read_input_text(path).split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines
