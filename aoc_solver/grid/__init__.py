# -*- coding: utf-8 -*-
"""
aoc_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py       : テキストや DataFrame から Grid への変換と検証
- span_scanner.py : 行ごとの数字の並び（NumberSpan）の抽出と復元
- window.py       : 8 近傍ウィンドウと割り当て済みマスの記録
"""
