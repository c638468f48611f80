# -*- coding: utf-8 -*-
"""
aoc_solver.schematic パッケージ

Day 3 の回路図から答えを集計する処理をまとめています。
- parts.py : 記号に隣接する部品番号の合計
- gears.py : ちょうど 2 つの部品番号に隣接する "*" のギア比の合計
"""
