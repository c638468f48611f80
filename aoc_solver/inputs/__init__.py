# -*- coding: utf-8 -*-
"""
aoc_solver.inputs パッケージ

入力ファイルの場所の決定と読み込み（loader.py）をまとめています。
"""
