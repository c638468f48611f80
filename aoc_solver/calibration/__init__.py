# -*- coding: utf-8 -*-
"""
aoc_solver.calibration パッケージ

Day 1 のキャリブレーション文書の読み取り（decoder.py）をまとめています。
"""
