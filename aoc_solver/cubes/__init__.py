# -*- coding: utf-8 -*-
"""
aoc_solver.cubes パッケージ

Day 2 のキューブゲームの記録（records.py）をまとめています。
"""
