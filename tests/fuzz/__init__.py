"""Fuzz tests for numprecision.

Excluded from normal runs; execute with: pytest -m fuzz

Python 3.13+.
"""
