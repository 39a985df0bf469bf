"""Precision-loss detection for numeric literals.

Public API:
    loses_precision - Top-level predicate over a Literal
    decimal_loses_precision - Decimal branch
    non_decimal_loses_precision - Binary/octal/hex branch
    normalize_decimal - Canonical coefficient/magnitude form
    NormalizedNumber - Result of normalize_decimal

Python 3.13+.
"""

from .check import decimal_loses_precision, loses_precision, non_decimal_loses_precision
from .normalize import ZERO, NormalizedNumber, normalize_decimal

__all__ = [
    "ZERO",
    "NormalizedNumber",
    "decimal_loses_precision",
    "loses_precision",
    "non_decimal_loses_precision",
    "normalize_decimal",
]
