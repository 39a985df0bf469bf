"""Shared constants for numprecision.

This module provides centralized configuration constants used across
the core, syntax and rules packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Precision limits: Significant-digit guard for decimal comparison
- Literal syntax: Characters with special meaning in literal text
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Precision limits
    "MAX_SIGNIFICANT_DIGITS",
    # Literal syntax
    "DIGIT_SEPARATOR",
    "BIGINT_SUFFIX",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Rule metadata
    "RULE_ID",
    "RULE_MESSAGE",
]

# ============================================================================
# PRECISION LIMITS
# ============================================================================
#
# Literals whose normalized coefficient demands more significant digits than
# this are reported as losing precision without rendering the decoded value.
#
# The value is a pragmatic cutoff inherited from the reference lint rule, whose
# runtime formatting routine (Number.prototype.toPrecision) accepts at most
# 100 digits. It is NOT derived from binary64 properties (17 digits already
# round-trip any double). Changing it changes the verdict on pathological
# literals, so it stays fixed.
#
# ============================================================================

MAX_SIGNIFICANT_DIGITS: int = 100

# ============================================================================
# LITERAL SYNTAX
# ============================================================================

# Digit-group separator accepted in JavaScript and Python literals (1_000_000).
# Stripped before any analysis.
DIGIT_SEPARATOR: str = "_"

# JavaScript BigInt literal suffix (123n). BigInt values are exact integers.
BIGINT_SUFFIX: str = "n"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MB).
# Prevents unbounded scanning work on generated or minified bundles.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# RULE METADATA
# ============================================================================

RULE_ID: str = "no-loss-of-precision"
RULE_MESSAGE: str = "This number literal will lose precision at runtime."
