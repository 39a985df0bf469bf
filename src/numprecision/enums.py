"""Enumerations for numprecision type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntEnum
where the member value is itself a number used in arithmetic.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class Radix(IntEnum):
    """Numbering system a literal's digits are written in.

    IntEnum members are ints: Radix.HEX == 16 and int("ff", Radix.HEX) == 255.
    """

    BINARY = 2
    """Binary literal: 0b1010"""

    OCTAL = 8
    """Octal literal: 0o17, or legacy prefixless 017"""

    DECIMAL = 10
    """Decimal literal: 42, 1.5, 6.02e23"""

    HEX = 16
    """Hexadecimal literal: 0xFF"""


class SourceLanguage(StrEnum):
    """Source language a numeric literal scanner understands.

    StrEnum provides automatic string conversion: str(SourceLanguage.PYTHON) == "python"
    """

    JAVASCRIPT = "javascript"
    """JavaScript / TypeScript: doubles for Number, exact BigInt with n suffix"""

    PYTHON = "python"
    """Python: exact int, binary64 float"""


__all__ = [
    "Radix",
    "SourceLanguage",
]
