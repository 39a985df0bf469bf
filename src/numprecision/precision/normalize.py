"""Decimal normalization into canonical scientific notation.

Turns decimal literal text in any surface form (plain integer, fractional,
exponential) into a NormalizedNumber: a coefficient with exactly one digit
before the point, and a power-of-ten magnitude.

    "123.45"   -> 1.2345e2
    "1.2345e2" -> 1.2345e2
    "12345e-2" -> 1.2345e2
    "0.0034"   -> 3.4e-3
    "5000"     -> 5.e3
    "1.50"     -> 1.50e0   (fraction zeros are written, so they count)
    "0e5"      -> 0.e0

Comparison is textual. Two forms of one value only compare equal when
they also imply the same number of significant digits.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from numprecision.core.digits import (
    insert_decimal_point,
    strip_leading_zeros,
    strip_trailing_zeros,
)

__all__ = ["ZERO", "NormalizedNumber", "normalize_decimal"]


@dataclass(frozen=True, slots=True)
class NormalizedNumber:
    """Decimal number as `coefficient x 10**magnitude`.

    Attributes:
        coefficient: One digit, ".", then zero or more digits. The first
            digit is non-zero unless the value is zero.
        magnitude: Power of ten
    """

    coefficient: str
    magnitude: int

    @property
    def precision(self) -> int:
        """Number of significant digits the coefficient carries."""
        return len(self.coefficient) - 1

    def __str__(self) -> str:
        return f"{self.coefficient}e{self.magnitude}"


ZERO = NormalizedNumber("0.", 0)


def normalize_decimal(text: str) -> NormalizedNumber:
    """Normalize separator-free decimal literal text.

    Args:
        text: Decimal literal without radix prefix or separators; may carry
            an exponent (e/E, optional sign) and a decimal point

    Returns:
        Canonical NormalizedNumber; zero in any form returns ZERO

    Example:
        >>> normalize_decimal("0.0034")
        NormalizedNumber(coefficient='3.4', magnitude=-3)
        >>> normalize_decimal("6.02e23")
        NormalizedNumber(coefficient='6.02', magnitude=23)
    """
    mantissa, _, exponent_text = text.replace("E", "e").partition("e")
    exponent = int(exponent_text) if exponent_text else 0

    if not mantissa.strip("0."):
        return ZERO

    if "." in mantissa:
        coefficient, magnitude = _normalize_fractional(mantissa)
    else:
        coefficient, magnitude = _normalize_integer(mantissa)
    return NormalizedNumber(coefficient, exponent + magnitude)


def _normalize_integer(mantissa: str) -> tuple[str, int]:
    significant = strip_leading_zeros(mantissa)
    magnitude = len(significant) - 1
    return insert_decimal_point(strip_trailing_zeros(significant)), magnitude


def _normalize_fractional(mantissa: str) -> tuple[str, int]:
    trimmed = strip_leading_zeros(mantissa)

    if trimmed.startswith("."):
        fraction = trimmed[1:]
        significant = strip_leading_zeros(fraction)
        magnitude = len(significant) - len(fraction) - 1
        return insert_decimal_point(significant), magnitude

    magnitude = trimmed.index(".") - 1
    return insert_decimal_point(trimmed.replace(".", "")), magnitude
