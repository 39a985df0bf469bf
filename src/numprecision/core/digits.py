"""Digit-string utilities for numeric literal analysis.

String-level helpers shared by the normalizer and the comparators:
zero stripping, decimal-point insertion, radix rendering, and
significant-digit rendering.

All functions are pure and thread-safe.

Python 3.13+. Uses stdlib decimal for exact rounding.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from numprecision.enums import Radix

__all__ = [
    "insert_decimal_point",
    "strip_leading_zeros",
    "strip_trailing_zeros",
    "to_precision",
    "to_radix_string",
]

# format() presentation types rendering an unsigned int in each radix
_RADIX_FORMAT: dict[Radix, str] = {
    Radix.BINARY: "b",
    Radix.OCTAL: "o",
    Radix.DECIMAL: "d",
    Radix.HEX: "X",
}


def strip_leading_zeros(digits: str) -> str:
    """Remove leading '0' characters.

    A string made only of zeros is returned unchanged, so the result is
    never empty for non-empty input.

    Example:
        >>> strip_leading_zeros("00120")
        '120'
        >>> strip_leading_zeros("000")
        '000'
        >>> strip_leading_zeros("0.5")
        '.5'
    """
    stripped = digits.lstrip("0")
    return stripped if stripped else digits


def strip_trailing_zeros(digits: str) -> str:
    """Remove trailing '0' characters.

    A string made only of zeros is returned unchanged.

    Example:
        >>> strip_trailing_zeros("12300")
        '123'
        >>> strip_trailing_zeros("00")
        '00'
    """
    stripped = digits.rstrip("0")
    return stripped if stripped else digits


def insert_decimal_point(digits: str) -> str:
    """Place a decimal point after the first digit.

    Example:
        >>> insert_decimal_point("12345")
        '1.2345'
        >>> insert_decimal_point("7")
        '7.'
    """
    return f"{digits[0]}.{digits[1:]}"


def to_radix_string(value: int, radix: Radix) -> str:
    """Render a non-negative integer in the given radix with uppercase digits.

    Args:
        value: Non-negative integer
        radix: Target numbering system

    Returns:
        Digits without any prefix; zero renders as "0"

    Raises:
        ValueError: If value is negative

    Example:
        >>> to_radix_string(255, Radix.HEX)
        'FF'
        >>> to_radix_string(8, Radix.OCTAL)
        '10'
    """
    if value < 0:
        msg = f"Cannot render negative value {value} as an unsigned literal"
        raise ValueError(msg)
    return format(value, _RADIX_FORMAT[radix])


def to_precision(value: float | int | Decimal, precision: int) -> str:
    """Render the magnitude of a value to exactly `precision` significant digits.

    The value is converted to Decimal without loss (a float's exact binary
    value), then rounded once to `precision` digits. Ties round away from
    zero, matching Number.prototype.toPrecision, which picks the larger
    candidate when two are equally close.

    The result is always in exponential form, e.g. "1.20e+3", "5e-7",
    "0.00e+0". Sign is dropped: literal text is never signed.

    Args:
        value: Finite number to render
        precision: Number of significant digits (>= 1)

    Returns:
        Exponential-notation string with `precision` significant digits

    Raises:
        ValueError: If precision < 1 or value is not finite

    Example:
        >>> to_precision(0.1, 20)
        '1.0000000000000000555e-1'
        >>> to_precision(100.0, 4)
        '1.000e+2'
    """
    if precision < 1:
        msg = f"precision must be >= 1, got {precision}"
        raise ValueError(msg)

    exact = Decimal(value)
    if not exact.is_finite():
        msg = f"Cannot render non-finite value {value!r}"
        raise ValueError(msg)

    with localcontext() as ctx:
        ctx.prec = precision
        ctx.rounding = ROUND_HALF_UP
        rounded = +abs(exact)  # unary plus applies the context rounding
        return f"{rounded:.{precision - 1}e}"
