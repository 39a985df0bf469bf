"""Numeric literal value type, validation and decoding.

A Literal pairs the text an author wrote with the value a runtime decoded
from it. The precision check compares the two.

decode_literal() reproduces JavaScript Number semantics so callers holding
only source text can obtain the decoded value:
    - Separators removed before decoding
    - Prefixed and legacy octal integers rounded to the nearest double
      (ties-to-even); too large for binary64 -> inf
    - Decimal text converted with correct rounding ("1e400" -> inf)
    - BigInt (n suffix) kept as an exact int

Python 3.13+. Zero external dependencies.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from numprecision.constants import BIGINT_SUFFIX, DIGIT_SEPARATOR
from numprecision.diagnostics import ErrorTemplate, MalformedLiteralError
from numprecision.enums import Radix

from .radix import classify_radix, radix_prefix_length

__all__ = [
    "Literal",
    "decode_literal",
    "strip_separators",
    "validate_literal_text",
]

_DECIMAL = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DIGITS: dict[Radix, re.Pattern[str]] = {
    Radix.BINARY: re.compile(r"[01]+"),
    Radix.OCTAL: re.compile(r"[0-7]+"),
    Radix.HEX: re.compile(r"[0-9a-fA-F]+"),
}
_BIGINT_DECIMAL = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True, slots=True)
class Literal:
    """Numeric literal as written plus its decoded value.

    Attributes:
        raw: Source text, possibly with separators and a radix prefix
        value: Decoded value; float for binary64 numbers, int for exact integers

    Example:
        >>> lit = Literal("0.1", 0.1)
        >>> lit.digits
        '0.1'
    """

    raw: str
    value: float | int

    @property
    def digits(self) -> str:
        """Raw text with digit separators removed."""
        return strip_separators(self.raw)


def strip_separators(raw: str) -> str:
    """Remove digit-group separators: "1_000_000" -> "1000000"."""
    return raw.replace(DIGIT_SEPARATOR, "")


def validate_literal_text(text: str) -> Radix:
    """Check separator-free literal text against the numeric literal grammar.

    Args:
        text: Literal text without separators or BigInt suffix

    Returns:
        The literal's radix

    Raises:
        MalformedLiteralError: If text is not a numeric literal
    """
    radix = classify_radix(text) if text else Radix.DECIMAL
    if radix == Radix.DECIMAL:
        valid = _DECIMAL.fullmatch(text) is not None
    else:
        body = text[radix_prefix_length(text) :]
        valid = _DIGITS[radix].fullmatch(body) is not None

    if not valid:
        raise MalformedLiteralError(ErrorTemplate.malformed_literal(text), raw=text)
    return radix


def decode_literal(raw: str) -> Literal:
    """Decode literal text the way a JavaScript engine would.

    Args:
        raw: Literal source text

    Returns:
        Literal carrying raw unchanged and the decoded value

    Raises:
        MalformedLiteralError: If raw is not a numeric literal

    Example:
        >>> decode_literal("9007199254740993").value
        9007199254740992.0
        >>> decode_literal("0x1F").value
        31.0
        >>> decode_literal("9007199254740993n").value
        9007199254740993
    """
    text = strip_separators(raw)

    if text.endswith(BIGINT_SUFFIX):
        text = text[: -len(BIGINT_SUFFIX)]
        radix = validate_literal_text(text)
        if radix == Radix.DECIMAL:
            legal = _BIGINT_DECIMAL.fullmatch(text) is not None
        else:
            legal = radix_prefix_length(text) > 0
        if not legal:
            raise MalformedLiteralError(ErrorTemplate.malformed_literal(raw), raw=raw)
        return Literal(raw, _parse_integer(text, radix))

    radix = validate_literal_text(text)
    if radix == Radix.DECIMAL:
        return Literal(raw, float(text))
    return Literal(raw, _integer_to_double(_parse_integer(text, radix)))


def _parse_integer(text: str, radix: Radix) -> int:
    if radix == Radix.DECIMAL:
        # int(str) is capped by sys.get_int_max_str_digits(); Decimal is not
        return int(Decimal(text))
    return int(text[radix_prefix_length(text) :], radix)


def _integer_to_double(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf
