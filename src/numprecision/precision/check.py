"""Precision-loss predicate for numeric literals.

Decides whether a literal's source text encodes a value that the decoded
runtime value cannot reproduce:

    loses_precision(Literal("9007199254740993", 9007199254740992.0))  # True
    loses_precision(Literal("0.1", 0.1))                              # False

Dispatch:
    - Binary, octal (prefixed or legacy) and hex literals: the decoded value
      is re-rendered in the literal's radix and must be a suffix of the
      written digits (leading zeros are insignificant).
    - Decimal literals: both the written text and the decoded value rendered
      to the written number of significant digits are normalized, then
      compared as text.

Thread Safety:
    Pure functions over immutable inputs. Safe from any thread.

Python 3.13+. Zero external dependencies.
"""

import logging
import math

from numprecision.constants import MAX_SIGNIFICANT_DIGITS
from numprecision.core.digits import to_precision, to_radix_string
from numprecision.core.literal import Literal, validate_literal_text
from numprecision.core.radix import radix_prefix_length
from numprecision.enums import Radix

from .normalize import normalize_decimal

__all__ = [
    "decimal_loses_precision",
    "loses_precision",
    "non_decimal_loses_precision",
]

logger = logging.getLogger(__name__)


def loses_precision(literal: Literal) -> bool:
    """Check whether a literal's written digits survive decoding.

    Args:
        literal: Raw text plus decoded value. The text may contain digit
            separators; it must otherwise be a well-formed numeric literal.

    Returns:
        True if the decoded value does not reproduce the written digits

    Raises:
        MalformedLiteralError: If literal.raw is not a numeric literal

    Example:
        >>> loses_precision(Literal("0x20000000000001", 9007199254740992.0))
        True
        >>> loses_precision(Literal("1_000_000", 1e6))
        False
    """
    radix = validate_literal_text(literal.digits)
    if radix == Radix.DECIMAL:
        return decimal_loses_precision(literal)
    return non_decimal_loses_precision(literal, radix)


def non_decimal_loses_precision(literal: Literal, radix: Radix) -> bool:
    """Compare binary/octal/hex digits against the value rendered in that radix.

    Suffix match rather than equality: "0x00FF" and value 255 agree.
    A non-integral or non-finite decoded value never matches.
    """
    digits = literal.digits
    raw_digits = digits[radix_prefix_length(digits) :].upper()

    value = literal.value
    if isinstance(value, float):
        if not value.is_integer():  # also False for inf and nan
            return True
        value = int(value)

    return not raw_digits.endswith(to_radix_string(abs(value), radix))


def decimal_loses_precision(literal: Literal) -> bool:
    """Compare a decimal literal's normalized text with its re-rendered value.

    The decoded value is rendered to as many significant digits as the
    literal was written with. Literals demanding more than
    MAX_SIGNIFICANT_DIGITS are reported without rendering.
    """
    written = normalize_decimal(literal.digits)
    requested_precision = written.precision

    if requested_precision > MAX_SIGNIFICANT_DIGITS:
        logger.debug(
            "Literal %s requests %d significant digits (limit %d)",
            literal.raw,
            requested_precision,
            MAX_SIGNIFICANT_DIGITS,
        )
        return True

    if isinstance(literal.value, float) and not math.isfinite(literal.value):
        return True

    stored = normalize_decimal(to_precision(literal.value, requested_precision))
    return written != stored
