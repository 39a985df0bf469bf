"""Core building blocks shared by the precision check and the scanners.

Python 3.13+.
"""

from .digits import (
    insert_decimal_point,
    strip_leading_zeros,
    strip_trailing_zeros,
    to_precision,
    to_radix_string,
)
from .literal import Literal, decode_literal, strip_separators, validate_literal_text
from .radix import classify_radix, radix_prefix_length

__all__ = [
    "Literal",
    "classify_radix",
    "decode_literal",
    "insert_decimal_point",
    "radix_prefix_length",
    "strip_leading_zeros",
    "strip_separators",
    "strip_trailing_zeros",
    "to_precision",
    "to_radix_string",
    "validate_literal_text",
]
