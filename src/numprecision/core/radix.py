"""Radix classification of numeric literal text.

Decides which numbering system a literal is written in. Prefixed forms
(0x, 0b, 0o, any case) are recognised first; a leading 0 followed only by
octal digits is legacy octal; everything else is decimal.

Python 3.13+. Zero external dependencies.
"""

import re

from numprecision.enums import Radix

__all__ = ["classify_radix", "radix_prefix_length"]

_PREFIXES: dict[str, Radix] = {
    "0x": Radix.HEX,
    "0b": Radix.BINARY,
    "0o": Radix.OCTAL,
}

_LEGACY_OCTAL = re.compile(r"0[0-7]+")


def classify_radix(raw: str) -> Radix:
    """Classify literal text by radix.

    Total: text that is neither prefixed nor legacy octal falls through to
    decimal. Digit separators should be stripped first; a legacy octal
    literal never contains them.

    Example:
        >>> classify_radix("0XFF")
        <Radix.HEX: 16>
        >>> classify_radix("0777")
        <Radix.OCTAL: 8>
        >>> classify_radix("0789")
        <Radix.DECIMAL: 10>
        >>> classify_radix("0.5")
        <Radix.DECIMAL: 10>
    """
    radix = _PREFIXES.get(raw[:2].lower())
    if radix is not None:
        return radix
    if _LEGACY_OCTAL.fullmatch(raw):
        return Radix.OCTAL
    return Radix.DECIMAL


def radix_prefix_length(raw: str) -> int:
    """Length of the explicit radix prefix (2), or 0 for prefixless text."""
    return 2 if raw[:2].lower() in _PREFIXES else 0
