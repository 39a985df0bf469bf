"""numprecision - Detect numeric literals that lose precision when decoded.

Decides whether the digits written in a numeric literal survive conversion
into a binary64 float, and reports the ones that do not:

    >>> from numprecision import Literal, loses_precision
    >>> loses_precision(Literal("9007199254740993", 9007199254740993.0))
    True

Public API:
    Literal - Raw literal text plus decoded value
    loses_precision - The precision-loss predicate
    decode_literal - Decode literal text with JavaScript Number semantics
    normalize_decimal - Canonical coefficient/magnitude form of decimal text
    lint_source - Scan JavaScript or Python source and report findings
    LintConfig - Options for lint_source

Exceptions:
    PrecisionError - Base exception class
    MalformedLiteralError - Literal text is not a numeric literal
    SourceScanError - Source cannot be scanned

Submodules:
    numprecision.core - Digit utilities, radix classification, decoding
    numprecision.precision - Normalizer and comparators
    numprecision.syntax - JavaScript and Python literal scanners
    numprecision.rules - The no-loss-of-precision rule
    numprecision.diagnostics - Diagnostic codes, errors, formatting
"""

from .config import LintConfig
from .core import Literal, decode_literal
from .diagnostics import MalformedLiteralError, PrecisionError, SourceScanError
from .enums import Radix, SourceLanguage
from .linter import LintResult, lint_source
from .precision import NormalizedNumber, loses_precision, normalize_decimal

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numprecision")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LintConfig",
    "LintResult",
    "Literal",
    "MalformedLiteralError",
    "NormalizedNumber",
    "PrecisionError",
    "Radix",
    "SourceLanguage",
    "SourceScanError",
    "__version__",
    "decode_literal",
    "lint_source",
    "loses_precision",
    "normalize_decimal",
]
