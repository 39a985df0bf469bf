"""Diagnostic system for numprecision.

Provides structured diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import MalformedLiteralError, PrecisionError, SourceScanError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "MalformedLiteralError",
    "OutputFormat",
    "PrecisionError",
    "SourceScanError",
    "SourceSpan",
]
