"""numprecision exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Lint findings are never raised; only contract violations are.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PrecisionError(Exception):
    """Base exception for all numprecision errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PrecisionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MalformedLiteralError(PrecisionError, ValueError):
    """Literal text is not a syntactically valid numeric literal.

    The precision check assumes well-formed input supplied by a scanner or
    parser. Malformed text is a caller contract violation and is reported
    loudly instead of being classified as some radix by accident.

    Attributes:
        raw: The offending literal text
    """

    def __init__(self, message: str | Diagnostic, *, raw: str = "") -> None:
        """Initialize MalformedLiteralError.

        Args:
            message: Error message string OR Diagnostic object
            raw: The literal text that failed validation
        """
        super().__init__(message)
        self.raw = raw


class SourceScanError(PrecisionError):
    """Source text could not be scanned for numeric literals.

    Examples:
    - Unterminated string or template literal
    - Unterminated block comment
    - Source larger than the configured limit
    """
