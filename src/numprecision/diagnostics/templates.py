"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from numprecision.constants import RULE_ID, RULE_MESSAGE

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # Base documentation URL
    _DOCS_BASE = "https://eslint.org/docs/latest/rules"

    @staticmethod
    def loss_of_precision(
        raw: str,
        span: SourceSpan | None = None,
        severity: str = "error",
    ) -> Diagnostic:
        """Numeric literal does not survive decoding unchanged.

        Args:
            raw: The literal text as written
            span: Location of the literal in its source
            severity: "error" or "warning"

        Returns:
            Diagnostic for LOSS_OF_PRECISION
        """
        return Diagnostic(
            code=DiagnosticCode.LOSS_OF_PRECISION,
            message=RULE_MESSAGE,
            span=span,
            hint="Write fewer significant digits, or use an exact type (BigInt, Decimal)",
            help_url=f"{ErrorTemplate._DOCS_BASE}/{RULE_ID}",
            literal=raw,
            rule_id=RULE_ID,
            severity="warning" if severity == "warning" else "error",
        )

    @staticmethod
    def malformed_literal(raw: str, span: SourceSpan | None = None) -> Diagnostic:
        """Literal text does not match the numeric literal grammar.

        Args:
            raw: The offending literal text
            span: Location of the literal, when known

        Returns:
            Diagnostic for MALFORMED_LITERAL
        """
        msg = f"Malformed numeric literal: {raw!r}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_LITERAL,
            message=msg,
            span=span,
            hint="Pass the literal's source text exactly as a tokenizer produced it",
            literal=raw,
        )

    @staticmethod
    def unterminated_string(quote: str, span: SourceSpan) -> Diagnostic:
        """String or template literal runs to end of line or input.

        Args:
            quote: Opening quote character
            span: Location of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        msg = f"Unterminated string literal starting with {quote}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message=msg,
            span=span,
            hint=f"Add the closing {quote}",
        )

    @staticmethod
    def unterminated_comment(span: SourceSpan) -> Diagnostic:
        """Block comment is never closed.

        Args:
            span: Location of the opening /*

        Returns:
            Diagnostic for UNTERMINATED_COMMENT
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_COMMENT,
            message="Unterminated block comment",
            span=span,
            hint="Add the closing */",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Source length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source is {size} characters, limit is {limit}"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Raise LintConfig.max_source_size or split the input",
        )

    @staticmethod
    def tokenize_failed(reason: str, span: SourceSpan | None = None) -> Diagnostic:
        """Python tokenizer rejected the source.

        Args:
            reason: Tokenizer error message
            span: Location reported by the tokenizer, when known

        Returns:
            Diagnostic for TOKENIZE_FAILED
        """
        msg = f"Cannot tokenize Python source: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TOKENIZE_FAILED,
            message=msg,
            span=span,
            hint="Fix the syntax error before checking numeric literals",
        )
