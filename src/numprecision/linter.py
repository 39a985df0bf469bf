"""Source-level linting entry point.

Scans a source text for numeric literals in the configured language and
runs the no-loss-of-precision rule on each of them.

Thread-safe. No shared mutable state.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from numprecision.config import LintConfig
from numprecision.diagnostics import Diagnostic, ErrorTemplate, SourceScanError
from numprecision.enums import SourceLanguage
from numprecision.rules import check_literal
from numprecision.syntax import NumericLiteral, scan_numeric_literals, scan_python_literals

__all__ = ["LintResult", "lint_source", "scan_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintResult:
    """Outcome of linting one source text.

    Attributes:
        diagnostics: Findings in source order
        literal_count: Number of numeric literals examined
    """

    diagnostics: tuple[Diagnostic, ...]
    literal_count: int

    @property
    def is_clean(self) -> bool:
        """True when no literal loses precision."""
        return not self.diagnostics


def scan_source(source: str, language: SourceLanguage) -> tuple[NumericLiteral, ...]:
    """Dispatch to the scanner for `language`."""
    match language:
        case SourceLanguage.JAVASCRIPT:
            return scan_numeric_literals(source)
        case SourceLanguage.PYTHON:
            return scan_python_literals(source)


def lint_source(source: str, config: LintConfig | None = None) -> LintResult:
    """Report every numeric literal in `source` that loses precision.

    Args:
        source: Complete source text
        config: Lint options (default: LintConfig(), JavaScript)

    Returns:
        LintResult with one LOSS_OF_PRECISION diagnostic per offending literal

    Raises:
        SourceScanError: If the source is too large or cannot be scanned
        MalformedLiteralError: If a number token is not a valid literal

    Example:
        >>> result = lint_source("const big = 9007199254740993;")
        >>> [(d.literal, d.span.column) for d in result.diagnostics]
        [('9007199254740993', 13)]
    """
    config = config if config is not None else LintConfig()

    if len(source) > config.max_source_size:
        raise SourceScanError(ErrorTemplate.source_too_large(len(source), config.max_source_size))

    literals = scan_source(source, config.language)
    diagnostics = tuple(
        diagnostic
        for diagnostic in (check_literal(node, config) for node in literals)
        if diagnostic is not None
    )

    logger.info(
        "Checked %d %s literal(s): %d lose precision",
        len(literals),
        config.language,
        len(diagnostics),
    )
    return LintResult(diagnostics=diagnostics, literal_count=len(literals))
