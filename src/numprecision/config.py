"""Lint configuration.

Provides a single frozen dataclass that encapsulates all per-run options
for lint_source().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from numprecision.constants import MAX_SOURCE_SIZE
from numprecision.enums import SourceLanguage

__all__ = ["LintConfig"]


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Immutable configuration for a lint run.

    All fields have sensible defaults; constructing ``LintConfig()`` with
    no arguments lints JavaScript with error severity.

    Attributes:
        language: Source language to scan (default: JavaScript).
        severity: Severity attached to findings, "error" or "warning"
            (default: "error").
        report_zero_values: Also check literals whose decoded value is zero
            (default: False). A literal such as ``1e-400`` underflows to
            zero; by default it is not reported, like any other zero.
        max_source_size: Maximum source length in characters
            (default: 10 MB).

    Example:
        >>> from numprecision import lint_source
        >>> config = LintConfig(language=SourceLanguage.PYTHON, severity="warning")
        >>> result = lint_source("x = 0.30000000000000001", config)
        >>> [d.severity for d in result.diagnostics]
        ['warning']
    """

    language: SourceLanguage = SourceLanguage.JAVASCRIPT
    severity: Literal["error", "warning"] = "error"
    report_zero_values: bool = False
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If severity is unknown, language is not a
                SourceLanguage value, or max_source_size is not positive.
        """
        if self.severity not in ("error", "warning"):
            msg = f"severity must be 'error' or 'warning', got {self.severity!r}"
            raise ValueError(msg)
        if self.language not in tuple(SourceLanguage):
            msg = f"Unsupported language: {self.language!r}"
            raise ValueError(msg)
        if self.max_source_size <= 0:
            msg = "max_source_size must be positive"
            raise ValueError(msg)
