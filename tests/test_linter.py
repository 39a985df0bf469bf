"""Tests for lint_source."""

from __future__ import annotations

import logging

import pytest

from numprecision import LintConfig, SourceLanguage, lint_source
from numprecision.diagnostics import DiagnosticCode, MalformedLiteralError, SourceScanError


class TestLintJavaScript:
    """Default configuration lints JavaScript."""

    def test_reports_lossy_literals_only(self) -> None:
        """One finding per lossy Number literal, in source order."""
        result = lint_source("const a = 0.1, b = 9007199254740993, c = 9007199254740993n;")

        assert result.literal_count == 3
        assert not result.is_clean
        assert [d.literal for d in result.diagnostics] == ["9007199254740993"]
        assert result.diagnostics[0].span is not None
        assert result.diagnostics[0].span.column == 20

    def test_clean_source(self) -> None:
        """No findings means is_clean."""
        result = lint_source("let x = 0x20000000000000 + 1_000 + .5; // 9007199254740993")

        assert result.is_clean
        assert result.literal_count == 3

    def test_non_decimal_loss(self) -> None:
        """Prefixed literals are checked in their own radix."""
        result = lint_source("x = 0x20000000000001")
        assert [d.literal for d in result.diagnostics] == ["0x20000000000001"]

    def test_postfix_increment_then_division(self) -> None:
        """a++ / 2 is division, not the start of a regex."""
        result = lint_source("let a = 1;\na++ / 2;\n")

        assert result.is_clean
        assert result.literal_count == 2

    def test_huge_bigint(self) -> None:
        """BigInts of any length are scanned and skipped by the rule."""
        result = lint_source("const x = " + "1" * 5000 + "n;")

        assert result.is_clean
        assert result.literal_count == 1

    def test_empty_source(self) -> None:
        """Empty source has nothing to check."""
        result = lint_source("")

        assert result.is_clean
        assert result.literal_count == 0

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """A per-source summary is logged at info level."""
        with caplog.at_level(logging.INFO, logger="numprecision.linter"):
            lint_source("a = [1, 2, 9007199254740993]")

        assert "Checked 3 javascript literal(s): 1 lose precision" in caplog.text


class TestLintPython:
    """Python source through LintConfig(language=PYTHON)."""

    def test_only_floats_checked(self) -> None:
        """Large ints are exact in Python; lossy floats are reported."""
        config = LintConfig(language=SourceLanguage.PYTHON)
        result = lint_source("a = 9007199254740993\nb = 9007199254740993.0\n", config)

        assert result.literal_count == 2
        assert [d.literal for d in result.diagnostics] == ["9007199254740993.0"]
        assert result.diagnostics[0].span is not None
        assert result.diagnostics[0].span.line == 2


class TestLintErrors:
    """Errors propagate as exceptions, never as findings."""

    def test_source_too_large(self) -> None:
        """Size limit is enforced before scanning."""
        with pytest.raises(SourceScanError) as exc_info:
            lint_source("1234567890", LintConfig(max_source_size=5))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SOURCE_TOO_LARGE

    def test_unterminated_string(self) -> None:
        """Scanner errors propagate."""
        with pytest.raises(SourceScanError):
            lint_source("x = 'oops")

    def test_malformed_literal(self) -> None:
        """Invalid number tokens propagate as MalformedLiteralError."""
        with pytest.raises(MalformedLiteralError):
            lint_source("x = 08n")
