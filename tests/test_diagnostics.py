"""Tests for diagnostics: codes, templates, errors and formatting."""

from __future__ import annotations

import json

import pytest

from numprecision import decode_literal, loses_precision
from numprecision.constants import RULE_ID, RULE_MESSAGE
from numprecision.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    MalformedLiteralError,
    OutputFormat,
    PrecisionError,
    SourceScanError,
    SourceSpan,
)

SPAN = SourceSpan(start=12, end=28, line=3, column=11)


# ============================================================================
# SOURCE SPAN
# ============================================================================


class TestSourceSpan:
    """SourceSpan invariants."""

    @pytest.mark.parametrize(
        ("start", "end", "line", "column", "field"),
        [
            (-1, 0, 1, 1, "start"),
            (5, 4, 1, 1, "end"),
            (0, 0, 0, 1, "line"),
            (0, 0, 1, 0, "column"),
        ],
    )
    def test_invalid(self, start: int, end: int, line: int, column: int, field: str) -> None:
        """Negative offsets, reversed ranges and 0-based coordinates are rejected."""
        with pytest.raises(ValueError, match=field):
            SourceSpan(start=start, end=end, line=line, column=column)

    def test_empty_span_allowed(self) -> None:
        """start == end is a valid zero-width span."""
        assert SourceSpan(0, 0, 1, 1).end == 0


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """ErrorTemplate factories produce consistent diagnostics."""

    def test_loss_of_precision(self) -> None:
        """Lint finding carries the rule identity and the literal."""
        diagnostic = ErrorTemplate.loss_of_precision("9007199254740993", SPAN)

        assert diagnostic.code is DiagnosticCode.LOSS_OF_PRECISION
        assert diagnostic.message == RULE_MESSAGE
        assert diagnostic.rule_id == RULE_ID
        assert diagnostic.literal == "9007199254740993"
        assert diagnostic.help_url == f"https://eslint.org/docs/latest/rules/{RULE_ID}"
        assert diagnostic.severity == "error"

    def test_loss_of_precision_unknown_severity_is_error(self) -> None:
        """Anything other than warning maps to error."""
        assert ErrorTemplate.loss_of_precision("1", severity="fatal").severity == "error"
        assert ErrorTemplate.loss_of_precision("1", severity="warning").severity == "warning"

    def test_malformed_literal(self) -> None:
        """Message quotes the offending text."""
        diagnostic = ErrorTemplate.malformed_literal("1.5n")

        assert diagnostic.code is DiagnosticCode.MALFORMED_LITERAL
        assert "'1.5n'" in diagnostic.message

    def test_scan_templates(self) -> None:
        """Scan failure templates use their own codes."""
        unterminated = ErrorTemplate.unterminated_string("'", SPAN)
        assert unterminated.code is DiagnosticCode.UNTERMINATED_STRING
        assert ErrorTemplate.unterminated_comment(SPAN).code is DiagnosticCode.UNTERMINATED_COMMENT
        assert ErrorTemplate.source_too_large(10, 5).code is DiagnosticCode.SOURCE_TOO_LARGE
        assert ErrorTemplate.tokenize_failed("EOF").code is DiagnosticCode.TOKENIZE_FAILED

    def test_codes_unique(self) -> None:
        """Code values do not collide."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


# ============================================================================
# ERRORS
# ============================================================================


class TestErrors:
    """Exception hierarchy."""

    def test_string_message(self) -> None:
        """A plain message leaves diagnostic unset."""
        error = PrecisionError("boom")

        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is kept and rendered Rust-style."""
        diagnostic = ErrorTemplate.unterminated_comment(SPAN)
        error = SourceScanError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[UNTERMINATED_COMMENT]: Unterminated block comment")

    def test_malformed_is_value_error(self) -> None:
        """MalformedLiteralError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise MalformedLiteralError(ErrorTemplate.malformed_literal("0x"), raw="0x")

    def test_malformed_keeps_raw(self) -> None:
        """raw keyword is stored."""
        assert MalformedLiteralError("bad", raw="1e").raw == "1e"


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Output formats."""

    def test_rust(self) -> None:
        """Rust format lists location, literal, rule, help and docs."""
        diagnostic = ErrorTemplate.loss_of_precision("0.30000000000000001", SPAN)
        output = DiagnosticFormatter().format(diagnostic)
        lines = output.splitlines()

        assert lines[0] == f"error[LOSS_OF_PRECISION]: {RULE_MESSAGE}"
        assert lines[1] == "  --> line 3, column 11"
        assert lines[2] == "  = literal: 0.30000000000000001"
        assert lines[3] == f"  = rule: {RULE_ID}"
        assert lines[4].startswith("  = help: ")
        assert lines[5].startswith("  = note: see https://")

    def test_rust_warning_color(self) -> None:
        """Warnings render in yellow when color is enabled."""
        diagnostic = ErrorTemplate.loss_of_precision("1", SPAN, severity="warning")
        output = DiagnosticFormatter(color=True).format(diagnostic)

        assert output.startswith("\033[1;33mwarning\033[0m[LOSS_OF_PRECISION]")

    def test_simple(self) -> None:
        """Simple format is one line, with location when known."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(ErrorTemplate.loss_of_precision("1", SPAN)) == (
            f"3:11: LOSS_OF_PRECISION: {RULE_MESSAGE}"
        )
        assert formatter.format(ErrorTemplate.source_too_large(10, 5)) == (
            "SOURCE_TOO_LARGE: Source is 10 characters, limit is 5"
        )

    def test_simple_without_span(self) -> None:
        """A finding for a literal that really loses precision, with no location."""
        assert loses_precision(decode_literal("9007199254740993"))

        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.loss_of_precision("9007199254740993"))

        assert output == f"LOSS_OF_PRECISION: {RULE_MESSAGE}"

    def test_json(self) -> None:
        """JSON format is machine readable."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.loss_of_precision("1e400", SPAN)))

        assert data["code"] == "LOSS_OF_PRECISION"
        assert data["code_value"] == 1001
        assert data["line"] == 3
        assert data["column"] == 11
        assert data["start"] == 12
        assert data["literal"] == "1e400"
        assert data["rule_id"] == RULE_ID

    def test_format_all_json_lines(self) -> None:
        """JSON diagnostics are newline separated, one object per line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        diagnostics = [ErrorTemplate.loss_of_precision(raw, SPAN) for raw in ("1", "2")]

        lines = formatter.format_all(diagnostics).splitlines()
        assert [json.loads(line)["literal"] for line in lines] == ["1", "2"]

    def test_format_all_blank_line_separated(self) -> None:
        """Text formats separate diagnostics with a blank line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [ErrorTemplate.loss_of_precision(raw, SPAN) for raw in ("1", "2")]

        assert formatter.format_all(diagnostics).count("\n\n") == 1

    def test_sanitize_truncates(self) -> None:
        """Long literals are truncated when sanitizing."""
        formatter = DiagnosticFormatter(sanitize=True, max_content_length=10)
        output = formatter.format(ErrorTemplate.loss_of_precision("1" * 50, SPAN))

        assert "  = literal: 1111111111..." in output

    def test_str_is_message(self) -> None:
        """str(Diagnostic) is the bare message."""
        diagnostic = Diagnostic(code=DiagnosticCode.MALFORMED_LITERAL, message="bad")
        assert str(diagnostic) == "bad"
