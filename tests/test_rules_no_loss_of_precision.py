"""Tests for the no-loss-of-precision rule."""

from __future__ import annotations

import logging

import pytest

from numprecision.config import LintConfig
from numprecision.constants import RULE_ID, RULE_MESSAGE
from numprecision.diagnostics import DiagnosticCode, SourceSpan
from numprecision.rules import META, check_literal
from numprecision.syntax import NumericLiteral

def node(raw: str, value: float | int, *, is_bigint: bool = False) -> NumericLiteral:
    """NumericLiteral at a fixed location."""
    return NumericLiteral(raw, value, SourceSpan(0, len(raw), 1, 1), is_bigint=is_bigint)


class TestMeta:
    """Static rule description."""

    def test_meta(self) -> None:
        """Rule metadata identifies the rule."""
        assert META.id == RULE_ID == "no-loss-of-precision"
        assert META.type == "problem"
        assert META.recommended is True
        assert META.message == RULE_MESSAGE
        assert META.url.endswith("/no-loss-of-precision")


class TestCheckLiteral:
    """Per-literal rule decisions."""

    def test_reports_lossy_literal(self) -> None:
        """A lossy Number literal produces a LOSS_OF_PRECISION diagnostic."""
        diagnostic = check_literal(node("9007199254740993", 9007199254740992.0))

        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.LOSS_OF_PRECISION
        assert diagnostic.message == RULE_MESSAGE
        assert diagnostic.literal == "9007199254740993"
        assert diagnostic.rule_id == RULE_ID
        assert diagnostic.severity == "error"
        assert diagnostic.span == SourceSpan(0, 16, 1, 1)

    @pytest.mark.parametrize(
        ("raw", "value"),
        [("0.1", 0.1), ("9007199254740992", 9007199254740992.0), ("0x1F", 31.0), ("1e3", 1000.0)],
    )
    def test_exact_literals_pass(self, raw: str, value: float) -> None:
        """Representable literals produce nothing."""
        assert check_literal(node(raw, value)) is None

    def test_bigint_skipped(self) -> None:
        """Exact int values are not subject to the rule."""
        assert check_literal(node("9007199254740993n", 9007199254740993, is_bigint=True)) is None

    def test_python_int_skipped(self) -> None:
        """Python ints are exact."""
        assert check_literal(node("9007199254740993", 9007199254740993)) is None

    def test_zero_value_skipped_by_default(self) -> None:
        """A literal that underflows to zero is not reported by default."""
        assert check_literal(node("1e-400", 0.0)) is None

    def test_zero_value_reported_when_configured(self) -> None:
        """report_zero_values checks zero-valued literals too."""
        config = LintConfig(report_zero_values=True)

        assert check_literal(node("1e-400", 0.0), config) is not None
        assert check_literal(node("0.000", 0.0), config) is None

    def test_severity_from_config(self) -> None:
        """Configured severity is attached to findings."""
        diagnostic = check_literal(node("0.30000000000000001", 0.3), LintConfig(severity="warning"))
        assert diagnostic is not None
        assert diagnostic.severity == "warning"

    def test_logs_finding_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each finding is logged at debug level with its location."""
        with caplog.at_level(logging.DEBUG, logger="numprecision.rules.no_loss_of_precision"):
            check_literal(node("1.0000000000000001", 1.0))

        assert "1.0000000000000001 at 1:1" in caplog.text
