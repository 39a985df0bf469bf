"""Rule: disallow number literals that lose precision.

Reports numeric literals whose written digits cannot be reproduced from the
binary64 value the runtime stores. Only values stored as floats are checked:
JavaScript BigInt literals and Python int literals are exact.

Zero-valued literals are skipped unless configured otherwise: any spelling of
zero is exact, and a literal that underflows to zero is treated the same.

Python 3.13+.
"""

import logging
from dataclasses import dataclass

from numprecision.config import LintConfig
from numprecision.constants import RULE_ID, RULE_MESSAGE
from numprecision.diagnostics import Diagnostic, ErrorTemplate
from numprecision.precision import loses_precision
from numprecision.syntax.ast import NumericLiteral

__all__ = ["META", "RuleMeta", "check_literal"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleMeta:
    """Static rule description for documentation and rule registries."""

    id: str
    type: str
    description: str
    message: str
    recommended: bool
    url: str


META = RuleMeta(
    id=RULE_ID,
    type="problem",
    description="Disallow literal numbers that lose precision",
    message=RULE_MESSAGE,
    recommended=True,
    url=f"https://eslint.org/docs/latest/rules/{RULE_ID}",
)


def check_literal(node: NumericLiteral, config: LintConfig | None = None) -> Diagnostic | None:
    """Run the rule against one scanned literal.

    Args:
        node: Literal found by a scanner
        config: Lint options (default: LintConfig())

    Returns:
        LOSS_OF_PRECISION diagnostic, or None when the literal is fine or
        not subject to the rule
    """
    config = config if config is not None else LintConfig()

    if not node.is_number:
        return None
    if not node.value and not config.report_zero_values:
        return None
    if not loses_precision(node.to_literal()):
        return None

    logger.debug("Literal %s at %d:%d loses precision", node.raw, node.span.line, node.span.column)
    return ErrorTemplate.loss_of_precision(node.raw, node.span, config.severity)
