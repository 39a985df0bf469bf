"""Scanner output nodes.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from numprecision.core.literal import Literal
from numprecision.diagnostics import SourceSpan

__all__ = ["NumericLiteral"]


@dataclass(frozen=True, slots=True)
class NumericLiteral:
    """A numeric literal found in source text.

    Attributes:
        raw: Literal text exactly as written
        value: Decoded value. float for binary64 numbers; int for exact
            integers (JavaScript BigInt, Python int)
        span: Location in the scanned source
        is_bigint: True for n-suffixed JavaScript BigInt literals
    """

    raw: str
    value: float | int
    span: SourceSpan
    is_bigint: bool = False

    @property
    def is_number(self) -> bool:
        """True when the runtime stores the value as a binary64 float."""
        return isinstance(self.value, float)

    def to_literal(self) -> Literal:
        """Drop location information for the precision check."""
        return Literal(self.raw, self.value)
