"""Numeric literal scanner for Python source.

Uses the stdlib tokenizer, so strings, comments and f-string text are
handled by the language's own rules, and numbers inside f-string
replacement fields are found. Values are decoded as the compiler would:

    - int literals (any radix) decode to exact int and never lose precision
    - float literals decode to binary64 float
    - imaginary literals (1j) are skipped

Python 3.13+.
"""

import ast
import io
import re
import tokenize
from decimal import Decimal

from numprecision.diagnostics import ErrorTemplate, SourceScanError, SourceSpan

from .ast import NumericLiteral
from .cursor import LineOffsetCache

__all__ = ["scan_python_literals"]

_DECIMAL_INTEGER = re.compile(r"[0-9_]+")


def scan_python_literals(source: str) -> tuple[NumericLiteral, ...]:
    """Scan Python source for int and float literals.

    Args:
        source: Complete module source text

    Returns:
        Numeric literals in source order

    Raises:
        SourceScanError: If the tokenizer rejects the source

    Example:
        >>> [(lit.raw, lit.value) for lit in scan_python_literals("x = 0x10 + 2.5j + 1e3")]
        [('0x10', 16), ('1e3', 1000.0)]
    """
    lines = LineOffsetCache(source)
    literals: list[NumericLiteral] = []

    try:
        for token in tokenize.generate_tokens(io.StringIO(source).readline):
            if token.type != tokenize.NUMBER or token.string[-1] in "jJ":
                continue
            (row, col), (end_row, end_col) = token.start, token.end
            span = lines.span(lines.offset(row, col), lines.offset(end_row, end_col))
            literals.append(NumericLiteral(token.string, _decode(token.string), span))
    except tokenize.TokenError as e:
        location = e.args[1] if len(e.args) > 1 else None
        raise SourceScanError(
            ErrorTemplate.tokenize_failed(e.args[0], _error_span(lines, location))
        ) from e
    except SyntaxError as e:
        raise SourceScanError(
            ErrorTemplate.tokenize_failed(str(e.msg), _error_span(lines, (e.lineno, e.offset)))
        ) from e

    return tuple(literals)


def _decode(text: str) -> int | float:
    if _DECIMAL_INTEGER.fullmatch(text):
        # literal_eval on decimal ints is capped by sys.get_int_max_str_digits()
        return int(Decimal(text))
    value: int | float = ast.literal_eval(text)
    return value


def _error_span(
    lines: LineOffsetCache, location: tuple[int | None, int | None] | None
) -> SourceSpan | None:
    """Zero-width span at a tokenizer error location (1-indexed line and column)."""
    if location is None:
        return None
    line, column = location
    if line is None or column is None:
        return None
    position = lines.offset(line, max(column - 1, 0))
    return lines.span(position, position)
