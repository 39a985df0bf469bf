"""Numeric literal scanner for JavaScript and TypeScript source.

Finds every numeric literal token without building a full syntax tree.
Everything that can contain digits without being a number is skipped:

    - Line (//) and block (/* */) comments, and a leading #! line
    - Single- and double-quoted strings
    - Template literals; numbers inside ${...} substitutions ARE scanned
    - Regular expression literals
    - Identifiers (x1, $0, _2d)

Regular Expression Heuristic:
    A "/" starts a regular expression when the previous significant token
    cannot end an expression (start of input, most punctuators, and
    keywords such as return or typeof). After identifiers, literals,
    closing brackets and a postfix ++ or -- it is a division operator.
    A ++ or -- pair leaves the state unchanged: postfix after an operand,
    prefix before one.

Values are decoded with JavaScript Number semantics (see
numprecision.core.literal.decode_literal).

Python 3.13+. Zero external dependencies.
"""

import re

from numprecision.core.literal import decode_literal
from numprecision.diagnostics import (
    ErrorTemplate,
    MalformedLiteralError,
    SourceScanError,
)

from .ast import NumericLiteral
from .cursor import Cursor, LineOffsetCache

__all__ = ["scan_numeric_literals"]

_NUMBER = re.compile(
    r"""
      0[xX][0-9a-fA-F_]+n?
    | 0[bB][01_]+n?
    | 0[oO][0-7_]+n?
    | (?:[0-9][0-9_]*\.?[0-9_]*|\.[0-9][0-9_]*)(?:[eE][+-]?[0-9][0-9_]*)?n?
    """,
    re.VERBOSE,
)

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\r\v\f\u00a0\u2028\u2029\ufeff")
_CLOSERS = frozenset(")]}")

# Keywords after which an expression (and so a regex) may start
_EXPRESSION_KEYWORDS = frozenset(
    {
        "await",
        "case",
        "delete",
        "do",
        "else",
        "in",
        "instanceof",
        "new",
        "of",
        "return",
        "throw",
        "typeof",
        "void",
        "yield",
    }
)

# Markers pushed on the brace stack
_BLOCK = "{"
_SUBSTITUTION = "${"


def _is_identifier_char(char: str) -> bool:
    return char.isalnum() or char in "$_\\" or (ord(char) > 127 and char.isidentifier())


def scan_numeric_literals(source: str) -> tuple[NumericLiteral, ...]:
    """Scan JavaScript/TypeScript source for numeric literals.

    Args:
        source: Complete source text

    Returns:
        Numeric literals in source order

    Raises:
        SourceScanError: On an unterminated string, template, regex or comment
        MalformedLiteralError: On a number token that is not a valid literal
            (for example "1.5n")

    Example:
        >>> [lit.raw for lit in scan_numeric_literals("const a = [1, 0x2, `${3}`]; // 4")]
        ['1', '0x2', '3']
    """
    lines = LineOffsetCache(source)
    literals: list[NumericLiteral] = []
    braces: list[str] = []
    regex_allowed = True

    cursor = Cursor(source, 0)
    if cursor.slice_ahead(2) == "#!":
        cursor = cursor.skip_to_line_end()

    while not cursor.is_eof:
        char = cursor.current
        start = cursor.pos

        if char in _WHITESPACE:
            cursor = cursor.advance()
            continue

        if char == "/" and cursor.peek(1) == "/":
            cursor = cursor.skip_to_line_end()
            continue

        if char == "/" and cursor.peek(1) == "*":
            cursor = _skip_block_comment(cursor, lines)
            continue

        if char in _DIGITS or (char == "." and cursor.peek(1) in _DIGITS):
            match = _NUMBER.match(source, start)
            # _NUMBER always matches here: the first character is a digit or ".<digit>"
            assert match is not None
            literals.append(_decode(match.group(), start, lines))
            cursor = cursor.advance(match.end() - start)
            regex_allowed = False
            continue

        if _is_identifier_char(char):
            while not cursor.is_eof and _is_identifier_char(cursor.current):
                cursor = cursor.advance()
            regex_allowed = cursor.source[start : cursor.pos] in _EXPRESSION_KEYWORDS
            continue

        if char in "'\"":
            cursor = _skip_string(cursor, lines)
            regex_allowed = False
            continue

        if char == "`":
            cursor, entered = _skip_template(cursor.advance(), start, lines)
            if entered:
                braces.append(_SUBSTITUTION)
                regex_allowed = True
            else:
                regex_allowed = False
            continue

        if char == "/" and regex_allowed:
            cursor = _skip_regex(cursor, lines)
            regex_allowed = False
            continue

        if char == "{":
            braces.append(_BLOCK)
        elif char == "}" and braces:
            if braces.pop() == _SUBSTITUTION:
                cursor, entered = _skip_template(cursor.advance(), start, lines)
                if entered:
                    braces.append(_SUBSTITUTION)
                    regex_allowed = True
                else:
                    regex_allowed = False
                continue

        if char in "+-" and cursor.peek(1) == char:
            # Postfix a++ ends an expression; prefix ++a does not
            cursor = cursor.advance(2)
            continue

        regex_allowed = char not in _CLOSERS
        cursor = cursor.advance()

    return tuple(literals)


def _decode(raw: str, start: int, lines: LineOffsetCache) -> NumericLiteral:
    span = lines.span(start, start + len(raw))
    try:
        literal = decode_literal(raw)
    except MalformedLiteralError as e:
        raise MalformedLiteralError(ErrorTemplate.malformed_literal(raw, span), raw=raw) from e
    return NumericLiteral(raw, literal.value, span, is_bigint=isinstance(literal.value, int))


def _skip_block_comment(cursor: Cursor, lines: LineOffsetCache) -> Cursor:
    end = cursor.source.find("*/", cursor.pos + 2)
    if end == -1:
        raise SourceScanError(
            ErrorTemplate.unterminated_comment(lines.span(cursor.pos, cursor.pos + 2))
        )
    return Cursor(cursor.source, end + 2)


def _skip_string(cursor: Cursor, lines: LineOffsetCache) -> Cursor:
    quote = cursor.current
    start = cursor.pos
    cursor = cursor.advance()
    while not cursor.is_eof:
        char = cursor.current
        if char == "\\":
            cursor = cursor.advance(2)
        elif char == quote:
            return cursor.advance()
        elif char in "\n\r":
            break
        else:
            cursor = cursor.advance()
    raise SourceScanError(ErrorTemplate.unterminated_string(quote, lines.span(start, start + 1)))


def _skip_template(cursor: Cursor, start: int, lines: LineOffsetCache) -> tuple[Cursor, bool]:
    """Skip template characters up to the closing backtick or a ${.

    Returns:
        (cursor after the delimiter, True if a substitution was entered)
    """
    while not cursor.is_eof:
        char = cursor.current
        if char == "\\":
            cursor = cursor.advance(2)
        elif char == "`":
            return cursor.advance(), False
        elif char == "$" and cursor.peek(1) == "{":
            return cursor.advance(2), True
        else:
            cursor = cursor.advance()
    raise SourceScanError(ErrorTemplate.unterminated_string("`", lines.span(start, start + 1)))


def _skip_regex(cursor: Cursor, lines: LineOffsetCache) -> Cursor:
    start = cursor.pos
    cursor = cursor.advance()
    in_class = False
    while not cursor.is_eof:
        char = cursor.current
        if char == "\\":
            cursor = cursor.advance(2)
            continue
        if char in "\n\r":
            break
        cursor = cursor.advance()
        if char == "[":
            in_class = True
        elif char == "]":
            in_class = False
        elif char == "/" and not in_class:
            # Flags
            while not cursor.is_eof and _is_identifier_char(cursor.current):
                cursor = cursor.advance()
            return cursor
    raise SourceScanError(ErrorTemplate.unterminated_string("/", lines.span(start, start + 1)))
