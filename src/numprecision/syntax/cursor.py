"""Immutable cursor infrastructure for source scanning.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on demand through LineOffsetCache

Line Ending Support:
    LF and CRLF are supported (\\n is the line delimiter). CR-only files
    produce incorrect line numbers.
"""

from dataclasses import dataclass

from numprecision.diagnostics import SourceSpan

__all__ = ["Cursor", "LineOffsetCache"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("0x1F;", 0)
        >>> cursor.current
        '0'
        >>> cursor.advance(2).current
        '1'
        >>> cursor.current  # Original unchanged (immutability)
        '0'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor."""
        return self.source[self.pos : self.pos + n]

    def skip_to_line_end(self) -> "Cursor":
        """Advance to the next \\n or \\r (not consumed)."""
        cursor = self
        while not cursor.is_eof and cursor.current not in ("\n", "\r"):
            cursor = cursor.advance()
        return cursor


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Scanners report one span per
    literal, so this beats an O(n) newline count per lookup.

    Example:
        >>> cache = LineOffsetCache("a = 1\\nb = 0.1")
        >>> cache.get_line_col(10)
        (2, 5)
        >>> cache.span(10, 13)
        SourceSpan(start=10, end=13, line=2, column=5)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source."""
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get 1-indexed (line, column) for a character position."""
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        # Index of largest offset <= pos
        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)

    def offset(self, line: int, column: int) -> int:
        """Character offset of a 1-indexed line and 0-indexed column.

        Lines past the end (tokenizers report EOF errors one line beyond
        the last) are clamped, and so is the resulting offset.
        """
        index = min(max(line, 1), len(self._offsets)) - 1
        return min(self._offsets[index] + column, self._source_len)

    def span(self, start: int, end: int) -> SourceSpan:
        """Build a SourceSpan for [start, end)."""
        line, column = self.get_line_col(start)
        return SourceSpan(start=start, end=end, line=line, column=column)
