"""Source scanning: locate numeric literals and decode their values.

Public API:
    scan_numeric_literals - JavaScript / TypeScript source
    scan_python_literals - Python source
    NumericLiteral - Scanner output node
    Cursor, LineOffsetCache - Scanning infrastructure

Python 3.13+.
"""

from .ast import NumericLiteral
from .cursor import Cursor, LineOffsetCache
from .python_scanner import scan_python_literals
from .scanner import scan_numeric_literals

__all__ = [
    "Cursor",
    "LineOffsetCache",
    "NumericLiteral",
    "scan_numeric_literals",
    "scan_python_literals",
]
