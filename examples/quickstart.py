"""Quickstart example for numprecision.

This example demonstrates the precision-loss predicate on single literals
and the source-level linter for JavaScript and Python.

Note: Examples print diagnostics in all three output formats so the output
can be compared. Pick one format per tool in production.
"""

from numprecision import (
    LintConfig,
    Literal,
    SourceLanguage,
    SourceScanError,
    decode_literal,
    lint_source,
    loses_precision,
    normalize_decimal,
)
from numprecision.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: The predicate on a literal and its decoded value
print("=" * 50)
print("Example 1: Single Literals")
print("=" * 50)

for raw in ("0.1", "9007199254740993", "1.0000000000000001", "0x20000000000001", "0777"):
    literal = decode_literal(raw)
    print(f"{raw:>20} -> {literal.value!r:<24} loses precision: {loses_precision(literal)}")
# Output:
#                  0.1 -> 0.1                      loses precision: False
#     9007199254740993 -> 9007199254740992.0       loses precision: True
#   1.0000000000000001 -> 1.0                      loses precision: True
#     0x20000000000001 -> 9007199254740992.0       loses precision: True
#                 0777 -> 511.0                    loses precision: False

# Literal can also be built from a value decoded elsewhere
print(loses_precision(Literal("5123000000000000000000000000000001", 5.123e33)))
# Output: True

# Example 2: Normalized form
print("\n" + "=" * 50)
print("Example 2: Normalized Form")
print("=" * 50)

for text in ("123.45", "1.2345e2", "12345e-2", "0.000"):
    print(f"{text:>10} -> {normalize_decimal(text)}")
# Output:
#     123.45 -> 1.2345e2
#   1.2345e2 -> 1.2345e2
#   12345e-2 -> 1.2345e2
#      0.000 -> 0.e0

# Example 3: Linting JavaScript source
print("\n" + "=" * 50)
print("Example 3: Linting JavaScript")
print("=" * 50)

JS_SOURCE = """\
const MAX_SAFE = 9007199254740991;
const tooBig = 9007199254740993;       // stored as ...992
const exact = 9007199254740993n;       // BigInt, exact
const label = `id ${0.30000000000000001}`;
"""

result = lint_source(JS_SOURCE)
print(f"literals checked: {result.literal_count}, clean: {result.is_clean}")
for output_format in OutputFormat:
    print(f"\n--- {output_format} ---")
    print(DiagnosticFormatter(output_format=output_format).format_all(result.diagnostics))

# Example 4: Linting Python source
print("\n" + "=" * 50)
print("Example 4: Linting Python")
print("=" * 50)

PY_SOURCE = """\
big_int = 9007199254740993          # int: exact
big_float = 9007199254740993.0      # float: loses precision
"""

config = LintConfig(language=SourceLanguage.PYTHON, severity="warning")
result = lint_source(PY_SOURCE, config)
formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
print(formatter.format_all(result.diagnostics))
# Output: 2:13: LOSS_OF_PRECISION: This number literal will lose precision at runtime.

# Example 5: Unscannable source
print("\n" + "=" * 50)
print("Example 5: Scan Errors")
print("=" * 50)

try:
    lint_source("const s = 'unterminated;\nconst n = 1;")
except SourceScanError as e:
    print(e)
