"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar errors (malformed plural rule text or rule data)
        2000-2999: Resolution errors (no rules for a locale)
        3000-3999: Argument errors (caller contract violations)
        4000-4999: Data errors (malformed decoded CLDR documents)
    """

    # Grammar errors (1000-1999)
    GRAMMAR_UNEXPECTED_TOKEN = 1001
    GRAMMAR_UNEXPECTED_END = 1002
    GRAMMAR_UNKNOWN_OPERAND = 1003
    GRAMMAR_UNKNOWN_OPERATOR = 1004
    GRAMMAR_INVALID_RANGE = 1005
    GRAMMAR_INVALID_MODULUS = 1006
    GRAMMAR_PARENTHESES_UNSUPPORTED = 1007
    GRAMMAR_RULE_TOO_LONG = 1008
    GRAMMAR_UNKNOWN_CATEGORY = 1101
    GRAMMAR_DUPLICATE_CATEGORY = 1102
    GRAMMAR_CONDITIONAL_OTHER = 1103

    # Resolution errors (2000-2999)
    UNKNOWN_PLURAL_RULES = 2001

    # Argument errors (3000-3999)
    INVALID_NUMBER = 3001
    INVALID_PRECISION = 3002
    INVALID_LOCALE = 3003

    # Data errors (4000-4999)
    DATA_MISSING_SECTION = 4001
    DATA_INVALID_ENTRY = 4002
    DATA_DUPLICATE_LOCALE = 4003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a fragment inside a single rule text.

    Rule texts are one line, so a span is a pair of character offsets.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    @property
    def column(self) -> int:
        """1-indexed column of the span start."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location inside the rule text (None for non-grammar errors)
        source: Rule text the span refers to
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        locale_code: Locale involved in the error (resolution/data errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    source: str | None = None
    hint: str | None = None
    help_url: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[GRAMMAR_UNKNOWN_OPERAND]: Unknown operand 'x'
              --> column 1
               |
               | x = 1
               | ^
              = help: Operands are n, i, v, w, f, t, c and e

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
