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

    Organized by compilation phase:
        1000-1999: Lex errors (tokenizer failures)
        2000-2999: Parse errors (grammar failures)
        3000-3999: Validation errors (semantic failures)
    """

    # Lex errors (1000-1999)
    EMPTY_PATTERN = 1001
    UNTERMINATED_QUOTE = 1002
    DANGLING_PAD_ESCAPE = 1003
    PATTERN_TOO_LONG = 1004

    # Parse errors (2000-2999)
    DUPLICATE_SUBPATTERN_SEPARATOR = 2001
    DUPLICATE_DECIMAL_SEPARATOR = 2002
    MISPLACED_DECIMAL_SEPARATOR = 2003
    MISPLACED_GROUPING_SEPARATOR = 2004
    MULTIPLE_EXPONENTS = 2005
    MISPLACED_EXPONENT = 2006
    EXPONENT_WITHOUT_DIGITS = 2007
    MIXED_DIGIT_COUNTING = 2008
    MISPLACED_DIGIT = 2009
    MULTIPLE_PAD_ESCAPES = 2010
    MISPLACED_PAD_ESCAPE = 2011
    CONFLICTING_MULTIPLIER = 2012
    DUPLICATE_MULTIPLIER = 2013
    UNEXPECTED_TOKEN = 2014

    # Validation errors (3000-3999)
    NO_NUMERIC_PLACEHOLDER = 3001
    INTEGER_BOUNDS_INVERTED = 3002
    FRACTION_BOUNDS_INVERTED = 3003
    SIGNIFICANT_BOUNDS_INVERTED = 3004
    INVALID_PAD_CHARACTER = 3005
    MIXED_DIGIT_FIELDS = 3006
    INVALID_MULTIPLIER = 3007
    INVALID_GROUPING_SIZE = 3008
    INVALID_EXPONENT_DIGITS = 3009


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. Currency (U+00A4) and per-mille (U+2030) signs occupy two
        and three bytes in UTF-8, so character offset differs from byte
        offset after them.

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
        """1-indexed column of the span start (patterns are single-line)."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the error has no single location)
        hint: Suggestion for fixing the error
        pattern: The pattern text the error refers to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    pattern: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[DUPLICATE_DECIMAL_SEPARATOR]: Duplicate decimal separator
              --> column 4
              = pattern: #.#.#
              = help: A subpattern may contain at most one '.'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
