"""Pattern compilation exception hierarchy with structured diagnostics.

Every exception stores a Diagnostic object and the compilation phase that
raised it. The compile API catches these at the phase boundary and hands
them back to callers as values.

Python 3.13+. Zero external dependencies.
"""

from cldrdecimal.enums import ErrorPhase

from .codes import Diagnostic, DiagnosticCode

__all__ = [
    "PatternError",
    "PatternLexError",
    "PatternParseError",
    "PatternValidationError",
]


class PatternError(Exception):
    """Base exception for all pattern compilation errors.

    Attributes:
        diagnostic: Structured diagnostic information
        phase: Compilation phase that failed
    """

    phase: ErrorPhase

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize PatternError.

        Args:
            diagnostic: Diagnostic describing the failure
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.format_error())

    @property
    def message(self) -> str:
        """Human-readable error description without location."""
        return self.diagnostic.message

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code of the failure."""
        return self.diagnostic.code

    @property
    def offset(self) -> int | None:
        """Character offset of the offending token, when known."""
        span = self.diagnostic.span
        return span.start if span is not None else None

    @property
    def byte_offset(self) -> int | None:
        """UTF-8 byte offset of the offending token, for byte-oriented callers.

        None when the diagnostic has no span or no pattern text.

        Example:
            >>> error = PatternParseError(
            ...     ErrorTemplate.duplicate_decimal_separator("¤#.#.#", 4)
            ... )
            >>> error.offset, error.byte_offset
            (4, 5)
        """
        offset = self.offset
        pattern = self.diagnostic.pattern
        if offset is None or pattern is None:
            return None
        return len(pattern[:offset].encode("utf-8"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PatternError):
            return NotImplemented
        return type(self) is type(other) and self.diagnostic == other.diagnostic

    def __hash__(self) -> int:
        return hash((type(self), self.diagnostic))

    def format_with_context(self) -> str:
        """Format error with the pattern text and a caret under the offset.

        Returns:
            Multi-line formatted error

        Example:
            >>> error = PatternParseError(
            ...     ErrorTemplate.duplicate_decimal_separator("#.#.#", 3)
            ... )
            >>> print(error.format_with_context())
            parse error at column 4: Duplicate decimal separator
            <BLANKLINE>
              #.#.#
                 ^
        """
        offset = self.offset
        location = f" at column {offset + 1}" if offset is not None else ""
        lines = [f"{self.phase} error{location}: {self.message}"]

        pattern = self.diagnostic.pattern
        if pattern:
            lines.append("")
            lines.append(f"  {pattern}")
            if offset is not None:
                lines.append("  " + " " * offset + "^")

        return "\n".join(lines)


class PatternLexError(PatternError):
    """Tokenizer failure.

    Raised for empty or absent input, unterminated quoted literals, dangling
    pad escapes and oversized input.
    """

    phase = ErrorPhase.LEX


class PatternParseError(PatternError):
    """Grammar failure during parsing of the token stream.

    Raised for duplicated or misplaced structural tokens, mixed digit and
    significant-digit counting, and conflicting multiplier markers.
    """

    phase = ErrorPhase.PARSE


class PatternValidationError(PatternError):
    """Semantic failure in a structurally valid pattern.

    Example:
        "xxx" parses (prefix only) but contains no numeric placeholder.
    """

    phase = ErrorPhase.VALIDATION
