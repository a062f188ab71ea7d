"""Compiled pattern node definitions.

A Pattern holds a positive Subpattern and an optional negative one. Both
are frozen, so a compiled pattern can be cached and shared between threads.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field, replace

from cldrdecimal.constants import MULTIPLIER_NONE
from cldrdecimal.enums import PadPosition, TokenKind
from cldrdecimal.syntax.tokens import Token

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "Span",
    "Subpattern",
    "Pattern",
    "affix_text",
]


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "#,##0;(#,##0)"
        Positive subpattern span: Span(start=0, end=5)
        Negative subpattern span: Span(start=6, end=13)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


def affix_text(tokens: tuple[Token, ...]) -> str:
    """Concatenate the source text of affix tokens.

    Example:
        >>> affix_text((Token(TokenKind.LITERAL, 0, "("),))
        '('
    """
    return "".join(token.text for token in tokens)


@dataclass(frozen=True, slots=True)
class Subpattern:
    """One half of a decimal format pattern.

    A subpattern uses either fraction digit counting ('0', '#', '.') or
    significant digit counting ('@'): exactly one of the two bound pairs is
    set, the other is None.

    Attributes:
        prefix: Affix tokens before the number
        suffix: Affix tokens after the number
        min_integer_digits: Count of '0' in the integer part
        max_integer_digits: Integer digit bound, None when unbounded
        min_fraction_digits: Count of '0' after the decimal separator
        max_fraction_digits: Count of '0' and '#' after the decimal separator
        min_significant_digits: Count of '@'
        max_significant_digits: Count of '@' plus trailing '#'
        primary_grouping_size: Rightmost digit group width
        secondary_grouping_size: Width of the remaining groups
        multiplier: 1, 100 for percent or 1000 for per-mille
        exponent_digits: Minimum exponent digits, None without exponent
        exponent_show_plus: Positive exponents carry a plus sign ('E+0')
        pad_char: Padding character from a '*x' escape
        pad_position: Where padding is inserted
        placeholder_count: Number of '0', '#' and '@' in the numeric portion
        span: Source range the subpattern was parsed from
    """

    prefix: tuple[Token, ...] = ()
    suffix: tuple[Token, ...] = ()
    min_integer_digits: int = 0
    max_integer_digits: int | None = None
    min_fraction_digits: int | None = 0
    max_fraction_digits: int | None = 0
    min_significant_digits: int | None = None
    max_significant_digits: int | None = None
    primary_grouping_size: int | None = None
    secondary_grouping_size: int | None = None
    multiplier: int = MULTIPLIER_NONE
    exponent_digits: int | None = None
    exponent_show_plus: bool = False
    pad_char: str | None = None
    pad_position: PadPosition | None = None
    placeholder_count: int = 0
    span: Span | None = None

    @property
    def prefix_text(self) -> str:
        """Prefix as text, e.g. '(' for '(#,##0)'."""
        return affix_text(self.prefix)

    @property
    def suffix_text(self) -> str:
        """Suffix as text, e.g. ')' for '(#,##0)'."""
        return affix_text(self.suffix)

    @property
    def uses_significant_digits(self) -> bool:
        """True when digits are counted with '@'."""
        return self.min_significant_digits is not None

    @property
    def uses_grouping(self) -> bool:
        """True when the integer part contains a grouping separator."""
        return self.primary_grouping_size is not None

    @property
    def is_scientific(self) -> bool:
        """True when the pattern has an exponent."""
        return self.exponent_digits is not None


@dataclass(frozen=True, slots=True)
class Pattern:
    """Compiled decimal format pattern.

    Attributes:
        positive: Subpattern for zero and positive values
        negative: Explicit negative subpattern, None when the pattern has no ';'
        source: Pattern text this was compiled from (not part of equality,
            so patterns parsed from text and from its tokens compare equal)

    Example:
        >>> pattern, _ = compile_pattern("#,##0.00;(#,##0.00)")
        >>> pattern.negative.prefix_text, pattern.negative.suffix_text
        ('(', ')')
    """

    positive: Subpattern
    negative: Subpattern | None = None
    source: str = field(default="", compare=False)

    @property
    def subpatterns(self) -> tuple[Subpattern, ...]:
        """Positive subpattern, then the negative one if present."""
        if self.negative is None:
            return (self.positive,)
        return (self.positive, self.negative)

    def resolved_negative(self) -> Subpattern:
        """Negative subpattern a renderer should use.

        Returns the explicit negative subpattern, or synthesizes one by
        prepending a minus sign to the positive prefix. The synthesized
        token has the offset of the positive subpattern start.
        """
        if self.negative is not None:
            return self.negative
        offset = self.positive.span.start if self.positive.span is not None else 0
        minus = Token(TokenKind.MINUS, offset, "-")
        return replace(self.positive, prefix=(minus, *self.positive.prefix))
