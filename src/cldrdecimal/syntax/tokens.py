"""Token value type produced by the pattern tokenizer.

A token is a tagged value: its TokenKind says what it is, its text carries
the payload (literal text, pad character, currency sign run) and its offset
points back into the source for error reporting.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from cldrdecimal.constants import MAX_CURRENCY_RUN
from cldrdecimal.enums import TokenKind

__all__ = [
    "AFFIX_KINDS",
    "DIGIT_KINDS",
    "NUMERIC_KINDS",
    "Token",
]

# Placeholders counted as numeric digits.
DIGIT_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.DIGIT_ZERO, TokenKind.DIGIT_HASH, TokenKind.DIGIT_AT}
)

# Tokens that open or continue the numeric portion of a subpattern.
NUMERIC_KINDS: frozenset[TokenKind] = DIGIT_KINDS | {
    TokenKind.GROUP_SEP,
    TokenKind.DECIMAL_SEP,
}

# Tokens allowed in a prefix or suffix (pad escapes are tracked separately).
AFFIX_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.LITERAL,
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.CURRENCY,
        TokenKind.PERCENT,
        TokenKind.PERMILLE,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """Single token with its source offset.

    Attributes:
        kind: Token tag
        offset: Character offset of the token's first character in the source
        text: Literal text for LITERAL, pad character for PAD_ESCAPE,
            the sign run for CURRENCY, the source character otherwise
            (empty for END)

    Example:
        >>> Token(TokenKind.CURRENCY, 0, "\\u00a4\\u00a4").count
        2
    """

    kind: TokenKind
    offset: int
    text: str = ""

    def __post_init__(self) -> None:
        """Validate token invariants."""
        if self.offset < 0:
            msg = f"Token offset must be >= 0, got {self.offset}"
            raise ValueError(msg)

    @property
    def count(self) -> int:
        """Currency sign count, capped at four; 1 for every other kind."""
        if self.kind is TokenKind.CURRENCY:
            return min(len(self.text), MAX_CURRENCY_RUN)
        return 1

    @property
    def is_digit(self) -> bool:
        """True for '0', '#' and '@' placeholders."""
        return self.kind in DIGIT_KINDS

    @property
    def is_affix(self) -> bool:
        """True for tokens that may appear in a prefix or suffix."""
        return self.kind in AFFIX_KINDS

    @staticmethod
    def guard(value: object) -> TypeIs["Token"]:
        """Type guard for Token (used when parse() receives mixed input)."""
        return isinstance(value, Token)
