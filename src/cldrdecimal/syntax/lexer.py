"""Tokenizer for CLDR decimal format patterns.

Scans a pattern string left to right with one character of lookahead and
produces an ordered tuple of Tokens terminated by an END token.

States:
    START: Outside quotes. Structural characters map to dedicated tokens,
        anything else accumulates into a literal run.
    IN_LITERAL: Inside a '...' quoted run. Everything is literal; '' emits
        one apostrophe and stays in the run.
    AFTER_PAD_ESCAPE: After '*'. The next character is the pad character.

Quoting lives entirely here so the parser never sees apostrophes.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

from cldrdecimal.constants import (
    CURRENCY_SIGN,
    MAX_PATTERN_LENGTH,
    PAD_ESCAPE_CHAR,
    QUOTE,
    STRUCTURAL_CHARS,
)
from cldrdecimal.diagnostics import ErrorTemplate, PatternLexError
from cldrdecimal.enums import TokenKind
from cldrdecimal.syntax.cursor import Cursor
from cldrdecimal.syntax.tokens import Token

__all__ = ["LexState", "PatternTokenizer", "tokenize_or_raise"]

# Single-character structural tokens. Currency runs, quotes and pad
# escapes need lookahead and are handled separately.
_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "0": TokenKind.DIGIT_ZERO,
    "#": TokenKind.DIGIT_HASH,
    "@": TokenKind.DIGIT_AT,
    ",": TokenKind.GROUP_SEP,
    ".": TokenKind.DECIMAL_SEP,
    "%": TokenKind.PERCENT,
    "‰": TokenKind.PERMILLE,
    "E": TokenKind.EXPONENT,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    ";": TokenKind.SUBPATTERN_SEP,
}


class LexState(StrEnum):
    """Tokenizer scan state."""

    START = "start"
    IN_LITERAL = "in_literal"
    AFTER_PAD_ESCAPE = "after_pad_escape"


class PatternTokenizer:
    """Single-use tokenizer over one pattern string.

    Instances hold scan state, so create one per pattern; the module-level
    tokenize_or_raise() does exactly that.

    Example:
        >>> [t.kind for t in PatternTokenizer("0%").tokenize()]
        [<TokenKind.DIGIT_ZERO: 'digit_zero'>, <TokenKind.PERCENT: 'percent'>, <TokenKind.END: 'end'>]
    """

    __slots__ = ("_literal", "_literal_start", "_source", "_tokens")

    def __init__(self, source: str) -> None:
        self._source = source
        self._tokens: list[Token] = []
        self._literal: list[str] = []
        self._literal_start = 0

    def tokenize(self) -> tuple[Token, ...]:
        """Scan the whole source.

        Returns:
            Tokens in source order, ending with an END token

        Raises:
            PatternLexError: On unterminated quotes or dangling pad escapes
        """
        source = self._source
        cursor = Cursor(source, 0)
        state = LexState.START
        quote_start = 0
        pad_start = 0

        while not cursor.is_eof:
            ch = cursor.current
            match state:
                case LexState.START:
                    if ch == QUOTE:
                        if cursor.peek() == QUOTE:
                            # '' outside a quoted run is a literal apostrophe
                            self._append_literal(QUOTE, cursor.pos)
                            cursor = cursor.advance(2)
                            continue
                        self._flush_literal()
                        quote_start = cursor.pos
                        state = LexState.IN_LITERAL
                        cursor = cursor.advance()
                    elif ch == PAD_ESCAPE_CHAR:
                        self._flush_literal()
                        pad_start = cursor.pos
                        state = LexState.AFTER_PAD_ESCAPE
                        cursor = cursor.advance()
                    elif ch == CURRENCY_SIGN:
                        self._flush_literal()
                        run = cursor.run_length(CURRENCY_SIGN)
                        self._tokens.append(
                            Token(TokenKind.CURRENCY, cursor.pos, cursor.slice_to(cursor.pos + run))
                        )
                        cursor = cursor.advance(run)
                    elif ch in _SINGLE_CHAR_TOKENS:
                        self._flush_literal()
                        self._tokens.append(Token(_SINGLE_CHAR_TOKENS[ch], cursor.pos, ch))
                        cursor = cursor.advance()
                    else:
                        self._append_literal(ch, cursor.pos)
                        cursor = cursor.advance()

                case LexState.IN_LITERAL:
                    if ch == QUOTE:
                        if cursor.peek() == QUOTE:
                            self._literal.append(QUOTE)
                            cursor = cursor.advance(2)
                            continue
                        self._tokens.append(
                            Token(TokenKind.LITERAL, quote_start, "".join(self._literal))
                        )
                        self._literal.clear()
                        state = LexState.START
                    else:
                        self._literal.append(ch)
                    cursor = cursor.advance()

                case LexState.AFTER_PAD_ESCAPE:
                    if ch in STRUCTURAL_CHARS:
                        raise PatternLexError(ErrorTemplate.dangling_pad_escape(source, pad_start))
                    self._tokens.append(Token(TokenKind.PAD_ESCAPE, pad_start, ch))
                    state = LexState.START
                    cursor = cursor.advance()

        if state is LexState.IN_LITERAL:
            raise PatternLexError(ErrorTemplate.unterminated_quote(source, quote_start))
        if state is LexState.AFTER_PAD_ESCAPE:
            raise PatternLexError(ErrorTemplate.dangling_pad_escape(source, pad_start))

        self._flush_literal()
        self._tokens.append(Token(TokenKind.END, len(source)))
        return tuple(self._tokens)

    def _append_literal(self, text: str, pos: int) -> None:
        if not self._literal:
            self._literal_start = pos
        self._literal.append(text)

    def _flush_literal(self) -> None:
        if self._literal:
            self._tokens.append(
                Token(TokenKind.LITERAL, self._literal_start, "".join(self._literal))
            )
            self._literal.clear()


def tokenize_or_raise(source: str | None) -> tuple[Token, ...]:
    """Tokenize a pattern string.

    Args:
        source: Pattern text; None means no pattern was supplied

    Returns:
        Tokens in source order, ending with an END token

    Raises:
        PatternLexError: On empty/absent or oversized input, unterminated
            quoted literal, or dangling pad escape

    Example:
        >>> tokens = tokenize_or_raise("#,##0.00")
        >>> "".join(t.text for t in tokens)
        '#,##0.00'
    """
    if not source:
        raise PatternLexError(ErrorTemplate.empty_pattern(source))
    if len(source) > MAX_PATTERN_LENGTH:
        raise PatternLexError(ErrorTemplate.pattern_too_long(source))
    return PatternTokenizer(source).tokenize()
