"""Parser for tokenized CLDR decimal format patterns.

Architecture:
    PatternParser splits the token stream at the subpattern separator and
    hands each slice to a SubpatternParser, which walks four phases in
    order:

    1. Prefix: affix tokens before the first '0', '#', '@', ',' or '.'
    2. Numeric: digit placeholders, grouping separators, decimal separator
    3. Exponent: 'E', optional '+', one or more '0'
    4. Suffix: remaining affix tokens

    Each phase raises PatternParseError on the first token it cannot place.
    No partial structure is ever returned.

Digit counting:
    Integer part is '#'* '0'*, fraction part is '0'* '#'*. Significant digit
    patterns use '#'* '@'+ '#'* with no decimal separator; leading '#' only
    marks grouping positions, trailing '#' raises the significant maximum.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from cldrdecimal.constants import (
    MULTIPLIER_NONE,
    MULTIPLIER_PERCENT,
    MULTIPLIER_PERMILLE,
)
from cldrdecimal.diagnostics import ErrorTemplate, PatternParseError
from cldrdecimal.enums import PadPosition, TokenKind
from cldrdecimal.syntax.ast import Pattern, Span, Subpattern
from cldrdecimal.syntax.tokens import NUMERIC_KINDS, Token

__all__ = ["PatternParser", "SubpatternParser", "parse_tokens"]


@dataclass(slots=True)
class _NumericCounts:
    """Digit tallies collected while scanning the numeric portion."""

    integer_hash: int = 0
    integer_zero: int = 0
    significant: int = 0
    significant_hash: int = 0
    fraction_zero: int = 0
    fraction_hash: int = 0
    has_decimal: bool = False
    primary_grouping: int | None = None
    secondary_grouping: int | None = None

    @property
    def placeholders(self) -> int:
        return (
            self.integer_hash
            + self.integer_zero
            + self.significant
            + self.significant_hash
            + self.fraction_zero
            + self.fraction_hash
        )


class SubpatternParser:
    """Parse one subpattern's token slice.

    Args:
        tokens: Tokens of the subpattern, without separators or END
        span: Source range covered by the subpattern
        source: Full pattern text for diagnostics ("" for bare token streams)
    """

    __slots__ = (
        "_exponent",
        "_pad",
        "_pad_position",
        "_pos",
        "_source",
        "_span",
        "_tokens",
    )

    def __init__(self, tokens: Sequence[Token], span: Span, source: str = "") -> None:
        self._tokens = tokens
        self._span = span
        self._source = source
        self._pos = 0
        self._pad: Token | None = None
        self._pad_position: PadPosition | None = None
        self._exponent: Token | None = None

    def parse(self) -> Subpattern:
        """Run all four phases.

        Returns:
            Parsed Subpattern (not yet validated)

        Raises:
            PatternParseError: On the first misplaced or duplicated token
        """
        prefix = self._parse_prefix()
        counts = self._parse_numeric()
        exponent_digits, show_plus = self._parse_exponent()
        suffix = self._parse_suffix(counts)
        multiplier = self._resolve_multiplier(prefix, suffix)

        if counts.significant:
            min_fraction: int | None = None
            max_fraction: int | None = None
            min_significant: int | None = counts.significant
            max_significant: int | None = counts.significant + counts.significant_hash
            min_integer = 0
            max_integer: int | None = None
        else:
            min_fraction = counts.fraction_zero
            max_fraction = counts.fraction_zero + counts.fraction_hash
            min_significant = None
            max_significant = None
            min_integer = counts.integer_zero
            # Only scientific notation bounds the integer part (engineering
            # patterns such as '##0.##E0' group the exponent by 3)
            if exponent_digits is not None:
                max_integer = counts.integer_hash + counts.integer_zero
            else:
                max_integer = None

        return Subpattern(
            prefix=prefix,
            suffix=suffix,
            min_integer_digits=min_integer,
            max_integer_digits=max_integer,
            min_fraction_digits=min_fraction,
            max_fraction_digits=max_fraction,
            min_significant_digits=min_significant,
            max_significant_digits=max_significant,
            primary_grouping_size=counts.primary_grouping,
            secondary_grouping_size=counts.secondary_grouping,
            multiplier=multiplier,
            exponent_digits=exponent_digits,
            exponent_show_plus=show_plus,
            pad_char=self._pad.text if self._pad is not None else None,
            pad_position=self._pad_position,
            placeholder_count=counts.placeholders,
            span=self._span,
        )

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _parse_prefix(self) -> tuple[Token, ...]:
        prefix: list[Token] = []
        pad_index: int | None = None
        tokens = self._tokens

        while self._pos < len(tokens) and tokens[self._pos].kind not in NUMERIC_KINDS:
            token = tokens[self._pos]
            if token.kind is TokenKind.PAD_ESCAPE:
                self._record_pad(token)
                pad_index = len(prefix)
            elif token.is_affix:
                prefix.append(token)
            elif token.kind is TokenKind.EXPONENT:
                raise PatternParseError(
                    ErrorTemplate.misplaced_exponent(self._source, token.offset)
                )
            else:
                raise PatternParseError(
                    ErrorTemplate.unexpected_token(self._source, token.offset, token.text)
                )
            self._pos += 1

        if pad_index is not None and self._pad is not None:
            if pad_index == 0:
                self._pad_position = PadPosition.BEFORE_PREFIX
            elif pad_index == len(prefix):
                self._pad_position = PadPosition.AFTER_PREFIX
            else:
                raise PatternParseError(
                    ErrorTemplate.misplaced_pad_escape(self._source, self._pad.offset)
                )
        return tuple(prefix)

    def _parse_numeric(self) -> _NumericCounts:  # noqa: PLR0912 - one branch per token kind
        counts = _NumericCounts()
        group_positions: list[int] = []
        integer_digits = 0
        pending_group: Token | None = None
        tokens = self._tokens
        source = self._source

        while self._pos < len(tokens) and tokens[self._pos].kind in NUMERIC_KINDS:
            token = tokens[self._pos]
            self._pos += 1

            match token.kind:
                case TokenKind.GROUP_SEP:
                    if counts.has_decimal:
                        raise PatternParseError(
                            ErrorTemplate.misplaced_grouping_separator(
                                source, token.offset, "in fraction part"
                            )
                        )
                    if pending_group is not None:
                        raise PatternParseError(
                            ErrorTemplate.misplaced_grouping_separator(
                                source, token.offset, "consecutive separators"
                            )
                        )
                    if integer_digits == 0:
                        raise PatternParseError(
                            ErrorTemplate.misplaced_grouping_separator(
                                source, token.offset, "before any digit"
                            )
                        )
                    group_positions.append(integer_digits)
                    pending_group = token
                    continue

                case TokenKind.DECIMAL_SEP:
                    if counts.has_decimal:
                        raise PatternParseError(
                            ErrorTemplate.duplicate_decimal_separator(source, token.offset)
                        )
                    if counts.significant:
                        raise PatternParseError(
                            ErrorTemplate.mixed_digit_counting(
                                source, token.offset, "decimal separator with '@'"
                            )
                        )
                    if pending_group is not None:
                        raise PatternParseError(
                            ErrorTemplate.misplaced_grouping_separator(
                                source, pending_group.offset, "directly before decimal separator"
                            )
                        )
                    counts.has_decimal = True

                case TokenKind.DIGIT_HASH:
                    if counts.has_decimal:
                        counts.fraction_hash += 1
                    elif counts.significant:
                        counts.significant_hash += 1
                        integer_digits += 1
                    elif counts.integer_zero:
                        raise PatternParseError(
                            ErrorTemplate.misplaced_digit(
                                source, token.offset, "'#' after '0' in integer part"
                            )
                        )
                    else:
                        counts.integer_hash += 1
                        integer_digits += 1

                case TokenKind.DIGIT_ZERO:
                    if counts.significant:
                        raise PatternParseError(
                            ErrorTemplate.mixed_digit_counting(source, token.offset, "'0' with '@'")
                        )
                    if counts.has_decimal:
                        if counts.fraction_hash:
                            raise PatternParseError(
                                ErrorTemplate.misplaced_digit(
                                    source, token.offset, "'0' after '#' in fraction part"
                                )
                            )
                        counts.fraction_zero += 1
                    else:
                        counts.integer_zero += 1
                        integer_digits += 1

                case TokenKind.DIGIT_AT:
                    if counts.has_decimal:
                        raise PatternParseError(
                            ErrorTemplate.mixed_digit_counting(
                                source, token.offset, "'@' after decimal separator"
                            )
                        )
                    if counts.integer_zero:
                        raise PatternParseError(
                            ErrorTemplate.mixed_digit_counting(source, token.offset, "'@' with '0'")
                        )
                    if counts.significant_hash:
                        raise PatternParseError(
                            ErrorTemplate.mixed_digit_counting(
                                source, token.offset, "second run of '@'"
                            )
                        )
                    counts.significant += 1
                    integer_digits += 1

            pending_group = None

        if pending_group is not None:
            raise PatternParseError(
                ErrorTemplate.misplaced_grouping_separator(
                    source, pending_group.offset, "at end of integer part"
                )
            )

        if group_positions:
            counts.primary_grouping = integer_digits - group_positions[-1]
            if len(group_positions) > 1:
                counts.secondary_grouping = group_positions[-1] - group_positions[-2]
            else:
                counts.secondary_grouping = counts.primary_grouping
        return counts

    def _parse_exponent(self) -> tuple[int | None, bool]:
        tokens = self._tokens
        if self._pos >= len(tokens) or tokens[self._pos].kind is not TokenKind.EXPONENT:
            return None, False

        self._exponent = tokens[self._pos]
        self._pos += 1

        show_plus = False
        if self._pos < len(tokens) and tokens[self._pos].kind is TokenKind.PLUS:
            show_plus = True
            self._pos += 1

        digits = 0
        while self._pos < len(tokens) and tokens[self._pos].kind is TokenKind.DIGIT_ZERO:
            digits += 1
            self._pos += 1

        if digits == 0:
            raise PatternParseError(
                ErrorTemplate.exponent_without_digits(self._source, self._exponent.offset)
            )
        return digits, show_plus

    def _parse_suffix(self, counts: _NumericCounts) -> tuple[Token, ...]:
        suffix: list[Token] = []
        pad_index: int | None = None
        tokens = self._tokens
        source = self._source

        while self._pos < len(tokens):
            token = tokens[self._pos]
            self._pos += 1

            if token.kind is TokenKind.PAD_ESCAPE:
                self._record_pad(token)
                pad_index = len(suffix)
            elif token.is_affix:
                suffix.append(token)
            elif token.is_digit:
                raise PatternParseError(
                    ErrorTemplate.misplaced_digit(
                        source, token.offset, "digit placeholder after the numeric portion"
                    )
                )
            elif token.kind is TokenKind.DECIMAL_SEP:
                if counts.has_decimal:
                    raise PatternParseError(
                        ErrorTemplate.duplicate_decimal_separator(source, token.offset)
                    )
                raise PatternParseError(
                    ErrorTemplate.misplaced_decimal_separator(source, token.offset)
                )
            elif token.kind is TokenKind.GROUP_SEP:
                raise PatternParseError(
                    ErrorTemplate.misplaced_grouping_separator(
                        source, token.offset, "outside the integer part"
                    )
                )
            elif token.kind is TokenKind.EXPONENT:
                if self._exponent is not None:
                    raise PatternParseError(
                        ErrorTemplate.multiple_exponents(source, token.offset)
                    )
                raise PatternParseError(ErrorTemplate.misplaced_exponent(source, token.offset))
            else:
                raise PatternParseError(
                    ErrorTemplate.unexpected_token(source, token.offset, token.text)
                )

        if pad_index is not None and self._pad is not None:
            if pad_index == 0:
                self._pad_position = PadPosition.BEFORE_SUFFIX
            elif pad_index == len(suffix):
                self._pad_position = PadPosition.AFTER_SUFFIX
            else:
                raise PatternParseError(
                    ErrorTemplate.misplaced_pad_escape(source, self._pad.offset)
                )
        return tuple(suffix)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _record_pad(self, token: Token) -> None:
        if self._pad is not None:
            raise PatternParseError(ErrorTemplate.multiple_pad_escapes(self._source, token.offset))
        self._pad = token

    def _resolve_multiplier(self, prefix: tuple[Token, ...], suffix: tuple[Token, ...]) -> int:
        percent: Token | None = None
        permille: Token | None = None

        for token in (*prefix, *suffix):
            if token.kind is TokenKind.PERCENT:
                if percent is not None:
                    raise PatternParseError(
                        ErrorTemplate.duplicate_multiplier(self._source, token.offset, token.text)
                    )
                percent = token
            elif token.kind is TokenKind.PERMILLE:
                if permille is not None:
                    raise PatternParseError(
                        ErrorTemplate.duplicate_multiplier(self._source, token.offset, token.text)
                    )
                permille = token
            else:
                continue
            if percent is not None and permille is not None:
                raise PatternParseError(
                    ErrorTemplate.conflicting_multiplier(self._source, token.offset)
                )

        if percent is not None:
            return MULTIPLIER_PERCENT
        if permille is not None:
            return MULTIPLIER_PERMILLE
        return MULTIPLIER_NONE


class PatternParser:
    """Builds a Pattern from a token stream.

    Stateless between calls; one instance may parse many streams.

    Example:
        >>> from cldrdecimal.syntax.lexer import tokenize_or_raise
        >>> pattern = PatternParser().parse(tokenize_or_raise("#,##0.00"))
        >>> pattern.positive.primary_grouping_size
        3
    """

    __slots__ = ()

    def parse(self, tokens: Sequence[Token], source: str = "") -> Pattern:
        """Parse tokens into a Pattern.

        Args:
            tokens: Token stream, normally ending with END
            source: Pattern text the tokens came from ("" if unknown)

        Returns:
            Pattern with positive and optional negative subpattern

        Raises:
            PatternParseError: On a second ';' or any subpattern error
        """
        stream = list(tokens)
        if stream and stream[-1].kind is TokenKind.END:
            end_offset = stream.pop().offset
        elif stream:
            end_offset = stream[-1].offset + len(stream[-1].text)
        else:
            end_offset = 0

        separators = [i for i, token in enumerate(stream) if token.kind is TokenKind.SUBPATTERN_SEP]
        if len(separators) > 1:
            second = stream[separators[1]]
            raise PatternParseError(
                ErrorTemplate.duplicate_subpattern_separator(source, second.offset)
            )

        if not separators:
            positive = SubpatternParser(stream, Span(0, end_offset), source).parse()
            return Pattern(positive=positive, negative=None, source=source)

        split = separators[0]
        separator = stream[split]
        positive = SubpatternParser(stream[:split], Span(0, separator.offset), source).parse()
        negative = SubpatternParser(
            stream[split + 1 :], Span(separator.offset + 1, end_offset), source
        ).parse()
        return Pattern(positive=positive, negative=negative, source=source)


def parse_tokens(tokens: Sequence[Token], source: str = "") -> Pattern:
    """Parse a token stream into a Pattern.

    Convenience function for PatternParser().parse().

    Raises:
        PatternParseError: On the first grammar violation
    """
    return PatternParser().parse(tokens, source)
