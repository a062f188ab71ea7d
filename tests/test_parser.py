"""Tests for syntax.parser: PatternParser and SubpatternParser.

Validates digit counting, grouping sizes, exponents, affixes, multipliers,
pad placement and every parse error with its offset.
"""

from __future__ import annotations

import pytest

from cldrdecimal.diagnostics import DiagnosticCode, PatternParseError
from cldrdecimal.enums import ErrorPhase, PadPosition, TokenKind
from cldrdecimal.syntax.ast import Pattern, Span, Subpattern
from cldrdecimal.syntax.lexer import tokenize_or_raise
from cldrdecimal.syntax.parser import PatternParser, SubpatternParser, parse_tokens
from cldrdecimal.syntax.tokens import Token


def _parse(source: str) -> Pattern:
    return parse_tokens(tokenize_or_raise(source), source)


def _positive(source: str) -> Subpattern:
    return _parse(source).positive


def _parse_error(source: str) -> PatternParseError:
    with pytest.raises(PatternParseError) as exc_info:
        _parse(source)
    assert exc_info.value.phase is ErrorPhase.PARSE
    return exc_info.value


# ============================================================================
# DIGIT COUNTING
# ============================================================================


class TestDigitCounting:
    """Integer and fraction digit bounds."""

    def test_grouped_two_decimals(self) -> None:
        """'#,##0.00' has one required integer digit and exactly two decimals."""
        sub = _positive("#,##0.00")

        assert sub.min_integer_digits == 1
        assert sub.max_integer_digits is None
        assert sub.min_fraction_digits == 2
        assert sub.max_fraction_digits == 2
        assert sub.min_significant_digits is None
        assert sub.max_significant_digits is None
        assert sub.placeholder_count == 6

    def test_optional_fraction_digits(self) -> None:
        """Trailing '#' raise the fraction maximum only."""
        sub = _positive("#,##0.0##")
        assert sub.min_fraction_digits == 1
        assert sub.max_fraction_digits == 3

    def test_single_hash(self) -> None:
        """'#' alone has no required digits."""
        sub = _positive("#")
        assert sub.min_integer_digits == 0
        assert sub.max_fraction_digits == 0
        assert sub.placeholder_count == 1

    def test_leading_zeros(self) -> None:
        """Each '0' in the integer part is a required digit."""
        assert _positive("000").min_integer_digits == 3

    def test_decimal_without_fraction_digits(self) -> None:
        """A trailing '.' is allowed and adds no fraction digits."""
        sub = _positive("0.")
        assert sub.min_fraction_digits == 0
        assert sub.max_fraction_digits == 0

    def test_fraction_only(self) -> None:
        """'.00' has no integer placeholders."""
        sub = _positive(".00")
        assert sub.min_integer_digits == 0
        assert sub.min_fraction_digits == 2


class TestSignificantDigits:
    """'@' significant digit counting."""

    def test_at_signs_set_minimum(self) -> None:
        """'@@@' requires exactly three significant digits."""
        sub = _positive("@@@")
        assert sub.min_significant_digits == 3
        assert sub.max_significant_digits == 3
        assert sub.uses_significant_digits

    def test_trailing_hash_raises_maximum(self) -> None:
        """'@@##' allows two to four significant digits."""
        sub = _positive("@@##")
        assert sub.min_significant_digits == 2
        assert sub.max_significant_digits == 4

    def test_fraction_fields_are_unset(self) -> None:
        """Significant digit patterns leave fraction bounds as None."""
        sub = _positive("@#")
        assert sub.min_fraction_digits is None
        assert sub.max_fraction_digits is None
        assert sub.min_integer_digits == 0

    def test_leading_hash_with_grouping(self) -> None:
        """Leading '#' only mark grouping positions."""
        sub = _positive("#,#@@")
        assert sub.min_significant_digits == 2
        assert sub.max_significant_digits == 2
        assert sub.primary_grouping_size == 3


# ============================================================================
# GROUPING
# ============================================================================


class TestGrouping:
    """Primary and secondary grouping sizes."""

    def test_no_grouping(self) -> None:
        """Patterns without ',' have no grouping."""
        sub = _positive("0.00")
        assert sub.primary_grouping_size is None
        assert sub.secondary_grouping_size is None
        assert not sub.uses_grouping

    def test_single_separator_sets_both_sizes(self) -> None:
        """One ',' gives equal primary and secondary sizes."""
        sub = _positive("#,##0")
        assert sub.primary_grouping_size == 3
        assert sub.secondary_grouping_size == 3

    def test_indian_grouping(self) -> None:
        """'#,##,##0' groups by 3 then by 2."""
        sub = _positive("#,##,##0.###")
        assert sub.primary_grouping_size == 3
        assert sub.secondary_grouping_size == 2

    def test_only_last_two_separators_count(self) -> None:
        """Earlier separators do not affect the sizes."""
        sub = _positive("#,#,##,###0")
        assert sub.primary_grouping_size == 4
        assert sub.secondary_grouping_size == 2

    def test_fraction_digits_do_not_count(self) -> None:
        """Primary size counts integer placeholders only."""
        assert _positive("#,##0.000").primary_grouping_size == 3


# ============================================================================
# EXPONENT
# ============================================================================


class TestExponent:
    """Scientific notation."""

    def test_simple_exponent(self) -> None:
        """'0.00E0' has one exponent digit."""
        sub = _positive("0.00E0")
        assert sub.exponent_digits == 1
        assert not sub.exponent_show_plus
        assert sub.is_scientific
        assert sub.max_integer_digits == 1

    def test_exponent_with_plus(self) -> None:
        """'E+00' shows a plus sign and requires two exponent digits."""
        sub = _positive("##0.##E+00")
        assert sub.exponent_digits == 2
        assert sub.exponent_show_plus
        assert sub.min_integer_digits == 1
        assert sub.max_integer_digits == 3

    def test_hash_exponent(self) -> None:
        """'#E0' is the CLDR root scientific pattern."""
        sub = _positive("#E0")
        assert sub.exponent_digits == 1
        assert sub.min_integer_digits == 0
        assert sub.max_integer_digits == 1

    def test_exponent_followed_by_suffix(self) -> None:
        """Affix text may follow the exponent."""
        assert _positive("0E0 m").suffix_text == " m"


# ============================================================================
# AFFIXES AND MULTIPLIERS
# ============================================================================


class TestAffixes:
    """Prefix, suffix and negative subpatterns."""

    def test_accounting_negative(self) -> None:
        """Parenthesised negative subpattern keeps its own affixes."""
        pattern = _parse("#,##0.00;(#,##0.00)")

        assert pattern.positive.prefix_text == ""
        assert pattern.negative is not None
        assert pattern.negative.prefix_text == "("
        assert pattern.negative.suffix_text == ")"

    def test_subpattern_spans(self) -> None:
        """Spans cover each side of the separator."""
        pattern = _parse("#,##0.00;(#,##0.00)")

        assert pattern.positive.span == Span(0, 8)
        assert pattern.negative is not None
        assert pattern.negative.span == Span(9, 19)

    def test_no_negative(self) -> None:
        """Without ';' the negative subpattern is None."""
        assert _parse("0").negative is None

    def test_currency_prefix(self) -> None:
        """Currency sign is an affix token."""
        sub = _positive("¤#,##0.00")
        assert sub.prefix[0].kind is TokenKind.CURRENCY
        assert sub.multiplier == 1

    def test_literal_prefix_and_suffix(self) -> None:
        """Quoted text becomes literal affix tokens."""
        sub = _positive("'#'0' pcs'")
        assert sub.prefix_text == "#"
        assert sub.suffix_text == " pcs"

    def test_percent_suffix(self) -> None:
        """'%' sets the multiplier to 100."""
        sub = _positive("0.0%")
        assert sub.multiplier == 100
        assert sub.suffix[0].kind is TokenKind.PERCENT

    def test_permille_prefix(self) -> None:
        """'‰' sets the multiplier to 1000."""
        assert _positive("‰0").multiplier == 1000

    def test_percent_in_both_subpatterns(self) -> None:
        """Each subpattern has its own multiplier."""
        pattern = _parse("0%;-0%")
        assert pattern.negative is not None
        assert pattern.positive.multiplier == 100
        assert pattern.negative.multiplier == 100


# ============================================================================
# PADDING
# ============================================================================


class TestPadding:
    """Pad escapes at the four affix boundaries."""

    @pytest.mark.parametrize(
        ("source", "position"),
        [
            ("*x$#", PadPosition.BEFORE_PREFIX),
            ("$*x#", PadPosition.AFTER_PREFIX),
            ("#*x$", PadPosition.BEFORE_SUFFIX),
            ("#$*x", PadPosition.AFTER_SUFFIX),
        ],
    )
    def test_pad_positions(self, source: str, position: PadPosition) -> None:
        """Pad position follows where the escape sits."""
        sub = _positive(source)
        assert sub.pad_char == "x"
        assert sub.pad_position is position

    def test_empty_prefix_resolves_before_prefix(self) -> None:
        """A pad before the number with no prefix is BEFORE_PREFIX."""
        assert _positive("*_#").pad_position is PadPosition.BEFORE_PREFIX

    def test_empty_suffix_resolves_before_suffix(self) -> None:
        """A pad after the number with no suffix is BEFORE_SUFFIX."""
        assert _positive("#*_").pad_position is PadPosition.BEFORE_SUFFIX

    def test_no_pad(self) -> None:
        """Patterns without '*' have no pad fields."""
        sub = _positive("#")
        assert sub.pad_char is None
        assert sub.pad_position is None


# ============================================================================
# PARSE ERRORS
# ============================================================================


class TestParseErrors:
    """Each grammar violation reports its code and offset."""

    @pytest.mark.parametrize(
        ("source", "code", "offset"),
        [
            ("#.#.#", DiagnosticCode.DUPLICATE_DECIMAL_SEPARATOR, 3),
            ("0.0 .", DiagnosticCode.DUPLICATE_DECIMAL_SEPARATOR, 4),
            ("0;0;0", DiagnosticCode.DUPLICATE_SUBPATTERN_SEPARATOR, 3),
            ("0'x'.", DiagnosticCode.MISPLACED_DECIMAL_SEPARATOR, 4),
            ("#,,##0", DiagnosticCode.MISPLACED_GROUPING_SEPARATOR, 2),
            (",##0", DiagnosticCode.MISPLACED_GROUPING_SEPARATOR, 0),
            ("#,##0,", DiagnosticCode.MISPLACED_GROUPING_SEPARATOR, 5),
            ("#,.0", DiagnosticCode.MISPLACED_GROUPING_SEPARATOR, 1),
            ("#,##0.0,0", DiagnosticCode.MISPLACED_GROUPING_SEPARATOR, 7),
            ("0 ,", DiagnosticCode.MISPLACED_GROUPING_SEPARATOR, 2),
            ("0E0E0", DiagnosticCode.MULTIPLE_EXPONENTS, 3),
            ("E0", DiagnosticCode.MISPLACED_EXPONENT, 0),
            ("0 E0", DiagnosticCode.MISPLACED_EXPONENT, 2),
            ("0E", DiagnosticCode.EXPONENT_WITHOUT_DIGITS, 1),
            ("0E+", DiagnosticCode.EXPONENT_WITHOUT_DIGITS, 1),
            ("0E#", DiagnosticCode.EXPONENT_WITHOUT_DIGITS, 1),
            ("@0", DiagnosticCode.MIXED_DIGIT_COUNTING, 1),
            ("0@", DiagnosticCode.MIXED_DIGIT_COUNTING, 1),
            ("@.0", DiagnosticCode.MIXED_DIGIT_COUNTING, 1),
            ("0.@", DiagnosticCode.MIXED_DIGIT_COUNTING, 2),
            ("@#@", DiagnosticCode.MIXED_DIGIT_COUNTING, 2),
            ("0#", DiagnosticCode.MISPLACED_DIGIT, 1),
            ("0.#0", DiagnosticCode.MISPLACED_DIGIT, 3),
            ("0 0", DiagnosticCode.MISPLACED_DIGIT, 2),
            ("*x0*y", DiagnosticCode.MULTIPLE_PAD_ESCAPES, 3),
            ("a*xb#", DiagnosticCode.MISPLACED_PAD_ESCAPE, 1),
            ("#a*xb", DiagnosticCode.MISPLACED_PAD_ESCAPE, 2),
            ("0%‰", DiagnosticCode.CONFLICTING_MULTIPLIER, 2),
            ("%0%", DiagnosticCode.DUPLICATE_MULTIPLIER, 2),
            ("‰0‰", DiagnosticCode.DUPLICATE_MULTIPLIER, 2),
        ],
    )
    def test_parse_error(self, source: str, code: DiagnosticCode, offset: int) -> None:
        """Parse error carries the expected code and offset."""
        error = _parse_error(source)
        assert error.code is code
        assert error.offset == offset

    def test_error_in_negative_subpattern_uses_absolute_offset(self) -> None:
        """Offsets in the negative subpattern index the whole pattern."""
        error = _parse_error("#,##0.00;#.#.#")
        assert error.code is DiagnosticCode.DUPLICATE_DECIMAL_SEPARATOR
        assert error.offset == 12

    def test_error_keeps_pattern_text(self) -> None:
        """The diagnostic records the pattern it refers to."""
        assert _parse_error("#.#.#").diagnostic.pattern == "#.#.#"

    def test_unexpected_token_in_bare_stream(self) -> None:
        """Tokens that never appear in an affix are rejected."""
        tokens = [Token(TokenKind.END, 0), Token(TokenKind.DIGIT_ZERO, 0, "0")]
        with pytest.raises(PatternParseError) as exc_info:
            SubpatternParser(tokens, Span(0, 1)).parse()
        assert exc_info.value.code is DiagnosticCode.UNEXPECTED_TOKEN


# ============================================================================
# PARSER API
# ============================================================================


class TestPatternParser:
    """PatternParser entry point behavior."""

    def test_parser_is_reusable(self) -> None:
        """One parser instance parses many streams."""
        parser = PatternParser()
        first = parser.parse(tokenize_or_raise("0.00"))
        second = parser.parse(tokenize_or_raise("#,##0"))
        assert first.positive.min_fraction_digits == 2
        assert second.positive.primary_grouping_size == 3

    def test_stream_without_end_token(self) -> None:
        """A stream missing END still parses."""
        tokens = tokenize_or_raise("0.0")[:-1]
        assert PatternParser().parse(tokens).positive.max_fraction_digits == 1

    def test_source_is_recorded(self) -> None:
        """parse_tokens() stores the source text on the pattern."""
        assert _parse("0%").source == "0%"

    def test_empty_numeric_portion_parses(self) -> None:
        """'xxx' is well-formed; only validation rejects it."""
        sub = _positive("xxx")
        assert sub.prefix_text == "xxx"
        assert sub.placeholder_count == 0
