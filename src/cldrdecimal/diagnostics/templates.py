"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from cldrdecimal.constants import MAX_PATTERN_LENGTH

from .codes import Diagnostic, DiagnosticCode, SourceSpan


def _span(offset: int, length: int = 1) -> SourceSpan:
    return SourceSpan(start=offset, end=offset + length)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # ------------------------------------------------------------------
    # Lex errors
    # ------------------------------------------------------------------

    @staticmethod
    def empty_pattern(pattern: str | None) -> Diagnostic:
        """Pattern is empty or absent.

        Args:
            pattern: The empty string, or None when no pattern was supplied

        Returns:
            Diagnostic for EMPTY_PATTERN
        """
        msg = "No pattern supplied" if pattern is None else "Pattern is empty"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PATTERN,
            message=msg,
            span=_span(0, 0),
            hint="Supply a decimal format pattern such as '#,##0.###'",
            pattern=pattern,
        )

    @staticmethod
    def unterminated_quote(pattern: str, offset: int) -> Diagnostic:
        """Quoted literal run reaches end of input.

        Args:
            pattern: The pattern text
            offset: Offset of the opening apostrophe

        Returns:
            Diagnostic for UNTERMINATED_QUOTE
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_QUOTE,
            message="Unterminated quoted literal",
            span=_span(offset, len(pattern) - offset),
            hint="Close the literal with an apostrophe; write '' for a literal apostrophe",
            pattern=pattern,
        )

    @staticmethod
    def dangling_pad_escape(pattern: str, offset: int) -> Diagnostic:
        """Pad escape without a usable pad character.

        Args:
            pattern: The pattern text
            offset: Offset of the '*' character

        Returns:
            Diagnostic for DANGLING_PAD_ESCAPE
        """
        following = pattern[offset + 1 : offset + 2]
        if following:
            msg = f"Pad escape '*' followed by structural character '{following}'"
        else:
            msg = "Pad escape '*' at end of pattern"
        return Diagnostic(
            code=DiagnosticCode.DANGLING_PAD_ESCAPE,
            message=msg,
            span=_span(offset, 1 + len(following)),
            hint="Follow '*' with exactly one non-structural pad character, e.g. '*x'",
            pattern=pattern,
        )

    @staticmethod
    def pattern_too_long(pattern: str) -> Diagnostic:
        """Pattern exceeds the input size limit.

        Args:
            pattern: The pattern text

        Returns:
            Diagnostic for PATTERN_TOO_LONG
        """
        msg = (
            f"Pattern length {len(pattern)} exceeds maximum of "
            f"{MAX_PATTERN_LENGTH} characters"
        )
        return Diagnostic(
            code=DiagnosticCode.PATTERN_TOO_LONG,
            message=msg,
            span=_span(MAX_PATTERN_LENGTH, len(pattern) - MAX_PATTERN_LENGTH),
            hint="CLDR decimal patterns are short; check the input source",
            pattern=pattern[:MAX_PATTERN_LENGTH],
        )

    # ------------------------------------------------------------------
    # Parse errors
    # ------------------------------------------------------------------

    @staticmethod
    def duplicate_subpattern_separator(pattern: str, offset: int) -> Diagnostic:
        """Second ';' in a pattern.

        Args:
            pattern: The pattern text
            offset: Offset of the second separator

        Returns:
            Diagnostic for DUPLICATE_SUBPATTERN_SEPARATOR
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_SUBPATTERN_SEPARATOR,
            message="Duplicate subpattern separator ';'",
            span=_span(offset),
            hint="A pattern has at most a positive and a negative subpattern",
            pattern=pattern,
        )

    @staticmethod
    def duplicate_decimal_separator(pattern: str, offset: int) -> Diagnostic:
        """Second '.' in a subpattern.

        Args:
            pattern: The pattern text
            offset: Offset of the second decimal separator

        Returns:
            Diagnostic for DUPLICATE_DECIMAL_SEPARATOR
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_DECIMAL_SEPARATOR,
            message="Duplicate decimal separator",
            span=_span(offset),
            hint="A subpattern may contain at most one '.'; quote it ('.') for a literal dot",
            pattern=pattern,
        )

    @staticmethod
    def misplaced_decimal_separator(pattern: str, offset: int) -> Diagnostic:
        """'.' outside the numeric portion.

        Args:
            pattern: The pattern text
            offset: Offset of the decimal separator

        Returns:
            Diagnostic for MISPLACED_DECIMAL_SEPARATOR
        """
        return Diagnostic(
            code=DiagnosticCode.MISPLACED_DECIMAL_SEPARATOR,
            message="Decimal separator outside the numeric portion",
            span=_span(offset),
            hint="Quote the dot ('.') to use it as literal affix text",
            pattern=pattern,
        )

    @staticmethod
    def misplaced_grouping_separator(pattern: str, offset: int, reason: str) -> Diagnostic:
        """',' where no digit group can end.

        Args:
            pattern: The pattern text
            offset: Offset of the grouping separator
            reason: Short description of the misplacement

        Returns:
            Diagnostic for MISPLACED_GROUPING_SEPARATOR
        """
        return Diagnostic(
            code=DiagnosticCode.MISPLACED_GROUPING_SEPARATOR,
            message=f"Misplaced grouping separator: {reason}",
            span=_span(offset),
            hint="Grouping separators go between integer digit placeholders, e.g. '#,##0'",
            pattern=pattern,
        )

    @staticmethod
    def multiple_exponents(pattern: str, offset: int) -> Diagnostic:
        """Second 'E' in a subpattern.

        Args:
            pattern: The pattern text
            offset: Offset of the second exponent marker

        Returns:
            Diagnostic for MULTIPLE_EXPONENTS
        """
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_EXPONENTS,
            message="Multiple exponent markers",
            span=_span(offset),
            hint="Quote the letter ('E') to use it as literal affix text",
            pattern=pattern,
        )

    @staticmethod
    def misplaced_exponent(pattern: str, offset: int) -> Diagnostic:
        """'E' not directly after the numeric portion.

        Args:
            pattern: The pattern text
            offset: Offset of the exponent marker

        Returns:
            Diagnostic for MISPLACED_EXPONENT
        """
        return Diagnostic(
            code=DiagnosticCode.MISPLACED_EXPONENT,
            message="Exponent marker must directly follow the numeric portion",
            span=_span(offset),
            hint="Quote the letter ('E') to use it as literal affix text",
            pattern=pattern,
        )

    @staticmethod
    def exponent_without_digits(pattern: str, offset: int) -> Diagnostic:
        """'E' not followed by any '0'.

        Args:
            pattern: The pattern text
            offset: Offset of the exponent marker

        Returns:
            Diagnostic for EXPONENT_WITHOUT_DIGITS
        """
        return Diagnostic(
            code=DiagnosticCode.EXPONENT_WITHOUT_DIGITS,
            message="Exponent marker has no following '0' digits",
            span=_span(offset),
            hint="Write the minimum exponent digits as zeros, e.g. '0.###E0'",
            pattern=pattern,
        )

    @staticmethod
    def mixed_digit_counting(pattern: str, offset: int, reason: str) -> Diagnostic:
        """'0'/'.' and '@' counting combined in one subpattern.

        Args:
            pattern: The pattern text
            offset: Offset of the conflicting token
            reason: Short description of the conflict

        Returns:
            Diagnostic for MIXED_DIGIT_COUNTING
        """
        return Diagnostic(
            code=DiagnosticCode.MIXED_DIGIT_COUNTING,
            message=f"Mixed digit and significant-digit counting: {reason}",
            span=_span(offset),
            hint="Use either '0'/'#' with an optional '.' or a single run of '@' with optional '#'",
            pattern=pattern,
        )

    @staticmethod
    def misplaced_digit(pattern: str, offset: int, reason: str) -> Diagnostic:
        """Digit placeholder out of order or outside the numeric portion.

        Args:
            pattern: The pattern text
            offset: Offset of the digit placeholder
            reason: Short description of the misplacement

        Returns:
            Diagnostic for MISPLACED_DIGIT
        """
        return Diagnostic(
            code=DiagnosticCode.MISPLACED_DIGIT,
            message=f"Misplaced digit placeholder: {reason}",
            span=_span(offset),
            hint="Integer part is '#'* then '0'*, fraction part is '0'* then '#'*",
            pattern=pattern,
        )

    @staticmethod
    def multiple_pad_escapes(pattern: str, offset: int) -> Diagnostic:
        """Second pad escape in a subpattern.

        Args:
            pattern: The pattern text
            offset: Offset of the second pad escape

        Returns:
            Diagnostic for MULTIPLE_PAD_ESCAPES
        """
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_PAD_ESCAPES,
            message="Multiple pad escapes",
            span=_span(offset, 2),
            hint="A subpattern may specify padding at most once",
            pattern=pattern,
        )

    @staticmethod
    def misplaced_pad_escape(pattern: str, offset: int) -> Diagnostic:
        """Pad escape inside an affix rather than at its boundary.

        Args:
            pattern: The pattern text
            offset: Offset of the pad escape

        Returns:
            Diagnostic for MISPLACED_PAD_ESCAPE
        """
        return Diagnostic(
            code=DiagnosticCode.MISPLACED_PAD_ESCAPE,
            message="Pad escape must sit before or after the prefix or suffix",
            span=_span(offset, 2),
            hint="Move '*x' to the start or end of its affix",
            pattern=pattern,
        )

    @staticmethod
    def conflicting_multiplier(pattern: str, offset: int) -> Diagnostic:
        """Both '%' and U+2030 in one subpattern.

        Args:
            pattern: The pattern text
            offset: Offset of the second multiplier marker

        Returns:
            Diagnostic for CONFLICTING_MULTIPLIER
        """
        return Diagnostic(
            code=DiagnosticCode.CONFLICTING_MULTIPLIER,
            message="Ambiguous multiplier: both percent and per-mille signs present",
            span=_span(offset),
            hint="Quote one of the signs to use it as literal text",
            pattern=pattern,
        )

    @staticmethod
    def duplicate_multiplier(pattern: str, offset: int, sign: str) -> Diagnostic:
        """Same multiplier marker twice in one subpattern.

        Args:
            pattern: The pattern text
            offset: Offset of the second marker
            sign: The repeated sign

        Returns:
            Diagnostic for DUPLICATE_MULTIPLIER
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_MULTIPLIER,
            message=f"Duplicate multiplier sign '{sign}'",
            span=_span(offset),
            hint=f"Quote the extra sign ('{sign}') to use it as literal text",
            pattern=pattern,
        )

    @staticmethod
    def unexpected_token(pattern: str, offset: int, text: str) -> Diagnostic:
        """Token that no parse phase accepts.

        Args:
            pattern: The pattern text (empty when parsing a bare token stream)
            offset: Offset of the token
            text: Source text of the token

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=f"Unexpected token '{text}'",
            span=_span(offset, len(text)),
            hint="Quote the character to use it as literal text",
            pattern=pattern,
        )

    # ------------------------------------------------------------------
    # Validation errors
    # ------------------------------------------------------------------

    @staticmethod
    def no_numeric_placeholder(pattern: str, offset: int) -> Diagnostic:
        """Subpattern without any '0', '#' or '@'.

        Args:
            pattern: The pattern text
            offset: Start offset of the subpattern

        Returns:
            Diagnostic for NO_NUMERIC_PLACEHOLDER
        """
        return Diagnostic(
            code=DiagnosticCode.NO_NUMERIC_PLACEHOLDER,
            message="Subpattern has no numeric placeholder ('0', '#' or '@')",
            span=_span(offset, 0),
            hint="Add at least one digit placeholder, e.g. '#'",
            pattern=pattern,
        )

    @staticmethod
    def bounds_inverted(
        code: DiagnosticCode,
        pattern: str,
        offset: int,
        field: str,
        minimum: int,
        maximum: int,
    ) -> Diagnostic:
        """Minimum digit count exceeds maximum.

        Args:
            code: One of the *_BOUNDS_INVERTED codes
            pattern: The pattern text
            offset: Start offset of the subpattern
            field: Digit field name ("integer", "fraction", "significant")
            minimum: Minimum digit count
            maximum: Maximum digit count

        Returns:
            Diagnostic for the given bounds code
        """
        msg = f"Minimum {field} digits ({minimum}) exceed maximum ({maximum})"
        return Diagnostic(
            code=code,
            message=msg,
            span=_span(offset, 0),
            hint=f"Maximum {field} digits must be at least the minimum",
            pattern=pattern,
        )

    @staticmethod
    def invalid_pad_character(pattern: str, offset: int, pad_char: str | None) -> Diagnostic:
        """Pad character not exactly one character, or pad position mismatch.

        Args:
            pattern: The pattern text
            offset: Start offset of the subpattern
            pad_char: The offending pad character value

        Returns:
            Diagnostic for INVALID_PAD_CHARACTER
        """
        if pad_char is None:
            msg = "Pad position set without a pad character"
        else:
            msg = f"Pad character must be exactly one character, got {pad_char!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_PAD_CHARACTER,
            message=msg,
            span=_span(offset, 0),
            hint="Padding is written as '*' followed by one character",
            pattern=pattern,
        )

    @staticmethod
    def mixed_digit_fields(pattern: str, offset: int) -> Diagnostic:
        """Both fraction and significant digit bounds set.

        Args:
            pattern: The pattern text
            offset: Start offset of the subpattern

        Returns:
            Diagnostic for MIXED_DIGIT_FIELDS
        """
        return Diagnostic(
            code=DiagnosticCode.MIXED_DIGIT_FIELDS,
            message="Fraction and significant digit bounds are mutually exclusive",
            span=_span(offset, 0),
            hint="Leave either the fraction or the significant digit bounds unset",
            pattern=pattern,
        )

    @staticmethod
    def invalid_multiplier(pattern: str, offset: int, multiplier: int) -> Diagnostic:
        """Multiplier outside {1, 100, 1000}.

        Args:
            pattern: The pattern text
            offset: Start offset of the subpattern
            multiplier: The offending multiplier

        Returns:
            Diagnostic for INVALID_MULTIPLIER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_MULTIPLIER,
            message=f"Invalid multiplier {multiplier}",
            span=_span(offset, 0),
            hint="Multiplier is 1, 100 (percent) or 1000 (per-mille)",
            pattern=pattern,
        )

    @staticmethod
    def invalid_grouping_size(pattern: str, offset: int, size: int) -> Diagnostic:
        """Grouping size not positive.

        Args:
            pattern: The pattern text
            offset: Start offset of the subpattern
            size: The offending grouping size

        Returns:
            Diagnostic for INVALID_GROUPING_SIZE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_GROUPING_SIZE,
            message=f"Grouping size must be positive, got {size}",
            span=_span(offset, 0),
            hint="Leave grouping sizes unset to disable grouping",
            pattern=pattern,
        )

    @staticmethod
    def invalid_exponent_digits(pattern: str, offset: int, digits: int) -> Diagnostic:
        """Exponent digit count below one.

        Args:
            pattern: The pattern text
            offset: Start offset of the subpattern
            digits: The offending exponent digit count

        Returns:
            Diagnostic for INVALID_EXPONENT_DIGITS
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_EXPONENT_DIGITS,
            message=f"Exponent digits must be at least 1, got {digits}",
            span=_span(offset, 0),
            hint="Leave exponent digits unset for non-scientific patterns",
            pattern=pattern,
        )
