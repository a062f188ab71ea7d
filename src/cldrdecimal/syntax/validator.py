"""Semantic validation for compiled patterns.

Implements the second of two checking levels:
1. Well-formed: Conforms to the pattern grammar (handled by the parser)
2. Valid: Passes cross-field checks the parser cannot make locally (this module)

A pattern can be well-formed but invalid. "xxx" parses into a subpattern
whose prefix is the literal "xxx" and whose numeric portion is empty; only
the validator notices that nothing will ever render a digit.

The validator also accepts hand-built Pattern values, so it re-checks
invariants the parser already guarantees for parsed input.
"""

from cldrdecimal.constants import VALID_MULTIPLIERS
from cldrdecimal.diagnostics import DiagnosticCode, ErrorTemplate, PatternValidationError
from cldrdecimal.syntax.ast import Pattern, Subpattern

__all__ = ["PatternValidator", "validate_or_raise"]


class PatternValidator:
    """Semantic validator for compiled patterns.

    Thread-safe validator with no mutable instance state.

    Usage:
        validator = PatternValidator()
        pattern = validator.validate(pattern)  # raises PatternValidationError
    """

    __slots__ = ()

    def validate(self, pattern: Pattern) -> Pattern:
        """Validate every subpattern of a pattern.

        Pure predicate: returns the input unchanged on success.

        Args:
            pattern: Parsed pattern

        Returns:
            The same pattern object

        Raises:
            PatternValidationError: On the first violated invariant
        """
        for subpattern in pattern.subpatterns:
            self._validate_subpattern(subpattern, pattern.source)
        return pattern

    def _validate_subpattern(self, sub: Subpattern, source: str) -> None:
        offset = sub.span.start if sub.span is not None else 0

        if sub.placeholder_count < 1:
            raise PatternValidationError(ErrorTemplate.no_numeric_placeholder(source, offset))

        has_fraction = sub.min_fraction_digits is not None or sub.max_fraction_digits is not None
        has_significant = (
            sub.min_significant_digits is not None or sub.max_significant_digits is not None
        )
        if has_fraction and has_significant:
            raise PatternValidationError(ErrorTemplate.mixed_digit_fields(source, offset))

        self._check_bounds(
            DiagnosticCode.INTEGER_BOUNDS_INVERTED,
            "integer",
            sub.min_integer_digits,
            sub.max_integer_digits,
            source,
            offset,
        )
        self._check_bounds(
            DiagnosticCode.FRACTION_BOUNDS_INVERTED,
            "fraction",
            sub.min_fraction_digits,
            sub.max_fraction_digits,
            source,
            offset,
        )
        self._check_bounds(
            DiagnosticCode.SIGNIFICANT_BOUNDS_INVERTED,
            "significant",
            sub.min_significant_digits,
            sub.max_significant_digits,
            source,
            offset,
        )

        if sub.pad_char is not None or sub.pad_position is not None:
            if sub.pad_char is None or len(sub.pad_char) != 1 or sub.pad_position is None:
                raise PatternValidationError(
                    ErrorTemplate.invalid_pad_character(source, offset, sub.pad_char)
                )

        if sub.multiplier not in VALID_MULTIPLIERS:
            raise PatternValidationError(
                ErrorTemplate.invalid_multiplier(source, offset, sub.multiplier)
            )

        for size in (sub.primary_grouping_size, sub.secondary_grouping_size):
            if size is not None and size < 1:
                raise PatternValidationError(
                    ErrorTemplate.invalid_grouping_size(source, offset, size)
                )

        if sub.exponent_digits is not None and sub.exponent_digits < 1:
            raise PatternValidationError(
                ErrorTemplate.invalid_exponent_digits(source, offset, sub.exponent_digits)
            )

    @staticmethod
    def _check_bounds(
        code: DiagnosticCode,
        field: str,
        minimum: int | None,
        maximum: int | None,
        source: str,
        offset: int,
    ) -> None:
        # None maximum means unbounded; None minimum means the field is unused
        if minimum is None or maximum is None:
            return
        if maximum < minimum:
            raise PatternValidationError(
                ErrorTemplate.bounds_inverted(code, source, offset, field, minimum, maximum)
            )


def validate_or_raise(pattern: Pattern) -> Pattern:
    """Validate a pattern, returning it unchanged.

    Raises:
        PatternValidationError: On the first violated invariant
    """
    return PatternValidator().validate(pattern)
