"""Enumerations for cldrdecimal type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Kind of token produced by the pattern tokenizer.

    StrEnum provides automatic string conversion: str(TokenKind.DIGIT_ZERO) == "digit_zero"
    """

    LITERAL = "literal"
    """Unquoted literal run or quoted literal: abc, 'E'"""

    DIGIT_ZERO = "digit_zero"
    """Mandatory digit placeholder: 0"""

    DIGIT_HASH = "digit_hash"
    """Optional digit placeholder: #"""

    DIGIT_AT = "digit_at"
    """Significant digit placeholder: @"""

    GROUP_SEP = "group_sep"
    """Grouping separator: ,"""

    DECIMAL_SEP = "decimal_sep"
    """Decimal separator: ."""

    PERCENT = "percent"
    """Percent sign, multiplies by 100: %"""

    PERMILLE = "permille"
    """Per-mille sign, multiplies by 1000: U+2030"""

    CURRENCY = "currency"
    """Currency sign run of one to four U+00A4 characters"""

    EXPONENT = "exponent"
    """Exponent marker for scientific notation: E"""

    PLUS = "plus"
    """Localized plus sign: +"""

    MINUS = "minus"
    """Localized minus sign: -"""

    PAD_ESCAPE = "pad_escape"
    """Pad escape followed by its pad character: *x"""

    SUBPATTERN_SEP = "subpattern_sep"
    """Positive/negative subpattern separator: ;"""

    END = "end"
    """End of input"""


class PadPosition(StrEnum):
    """Where padding is inserted when a pad escape is present.

    StrEnum provides automatic string conversion: str(PadPosition.BEFORE_PREFIX) == "before_prefix"
    """

    BEFORE_PREFIX = "before_prefix"
    """Pad escape precedes the prefix: *x'$'#0"""

    AFTER_PREFIX = "after_prefix"
    """Pad escape sits between prefix and number: '$'*x#0"""

    BEFORE_SUFFIX = "before_suffix"
    """Pad escape sits between number and suffix: #0*x%"""

    AFTER_SUFFIX = "after_suffix"
    """Pad escape follows the suffix: #0%*x"""


class ErrorPhase(StrEnum):
    """Compilation phase that produced an error.

    StrEnum provides automatic string conversion: str(ErrorPhase.LEX) == "lex"
    """

    LEX = "lex"
    """Tokenizer failure: empty input, unterminated quote, dangling pad escape"""

    PARSE = "parse"
    """Grammar failure: misplaced or duplicated structural tokens"""

    VALIDATION = "validation"
    """Semantic failure: digit-bound inversion, no numeric placeholder"""


__all__ = [
    "ErrorPhase",
    "PadPosition",
    "TokenKind",
]
