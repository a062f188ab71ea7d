"""Serialize compiled patterns back to CLDR pattern text.

Converts Pattern values to canonical pattern strings. Useful for:
- Normalizing equivalent spellings ('#,##0' and '#,###,##0' differ in text,
  not in meaning)
- Building patterns programmatically
- Property-based testing (roundtrip: compile -> serialize -> compile)

Canonical form:
- Integer part uses the fewest '#' that still express the grouping sizes
- Literals containing structural characters are quoted; apostrophes are
  doubled
- A decimal separator appears only when fraction digits are allowed

Python 3.13+.
"""

from cldrdecimal.constants import PAD_ESCAPE_CHAR, QUOTE, STRUCTURAL_CHARS
from cldrdecimal.enums import PadPosition, TokenKind

from .ast import Pattern, Subpattern
from .tokens import Token

__all__ = ["SerializationError", "serialize"]


class SerializationError(ValueError):
    """Raised when a Subpattern cannot be expressed as pattern text.

    Common causes:
    - Digit bounds that contradict each other (hand-built values)
    - Affix tokens that are not affix kinds
    """


def _quote_literal(text: str, *, after_literal: bool) -> str:
    """Spell one literal token so the tokenizer reads it back as one token.

    Outside quotes each apostrophe is written ''. A quoted run is needed for
    other structural characters, and to split a literal from the one before
    it (unquoted literal text coalesces). Text made only of apostrophes is
    never quoted: a quoted run opening with '' reads as an escaped apostrophe.
    """
    escaped = text.replace(QUOTE, QUOTE * 2)
    if not text.strip(QUOTE):
        return escaped
    if after_literal or any(ch in STRUCTURAL_CHARS for ch in text.replace(QUOTE, "")):
        return QUOTE + escaped + QUOTE
    return escaped


def _serialize_affix(tokens: tuple[Token, ...]) -> str:
    parts: list[str] = []
    after_literal = False
    for token in tokens:
        if token.kind is TokenKind.LITERAL:
            parts.append(_quote_literal(token.text, after_literal=after_literal))
            after_literal = True
            continue
        if not token.is_affix:
            msg = f"Token kind '{token.kind}' cannot appear in an affix"
            raise SerializationError(msg)
        parts.append(token.text)
        after_literal = False
    return "".join(parts)


def _group(digits: str, primary: int | None, secondary: int | None) -> str:
    """Insert grouping separators into integer placeholders, right to left."""
    if primary is None:
        return digits
    step = secondary if secondary is not None else primary
    chunks = [digits[-primary:]]
    rest = digits[:-primary]
    while rest:
        chunks.append(rest[-step:])
        rest = rest[:-step]
    return ",".join(reversed(chunks))


def _grouping_width(sub: Subpattern) -> int:
    """Fewest integer placeholders that still express both grouping sizes."""
    primary = sub.primary_grouping_size
    secondary = sub.secondary_grouping_size
    if primary is None:
        return 1
    if secondary is None or secondary == primary:
        return primary + 1
    return primary + secondary + 1


def _serialize_number(sub: Subpattern) -> str:
    width = _grouping_width(sub)

    if sub.min_significant_digits is not None:
        minimum = sub.min_significant_digits
        maximum = sub.max_significant_digits
        if maximum is None or maximum < minimum:
            msg = f"Invalid significant digit bounds {minimum}..{maximum}"
            raise SerializationError(msg)
        core = "@" * minimum + "#" * (maximum - minimum)
        integer = "#" * max(0, width - len(core)) + core
        return _group(integer, sub.primary_grouping_size, sub.secondary_grouping_size)

    zeros = sub.min_integer_digits
    if sub.max_integer_digits is not None:
        if sub.max_integer_digits < zeros:
            msg = f"Invalid integer digit bounds {zeros}..{sub.max_integer_digits}"
            raise SerializationError(msg)
        length = max(sub.max_integer_digits, width)
    else:
        length = max(zeros, width)
    integer = "#" * (length - zeros) + "0" * zeros
    text = _group(integer, sub.primary_grouping_size, sub.secondary_grouping_size)

    min_fraction = sub.min_fraction_digits or 0
    max_fraction = sub.max_fraction_digits or 0
    if max_fraction < min_fraction:
        msg = f"Invalid fraction digit bounds {min_fraction}..{max_fraction}"
        raise SerializationError(msg)
    if max_fraction:
        text += "." + "0" * min_fraction + "#" * (max_fraction - min_fraction)
    return text


def _serialize_subpattern(sub: Subpattern) -> str:
    prefix = _serialize_affix(sub.prefix)
    suffix = _serialize_affix(sub.suffix)
    number = _serialize_number(sub)

    if sub.exponent_digits is not None:
        number += "E" + ("+" if sub.exponent_show_plus else "") + "0" * sub.exponent_digits

    pad = PAD_ESCAPE_CHAR + sub.pad_char if sub.pad_char is not None else ""
    match sub.pad_position:
        case PadPosition.BEFORE_PREFIX:
            return pad + prefix + number + suffix
        case PadPosition.AFTER_PREFIX:
            return prefix + pad + number + suffix
        case PadPosition.BEFORE_SUFFIX:
            return prefix + number + pad + suffix
        case PadPosition.AFTER_SUFFIX:
            return prefix + number + suffix + pad
        case None:
            return prefix + number + suffix


def serialize(pattern: Pattern) -> str:
    """Serialize a Pattern to canonical CLDR pattern text.

    Args:
        pattern: Compiled (or hand-built) pattern

    Returns:
        Pattern text that compiles to an equivalent pattern

    Raises:
        SerializationError: If a subpattern cannot be expressed as text

    Example:
        >>> pattern, _ = compile_pattern("##,##0.00;(#,##0.00)")
        >>> serialize(pattern)
        '#,##0.00;(#,##0.00)'
    """
    text = _serialize_subpattern(pattern.positive)
    if pattern.negative is not None:
        text += ";" + _serialize_subpattern(pattern.negative)
    return text
