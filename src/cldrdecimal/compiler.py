"""Compile API: tokenize, parse and validate decimal format patterns.

Every entry point returns a ``(value, error)`` pair instead of raising, so a
caller compiling patterns for many locales can collect failures and move on:

- tokenize(text) -> (tokens, error)
- parse(text_or_tokens) -> (pattern, error)
- validate(pattern) -> (pattern, error)
- compile_pattern(text) -> (pattern, error)

Exactly one element of the pair is None. The error is a PatternError whose
``phase`` says which stage failed and whose ``offset`` points at the
offending character when there is one. Stages short-circuit: a lex error
is never followed by a parse attempt, and nothing repairs a failed stage.

Thread-safe. Every call is a pure function of its input.

Python 3.13+.
"""

import logging
from collections.abc import Sequence

from cldrdecimal.diagnostics import (
    PatternError,
    PatternLexError,
    PatternParseError,
    PatternValidationError,
)
from cldrdecimal.syntax.ast import Pattern
from cldrdecimal.syntax.lexer import tokenize_or_raise
from cldrdecimal.syntax.parser import parse_tokens
from cldrdecimal.syntax.tokens import Token
from cldrdecimal.syntax.validator import validate_or_raise

__all__ = [
    "PatternResult",
    "TokenizeResult",
    "compile_pattern",
    "parse",
    "tokenize",
    "validate",
]

logger = logging.getLogger(__name__)

type TokenizeResult = tuple[tuple[Token, ...] | None, PatternError | None]
type PatternResult = tuple[Pattern | None, PatternError | None]


def tokenize(source: str | None) -> TokenizeResult:
    """Tokenize a pattern string without parsing it.

    Exposed for diagnostics and for composing with parse().

    Args:
        source: Pattern text; None means no pattern was supplied

    Returns:
        Tuple of (tokens, error):
        - tokens: Tokens ending with END, or None on failure
        - error: PatternLexError, or None on success

    Examples:
        >>> tokens, error = tokenize("0.0%")
        >>> [t.text for t in tokens]
        ['0', '.', '0', '%', '']
        >>> tokens, error = tokenize("'abc")
        >>> error.phase
        <ErrorPhase.LEX: 'lex'>
    """
    try:
        return tokenize_or_raise(source), None
    except PatternLexError as e:
        return None, e


def parse(source: str | Sequence[Token] | None) -> PatternResult:
    """Parse pattern text or an existing token stream.

    ``parse(tokenize(s)[0])`` and ``parse(s)`` produce equal patterns.
    The result is not validated; use compile_pattern() for that.

    Args:
        source: Pattern text, None, or tokens from tokenize()

    Returns:
        Tuple of (pattern, error):
        - pattern: Parsed Pattern, or None on failure
        - error: PatternLexError or PatternParseError, or None on success

    Raises:
        TypeError: If a token sequence contains non-Token items
    """
    if source is None or isinstance(source, str):
        tokens, error = tokenize(source)
        if tokens is None:
            return None, error
        text = source or ""
    else:
        tokens = tuple(source)
        for item in tokens:
            if not Token.guard(item):
                msg = f"parse() expects str or a sequence of Token, got item {type(item).__name__}"
                raise TypeError(msg)
        text = ""

    try:
        return parse_tokens(tokens, text), None
    except PatternParseError as e:
        return None, e


def validate(pattern: Pattern) -> PatternResult:
    """Check the semantic invariants of a parsed pattern.

    Returns:
        Tuple of (pattern, error):
        - pattern: The same Pattern object, or None on failure
        - error: PatternValidationError, or None on success
    """
    try:
        return validate_or_raise(pattern), None
    except PatternValidationError as e:
        return None, e


def compile_pattern(source: str | None, *, strict: bool = False) -> PatternResult:
    """Compile a CLDR decimal format pattern.

    Runs tokenize, parse and validate, stopping at the first failure.

    Args:
        source: Pattern text such as "#,##0.00;(#,##0.00)"
        strict: Raise the PatternError instead of returning it

    Returns:
        Tuple of (pattern, error):
        - pattern: Validated Pattern, or None on failure
        - error: PatternError subclass for the failed phase, or None

    Raises:
        PatternError: Only when strict=True and compilation fails

    Examples:
        >>> pattern, error = compile_pattern("#,##0.00")
        >>> pattern.positive.primary_grouping_size
        3
        >>> pattern, error = compile_pattern("xxx")
        >>> error.phase
        <ErrorPhase.VALIDATION: 'validation'>
    """
    pattern, error = parse(source)
    if pattern is not None:
        pattern, error = validate(pattern)

    if error is not None:
        logger.debug(
            "Pattern %r failed %s phase at offset %s: %s",
            source,
            error.phase,
            error.offset,
            error.message,
        )
        if strict:
            raise error
        return None, error

    logger.debug("Compiled pattern %r", source)
    return pattern, None
