"""Pattern syntax package.

Provides the tokenizer, token and node definitions, parser, validator and
serializer. Each stage raises its own PatternError subclass; the
cldrdecimal.compiler module turns those into (value, error) results.

Python 3.13+.
"""

from .ast import Pattern, Span, Subpattern, affix_text
from .cursor import Cursor
from .lexer import PatternTokenizer, tokenize_or_raise
from .parser import PatternParser, parse_tokens
from .serializer import SerializationError, serialize
from .tokens import Token
from .validator import PatternValidator, validate_or_raise

__all__ = [
    "Cursor",
    "Pattern",
    "PatternParser",
    "PatternTokenizer",
    "PatternValidator",
    "SerializationError",
    "Span",
    "Subpattern",
    "Token",
    "affix_text",
    "parse_tokens",
    "serialize",
    "tokenize_or_raise",
    "validate_or_raise",
]
