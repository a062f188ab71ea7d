"""cldrdecimal - CLDR decimal number-format pattern compiler.

Compiles Unicode CLDR / ICU DecimalFormat pattern strings such as
"#,##0.00;(#,##0.00)" into immutable Pattern values that a number renderer
can use without re-reading the text.

Public API:
    compile_pattern - Tokenize, parse and validate pattern text
    tokenize - Tokenize only (diagnostics, composition with parse)
    parse - Parse text or a token stream without validating
    validate - Check semantic invariants of a parsed Pattern
    compile_cached - compile_pattern through a shared thread-safe cache
    serialize - Render a Pattern back to canonical pattern text

Every entry point returns a (value, error) pair; compile_pattern(strict=True)
raises instead.

Exceptions:
    PatternError - Base exception class
    PatternLexError - Tokenizer errors
    PatternParseError - Grammar errors
    PatternValidationError - Semantic errors

Submodules:
    cldrdecimal.syntax - Tokens, compiled nodes and each compiler stage
    cldrdecimal.diagnostics - Error codes, templates and formatting
    cldrdecimal.cache - PatternCache
    cldrdecimal.cldr - CLDR locale pattern corpus (requires Babel)
"""

from .cache import PatternCache, compile_cached
from .cache_config import CacheConfig
from .compiler import compile_pattern, parse, tokenize, validate
from .diagnostics import (
    PatternError,
    PatternLexError,
    PatternParseError,
    PatternValidationError,
)
from .enums import ErrorPhase, PadPosition, TokenKind
from .syntax import Pattern, Subpattern, Token, serialize

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("cldrdecimal")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CacheConfig",
    "ErrorPhase",
    "PadPosition",
    "Pattern",
    "PatternCache",
    "PatternError",
    "PatternLexError",
    "PatternParseError",
    "PatternValidationError",
    "Subpattern",
    "Token",
    "TokenKind",
    "__version__",
    "compile_cached",
    "compile_pattern",
    "parse",
    "serialize",
    "tokenize",
    "validate",
]
