"""Shared constants for cldrdecimal.

This module provides centralized configuration constants used across the
syntax layer and the compile API. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern alphabet: Characters with structural meaning outside quotes
- Multipliers: Scale factors implied by percent and permille signs
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for the compiled pattern cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern alphabet
    "QUOTE",
    "PAD_ESCAPE_CHAR",
    "CURRENCY_SIGN",
    "MAX_CURRENCY_RUN",
    "STRUCTURAL_CHARS",
    # Multipliers
    "MULTIPLIER_NONE",
    "MULTIPLIER_PERCENT",
    "MULTIPLIER_PERMILLE",
    "VALID_MULTIPLIERS",
    # Input limits
    "MAX_PATTERN_LENGTH",
    # Cache limits
    "DEFAULT_CACHE_SIZE",
]

# ============================================================================
# PATTERN ALPHABET
# ============================================================================

QUOTE: str = "'"
PAD_ESCAPE_CHAR: str = "*"
CURRENCY_SIGN: str = "\u00a4"

# CLDR defines currency sign runs of one to four characters
# (symbol, ISO code, display name, narrow symbol). Longer runs are capped.
MAX_CURRENCY_RUN: int = 4

# Characters that terminate a run of unquoted literal text.
# The apostrophe and the pad escape are included: both change tokenizer state.
STRUCTURAL_CHARS: frozenset[str] = frozenset("0#@,.%‰¤E+-;*'")

# ============================================================================
# MULTIPLIERS
# ============================================================================

MULTIPLIER_NONE: int = 1
MULTIPLIER_PERCENT: int = 100
MULTIPLIER_PERMILLE: int = 1000
VALID_MULTIPLIERS: frozenset[int] = frozenset(
    {MULTIPLIER_NONE, MULTIPLIER_PERCENT, MULTIPLIER_PERMILLE}
)

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest CLDR decimal pattern in the shipped data is well under 100
# characters. 1000 leaves ample room for custom patterns while bounding the
# work a single compile call can do.
MAX_PATTERN_LENGTH: int = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Distinct decimal, percent, currency and scientific patterns across all CLDR
# locales number a few hundred, so the default holds the full corpus.
DEFAULT_CACHE_SIZE: int = 1024
