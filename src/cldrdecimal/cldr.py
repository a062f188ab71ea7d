"""CLDR decimal format patterns from Babel locale data.

Reads the standard number patterns each locale publishes (decimal, percent,
scientific, currency and accounting) and compiles them. Compact patterns
such as "0K" are a different grammar and are not included.

Requires the optional Babel extra:
    pip install cldrdecimal[babel]

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cldrdecimal.cache import compile_cached
from cldrdecimal.core.babel_compat import (
    get_babel_localedata,
    get_locale_class,
    get_unknown_locale_error,
    require_babel,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from babel import Locale
    from babel.numbers import NumberPattern

    from cldrdecimal.syntax.ast import Pattern

__all__ = [
    "PATTERN_KINDS",
    "compile_locale_patterns",
    "decimal_format_list",
    "locale_patterns",
]

logger = logging.getLogger(__name__)

PATTERN_KINDS: tuple[str, ...] = ("decimal", "percent", "scientific", "currency", "accounting")


def _pattern_text(formats: Mapping[str | None, NumberPattern], key: str | None) -> str | None:
    number_pattern = formats.get(key)
    if number_pattern is None:
        return None
    return number_pattern.pattern


def _read_patterns(locale: Locale) -> dict[str, str]:
    sources = {
        "decimal": (locale.decimal_formats, None),
        "percent": (locale.percent_formats, None),
        "scientific": (locale.scientific_formats, None),
        "currency": (locale.currency_formats, "standard"),
        "accounting": (locale.currency_formats, "accounting"),
    }
    patterns: dict[str, str] = {}
    for kind, (formats, key) in sources.items():
        text = _pattern_text(formats, key)
        if text is not None:
            patterns[kind] = text
    return patterns


def locale_patterns(locale_code: str) -> dict[str, str]:
    """Pattern text for each pattern kind a locale defines.

    Args:
        locale_code: Locale identifier such as "en_US" or "de-CH"

    Returns:
        Mapping of kind ("decimal", "percent", ...) to pattern text.
        Kinds the locale does not define are absent.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If Babel has no data for the locale

    Example:
        >>> locale_patterns("en")["accounting"]
        '¤#,##0.00;(¤#,##0.00)'
    """
    require_babel("locale_patterns")
    locale_class = get_locale_class()
    locale = locale_class.parse(locale_code.replace("-", "_"))
    return _read_patterns(locale)


def decimal_format_list() -> tuple[str, ...]:
    """Every distinct pattern string across all Babel locales, sorted.

    Locales Babel lists but cannot load are skipped with a WARNING.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("decimal_format_list")
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()

    seen: set[str] = set()
    for identifier in get_babel_localedata().locale_identifiers():
        try:
            locale = locale_class.parse(identifier)
        except (unknown_locale_error, ValueError) as e:
            logger.warning("Skipping locale %s: %s", identifier, e)
            continue
        seen.update(_read_patterns(locale).values())
    return tuple(sorted(seen))


def compile_locale_patterns(locale_code: str) -> dict[str, Pattern]:
    """Compile every pattern a locale defines.

    Patterns that fail to compile are logged at WARNING and left out of
    the result.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If Babel has no data for the locale
    """
    compiled: dict[str, Pattern] = {}
    for kind, text in locale_patterns(locale_code).items():
        pattern, error = compile_cached(text)
        if pattern is None:
            logger.warning(
                "Skipping %s pattern %r for locale %s: %s", kind, text, locale_code, error
            )
            continue
        compiled[kind] = pattern
    return compiled
