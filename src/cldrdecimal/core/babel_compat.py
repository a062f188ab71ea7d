"""Babel compatibility layer for optional dependency handling.

Babel is the only source of CLDR locale data in cldrdecimal, and only the
cldrdecimal.cldr module needs it. The compiler itself never imports Babel.

Installation modes:
    - Compiler only: `pip install cldrdecimal` (no external dependencies)
    - Locale corpus: `pip install cldrdecimal[babel]`

Usage Pattern:
    from cldrdecimal.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises ImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


class BabelLocaleDataProtocol(Protocol):
    """Subset of the babel.localedata API used to enumerate locales."""

    def locale_identifiers(self) -> list[str]:
        """Identifiers of every locale with CLDR data."""
        ...  # pylint: disable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelLocaleDataProtocol",
    "get_babel_localedata",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Carries the name of the feature that needed Babel and an install hint.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install cldrdecimal[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses the cached result to avoid repeated import attempts.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_localedata() -> BabelLocaleDataProtocol:
    """Get the babel.localedata module.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_localedata")
    from babel import localedata  # noqa: PLC0415

    return localedata
