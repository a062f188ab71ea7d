"""Cache configuration for PatternCache.

Provides a single frozen dataclass that encapsulates all cache-related
parameters.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from cldrdecimal.constants import DEFAULT_CACHE_SIZE

__all__ = ["CacheConfig"]


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Immutable configuration for compiled pattern caching.

    All fields have sensible defaults; constructing ``CacheConfig()`` with
    no arguments produces a usable configuration.

    Attributes:
        size: Maximum cache entries (default: 1024).
        cache_errors: Also remember failed compilations (default: True).
            Compilation is deterministic, so a failure for a given pattern
            text is as stable as a success.

    Example:
        >>> from cldrdecimal.cache import PatternCache
        >>> cache = PatternCache(CacheConfig(size=64))
        >>> cache.maxsize
        64
    """

    size: int = DEFAULT_CACHE_SIZE
    cache_errors: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If size is not positive.
        """
        if self.size <= 0:
            msg = "size must be positive"
            raise ValueError(msg)
