"""Thread-safe compute-once cache of compiled patterns.

The same handful of pattern strings recurs across hundreds of locales and
currencies, so callers that compile per locale should go through a cache.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict
    - Keys are pattern strings; values are (pattern, error) results
    - Compilation runs while the lock is held, so each key is compiled at
      most once and readers only ever see finished entries

Python 3.13+.
"""

import logging
from collections import OrderedDict
from threading import RLock

from cldrdecimal.cache_config import CacheConfig
from cldrdecimal.compiler import PatternResult, compile_pattern

__all__ = ["PatternCache", "compile_cached", "get_default_cache"]

logger = logging.getLogger(__name__)


class PatternCache:
    """Thread-safe LRU cache for compile_pattern() results.

    Attributes:
        maxsize: Maximum number of cache entries
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_config", "_hits", "_lock", "_misses")

    def __init__(self, config: CacheConfig | None = None) -> None:
        """Initialize pattern cache.

        Args:
            config: Cache configuration (default: CacheConfig())
        """
        self._config = config if config is not None else CacheConfig()
        self._cache: OrderedDict[str, PatternResult] = OrderedDict()
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get_or_compile(self, source: str | None) -> PatternResult:
        """Return the cached result for source, compiling it on first use.

        Thread-safe. Returns exactly what compile_pattern(source) returns.
        None is never cached.

        Args:
            source: Pattern text

        Returns:
            Tuple of (pattern, error) as from compile_pattern()
        """
        if source is None:
            return compile_pattern(source)

        with self._lock:
            cached = self._cache.get(source)
            if cached is not None:
                self._cache.move_to_end(source)
                self._hits += 1
                return cached

            self._misses += 1
            result = compile_pattern(source)
            pattern, _ = result
            if pattern is not None or self._config.cache_errors:
                if len(self._cache) >= self._config.size:
                    evicted, _ = self._cache.popitem(last=False)
                    logger.debug("Evicted pattern %r from cache", evicted)
                self._cache[source] = result
            return result

    def clear(self) -> None:
        """Clear all cached entries and reset metrics. Thread-safe."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - maxsize (int): Maximum cache capacity
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._cache),
                "maxsize": self._config.size,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, source: object) -> bool:
        with self._lock:
            return source in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._config.size

    @property
    def hits(self) -> int:
        """Number of cache hits. Thread-safe."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses. Thread-safe."""
        with self._lock:
            return self._misses


_default_cache = PatternCache()


def get_default_cache() -> PatternCache:
    """Process-wide cache used by compile_cached()."""
    return _default_cache


def compile_cached(source: str | None) -> PatternResult:
    """Compile through the process-wide cache.

    Example:
        >>> first, _ = compile_cached("#,##0.###")
        >>> second, _ = compile_cached("#,##0.###")
        >>> first is second
        True
    """
    return _default_cache.get_or_compile(source)
