"""Thread-safe LRU cache for compiled pattern templates.

Architecture:
    - Thread-safe using threading.RLock (reentrant lock)
    - LRU eviction via OrderedDict, one entry at a time
    - Cache key is (pattern, locale_code)
    - Eviction only costs a recompilation; templates are pure

A module-level default cache backs get_template(). Callers that need
isolation (tests, per-tenant limits) pass their own TemplateCache.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock

from datewire.constants import DEFAULT_LOCALE, DEFAULT_TEMPLATE_CACHE_SIZE

from .compiler import CompiledTemplate, compile_template

__all__ = [
    "TemplateCache",
    "TemplateCacheConfig",
    "default_cache",
    "get_template",
]

logger = logging.getLogger(__name__)

type _CacheKey = tuple[str, str]


@dataclass(frozen=True, slots=True)
class TemplateCacheConfig:
    """Template cache settings.

    Attributes:
        maxsize: Maximum number of compiled templates kept (must be positive)
    """

    maxsize: int = DEFAULT_TEMPLATE_CACHE_SIZE

    def __post_init__(self) -> None:
        if self.maxsize <= 0:
            msg = f"maxsize must be positive, got {self.maxsize}"
            raise ValueError(msg)


class TemplateCache:
    """Thread-safe LRU cache of CompiledTemplate instances.

    Transparent to caller - get() returns None on cache miss.

    Example:
        >>> cache = TemplateCache(TemplateCacheConfig(maxsize=2))
        >>> template = cache.get_or_compile("yyyy-MM-dd")
        >>> cache.get_or_compile("yyyy-MM-dd") is template
        True
    """

    __slots__ = ("_cache", "_hits", "_lock", "_maxsize", "_misses")

    def __init__(self, config: TemplateCacheConfig | None = None) -> None:
        """Initialize template cache.

        Args:
            config: Cache settings (default: DEFAULT_TEMPLATE_CACHE_SIZE entries)
        """
        config = config or TemplateCacheConfig()
        self._cache: OrderedDict[_CacheKey, CompiledTemplate] = OrderedDict()
        self._maxsize = config.maxsize
        self._lock = RLock()
        self._hits = 0
        self._misses = 0

    def get(self, pattern: str, locale_code: str = DEFAULT_LOCALE) -> CompiledTemplate | None:
        """Get a cached template, or None on miss. Thread-safe."""
        key = (pattern, locale_code)
        with self._lock:
            if key in self._cache:
                # Move to end (mark as recently used)
                self._cache.move_to_end(key)
                self._hits += 1
                return self._cache[key]
            self._misses += 1
            return None

    def put(self, template: CompiledTemplate) -> None:
        """Store a template. Thread-safe. Evicts the LRU entry if full."""
        key = (template.pattern, template.locale_code)
        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
            elif len(self._cache) >= self._maxsize:
                evicted, _ = self._cache.popitem(last=False)
                logger.debug("Evicted template %r (locale %s)", evicted[0], evicted[1])
            self._cache[key] = template

    def get_or_compile(
        self, pattern: str, locale_code: str = DEFAULT_LOCALE
    ) -> CompiledTemplate:
        """Return the cached template, compiling and storing it on miss.

        The lock is held across compilation so that concurrent callers
        observe a single instance per key.

        Raises:
            TemplateError: When the pattern does not compile
        """
        with self._lock:
            template = self.get(pattern, locale_code)
            if template is None:
                template = compile_template(pattern, locale_code=locale_code)
                self.put(template)
            return template

    def clear(self) -> None:
        """Clear all cached entries and reset metrics. Thread-safe."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached templates
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
                "maxsize": self._maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Maximum cache size."""
        return self._maxsize


default_cache = TemplateCache()


def get_template(
    pattern: str,
    cache: TemplateCache | None = None,
    *,
    locale_code: str = DEFAULT_LOCALE,
) -> CompiledTemplate:
    """Return the compiled template for a pattern, using a cache.

    Args:
        pattern: Date pattern text
        cache: Cache to use (default: module-level default_cache)
        locale_code: Locale of month and weekday names

    Example:
        >>> get_template("yyyy-MM-dd") is get_template("yyyy-MM-dd")
        True
    """
    target = cache if cache is not None else default_cache
    return target.get_or_compile(pattern, locale_code)
