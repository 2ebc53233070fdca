"""Tests for the compiled-template LRU cache.

Python 3.13+.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from datewire.template import (
    CompiledTemplate,
    TemplateCache,
    TemplateCacheConfig,
    compile_template,
    default_cache,
    get_template,
)


class TestTemplateCacheConfig:
    """Test cache configuration validation."""

    def test_default_size(self) -> None:
        """Default capacity is 100 templates."""
        assert TemplateCache().maxsize == 100

    @pytest.mark.parametrize("maxsize", [0, -1])
    def test_rejects_non_positive(self, maxsize: int) -> None:
        """maxsize must be positive."""
        with pytest.raises(ValueError, match="maxsize must be positive"):
            TemplateCacheConfig(maxsize=maxsize)


class TestTemplateCache:
    """Test lookup, eviction, and statistics."""

    def test_miss_then_hit(self, template_cache: TemplateCache) -> None:
        """get() misses before put() and hits after."""
        assert template_cache.get("yyyy") is None
        template = compile_template("yyyy")
        template_cache.put(template)
        assert template_cache.get("yyyy") is template

        stats = template_cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50.0
        assert stats["size"] == 1

    def test_get_or_compile_returns_same_instance(self, template_cache: TemplateCache) -> None:
        """A second lookup of the same key reuses the compiled template."""
        first = template_cache.get_or_compile("yyyy-MM-dd")
        assert template_cache.get_or_compile("yyyy-MM-dd") is first
        assert len(template_cache) == 1

    def test_locale_is_part_of_key(self, template_cache: TemplateCache) -> None:
        """The same pattern in two locales is two entries."""
        english = template_cache.get_or_compile("MMMM", "en")
        french = template_cache.get_or_compile("MMMM", "fr")
        assert english is not french
        assert french.locale_code == "fr"
        assert len(template_cache) == 2

    def test_lru_eviction(self) -> None:
        """The least recently used entry is evicted first."""
        cache = TemplateCache(TemplateCacheConfig(maxsize=2))
        cache.get_or_compile("yyyy")
        cache.get_or_compile("MM")
        cache.get("yyyy")
        cache.get_or_compile("dd")

        assert len(cache) == 2
        assert cache.get("MM") is None
        assert cache.get("yyyy") is not None
        assert cache.get("dd") is not None

    def test_put_existing_key_does_not_evict(self) -> None:
        """Re-storing a key refreshes it in place."""
        cache = TemplateCache(TemplateCacheConfig(maxsize=2))
        cache.put(compile_template("yyyy"))
        cache.put(compile_template("MM"))
        cache.put(compile_template("yyyy"))
        assert len(cache) == 2
        assert cache.get("MM") is not None

    def test_clear(self, template_cache: TemplateCache) -> None:
        """clear() drops entries and resets counters."""
        template_cache.get_or_compile("yyyy")
        template_cache.get_or_compile("yyyy")
        template_cache.clear()
        assert template_cache.get_stats() == {
            "size": 0,
            "maxsize": 100,
            "hits": 0,
            "misses": 0,
            "hit_rate": 0.0,
        }

    def test_concurrent_compilation(self, template_cache: TemplateCache) -> None:
        """Concurrent callers share one instance per key."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: template_cache.get_or_compile("HH:mm"), range(32)))
        assert all(result is results[0] for result in results)
        assert len(template_cache) == 1


class TestGetTemplate:
    """Test the module-level helper."""

    def test_explicit_cache(self, template_cache: TemplateCache) -> None:
        """An explicit cache is used even while empty."""
        template = get_template("yyyy", template_cache)
        assert isinstance(template, CompiledTemplate)
        assert template_cache.get("yyyy") is template

    def test_default_cache(self) -> None:
        """Without a cache argument the module default is used."""
        template = get_template("yyyy.MM.dd")
        assert default_cache.get("yyyy.MM.dd") is template
