"""Unit tests for NormalizationCache.

Tests cover:
- Cache hits (repeated text bypasses normalize on the second call)
- Failures are cached too
- LRU eviction (silent eviction at max_size; evicted texts re-normalize)
- Instance isolation (separate caches do not share state)
- Properties (max_size and curr_size)
- max_size validation
"""

from __future__ import annotations

import pytest

import json_structural_diff.cache as cache_module
from json_structural_diff.cache import NormalizationCache
from json_structural_diff.result import NormalizeError, Normalized, NormalizeResult

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


@pytest.fixture
def call_log(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Wrap the cache module's normalize with a spy that records its inputs."""
    log: list[str] = []
    original = cache_module.normalize

    def spy(text: str) -> NormalizeResult:
        log.append(text)
        return original(text)

    monkeypatch.setattr(cache_module, "normalize", spy)
    return log


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCacheHits:
    def test_second_lookup_served_from_cache(self, call_log: list[str]) -> None:
        cache = NormalizationCache()
        first = cache.normalize('{"a": 1}')
        second = cache.normalize('{"a": 1}')
        assert call_log == ['{"a": 1}']
        assert first is second
        assert first == Normalized('{\n  "a": 1\n}')

    def test_errors_are_cached(self, call_log: list[str]) -> None:
        cache = NormalizationCache()
        assert isinstance(cache.normalize("{"), NormalizeError)
        assert isinstance(cache.normalize("{"), NormalizeError)
        assert call_log == ["{"]

    def test_texts_differing_in_whitespace_are_separate_entries(
        self, call_log: list[str]
    ) -> None:
        cache = NormalizationCache()
        assert cache.normalize("1") == cache.normalize(" 1 ")
        assert len(call_log) == 2


class TestEviction:
    def test_lru_eviction(self, call_log: list[str]) -> None:
        cache = NormalizationCache(max_size=2)
        cache.normalize("1")
        cache.normalize("2")
        cache.normalize("1")  # refresh "1"; "2" is now least recently used
        cache.normalize("3")  # evicts "2"
        assert cache.curr_size == 2
        call_log.clear()

        cache.normalize("1")
        assert call_log == []
        cache.normalize("2")
        assert call_log == ["2"]

    def test_clear(self) -> None:
        cache = NormalizationCache()
        cache.normalize("1")
        cache.clear()
        assert cache.curr_size == 0


class TestIsolationAndProperties:
    def test_instances_do_not_share_state(self) -> None:
        a = NormalizationCache()
        b = NormalizationCache()
        a.normalize("true")
        assert a.curr_size == 1
        assert b.curr_size == 0

    def test_max_size_property(self) -> None:
        assert NormalizationCache(max_size=7).max_size == 7

    def test_default_max_size(self) -> None:
        assert NormalizationCache().max_size == 128

    @pytest.mark.parametrize("bad", [0, -1])
    def test_invalid_max_size(self, bad: int) -> None:
        with pytest.raises(ValueError, match="max_size must be >= 1"):
            NormalizationCache(max_size=bad)
