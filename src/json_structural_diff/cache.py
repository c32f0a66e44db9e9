"""NormalizationCache: LRU-backed memo of ``normalize`` results.

Callers that re-diff on every edit usually change one side at a time.  Caching
``normalize`` by raw text means the unchanged side is served from memory and
only the edited side is parsed again.  Both successes and failures are cached;
results are immutable so sharing them is safe.

Each ``NormalizationCache`` instance maintains its own ``LRUCache``; there is
no class-level shared state, so two separate instances never interfere with
each other.

Example::

    from json_structural_diff.cache import NormalizationCache

    cache = NormalizationCache(max_size=128)
    cache.normalize('{"a": 1}')   # parsed
    cache.normalize('{"a": 1}')   # served from memory
"""

from __future__ import annotations

import logging

from cachetools import LRUCache

from json_structural_diff.result import NormalizeResult
from json_structural_diff.tree.canonicalizer import normalize

logger = logging.getLogger(__name__)


class NormalizationCache:
    """LRU-backed caching proxy around ``normalize``.

    Args:
        max_size: Maximum number of raw texts to remember.  Must be >= 1.
            When exceeded, the least-recently-used entry is silently evicted.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[str, NormalizeResult] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def normalize(self, text: str) -> NormalizeResult:
        """Return ``normalize(text)``, computing it only on a cache miss."""
        try:
            result = self._cache[text]
        except KeyError:
            result = normalize(text)
            self._cache[text] = result
        else:
            logger.debug("normalize cache hit (%d chars)", len(text))
        return result

    def clear(self) -> None:
        self._cache.clear()
