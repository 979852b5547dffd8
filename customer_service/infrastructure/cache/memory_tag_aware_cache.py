"""In-memory implementation of TagAwareCacheProtocol.

Single-process tag-aware cache for development, tests, and deployments
without Redis. Keeps a tag -> keys index so invalidating a tag evicts every
entry that carries it.

Architecture:
    - Implements TagAwareCacheProtocol (structural typing)
    - Values deep-copied on store and on hit, like a serializing backend
    - Expiry checked lazily on read
    - Probabilistic early recomputation (XFetch) controlled by beta
"""

import copy
import inspect
import time
from collections import defaultdict
from typing import Any

from customer_service.domain.protocols.tag_aware_cache_protocol import ComputeFn
from customer_service.infrastructure.cache.cache_item import (
    DEFAULT_BETA,
    CacheItem,
    StoredEntry,
    compute_expiry,
)
from customer_service.infrastructure.cache.cache_metrics import (
    CacheMetrics,
    namespace_from_key,
)


class InMemoryTagAwareCache:
    """Dictionary-backed tag-aware cache.

    Note: Does NOT inherit from TagAwareCacheProtocol (uses structural typing).
    NOT thread-safe; intended for a single event loop.

    Attributes:
        _entries: Key -> stored entry.
        _tag_index: Tag -> keys carrying it.
        _default_beta: Beta used when get() receives None.
        _metrics: Optional hit/miss tracker.
    """

    def __init__(
        self,
        *,
        default_beta: float = DEFAULT_BETA,
        metrics: CacheMetrics | None = None,
    ) -> None:
        self._entries: dict[str, StoredEntry] = {}
        self._tag_index: dict[str, set[str]] = defaultdict(set)
        self._default_beta = default_beta
        self._metrics = metrics

    async def get(
        self,
        key: str,
        compute: ComputeFn,
        beta: float | None = None,
    ) -> Any:
        """Return cached value or compute, tag and store it.

        Args:
            key: Cache key.
            compute: Called with a CacheItem on miss.
            beta: Early recomputation weight (None = adapter default).

        Returns:
            Cached or computed value.
        """
        now = time.time()
        effective_beta = self._default_beta if beta is None else beta
        entry = self._entries.get(key)

        if entry is not None and entry.is_expired(now):
            self._evict(key)
            entry = None

        if entry is not None and not entry.should_recompute_early(now, effective_beta):
            self._record("hit", key)
            return copy.deepcopy(entry.value)

        self._record("miss", key)
        item = CacheItem(key)
        started = time.time()
        value = compute(item)
        if inspect.isawaitable(value):
            value = await value
        ctime = time.time() - started

        self._store(item, value, ctime)
        return value

    async def invalidate_tags(self, tags: list[str]) -> bool:
        """Evict every entry carrying any of the tags.

        Args:
            tags: Tag names.

        Returns:
            True (in-memory invalidation cannot fail).
        """
        for tag in tags:
            for key in self._tag_index.pop(tag, set()):
                self._evict(key)
            if self._metrics is not None:
                self._metrics.record_invalidation(namespace_from_key(tag))
        return True

    async def delete(self, key: str) -> bool:
        """Delete a single entry.

        Returns:
            True if the key existed.
        """
        return self._evict(key)

    async def clear(self) -> None:
        """Remove all entries and tag indexes."""
        self._entries.clear()
        self._tag_index.clear()

    def has(self, key: str) -> bool:
        """True if a non-expired entry exists for key (does not compute)."""
        entry = self._entries.get(key)
        return entry is not None and not entry.is_expired(time.time())

    def tags_of(self, key: str) -> tuple[str, ...]:
        """Tags attached to the entry for key (empty if absent)."""
        entry = self._entries.get(key)
        return entry.tags if entry is not None else ()

    def _store(self, item: CacheItem, value: Any, ctime: float) -> None:
        self._evict(item.key)
        self._entries[item.key] = StoredEntry(
            value=copy.deepcopy(value),
            expiry=compute_expiry(item.ttl),
            ctime=ctime,
            tags=tuple(item.tags),
        )
        for tag in item.tags:
            self._tag_index[tag].add(item.key)

    def _evict(self, key: str) -> bool:
        entry = self._entries.pop(key, None)
        if entry is None:
            return False
        for tag in entry.tags:
            keys = self._tag_index.get(tag)
            if keys is not None:
                keys.discard(key)
                if not keys:
                    del self._tag_index[tag]
        return True

    def _record(self, outcome: str, key: str) -> None:
        if self._metrics is None:
            return
        namespace = namespace_from_key(key)
        if outcome == "hit":
            self._metrics.record_hit(namespace)
        else:
            self._metrics.record_miss(namespace)
