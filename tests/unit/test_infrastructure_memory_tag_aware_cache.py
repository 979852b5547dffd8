"""Unit tests for InMemoryTagAwareCache.

Tests cover:
- Compute on miss, serve on hit
- Sync and async compute functions
- TTL expiry (freezegun)
- Tag invalidation
- Early recomputation (beta)
- Metrics recording
"""

from datetime import timedelta

import pytest
from freezegun import freeze_time

from customer_service.infrastructure.cache.cache_metrics import CacheMetrics
from customer_service.infrastructure.cache.memory_tag_aware_cache import (
    InMemoryTagAwareCache,
)


class Counter:
    """Compute function counting its calls."""

    def __init__(self, value="value", ttl=60, tags=("customer",)):
        self.calls = 0
        self.value = value
        self.ttl = ttl
        self.tags = list(tags)

    def __call__(self, item):
        self.calls += 1
        item.expires_after(self.ttl)
        item.tag(self.tags)
        return self.value


@pytest.mark.unit
class TestGet:
    async def test_miss_computes_and_hit_serves_cached_value(self):
        cache = InMemoryTagAwareCache()
        compute = Counter()

        first = await cache.get("customer.1", compute)
        second = await cache.get("customer.1", compute)

        assert first == second == "value"
        assert compute.calls == 1

    async def test_async_compute_is_awaited(self):
        cache = InMemoryTagAwareCache()

        async def compute(item):
            item.expires_after(10)
            return {"id": 1}

        assert await cache.get("k", compute) == {"id": 1}
        assert cache.has("k")

    async def test_none_is_cached(self):
        cache = InMemoryTagAwareCache()
        compute = Counter(value=None)

        await cache.get("customer.missing", compute)
        await cache.get("customer.missing", compute)

        assert compute.calls == 1

    async def test_compute_error_propagates_and_nothing_is_stored(self):
        cache = InMemoryTagAwareCache()

        def compute(item):
            raise RuntimeError("db down")

        with pytest.raises(RuntimeError):
            await cache.get("k", compute)
        assert not cache.has("k")

    async def test_tags_recorded_on_entry(self):
        cache = InMemoryTagAwareCache()

        await cache.get("customer.1", Counter(tags=["customer", "customer.1"]))

        assert cache.tags_of("customer.1") == ("customer", "customer.1")


@pytest.mark.unit
class TestExpiry:
    async def test_entry_expires_after_ttl(self):
        cache = InMemoryTagAwareCache()
        compute = Counter(ttl=600)

        with freeze_time("2026-01-01 12:00:00") as frozen:
            await cache.get("customer.1", compute)
            frozen.tick(timedelta(seconds=599))
            await cache.get("customer.1", compute)
            assert compute.calls == 1

            frozen.tick(timedelta(seconds=1))
            await cache.get("customer.1", compute)

        assert compute.calls == 2

    async def test_entry_without_ttl_never_expires(self):
        cache = InMemoryTagAwareCache()
        compute = Counter(ttl=None)

        with freeze_time("2026-01-01") as frozen:
            await cache.get("k", compute)
            frozen.tick(timedelta(days=365))
            await cache.get("k", compute)

        assert compute.calls == 1


@pytest.mark.unit
class TestInvalidation:
    async def test_invalidate_tag_evicts_all_tagged_entries(self):
        cache = InMemoryTagAwareCache()
        await cache.get("customer.1", Counter(tags=["customer", "customer.1"]))
        await cache.get("customer.2", Counter(tags=["customer", "customer.2"]))

        result = await cache.invalidate_tags(["customer"])

        assert result is True
        assert not cache.has("customer.1")
        assert not cache.has("customer.2")

    async def test_invalidate_leaves_untagged_entries(self):
        cache = InMemoryTagAwareCache()
        await cache.get("customer.1", Counter(tags=["customer.1"]))
        await cache.get("customer.2", Counter(tags=["customer.2"]))

        await cache.invalidate_tags(["customer.1"])

        assert not cache.has("customer.1")
        assert cache.has("customer.2")

    async def test_invalidate_unknown_tag_is_noop(self):
        cache = InMemoryTagAwareCache()

        assert await cache.invalidate_tags(["nothing"]) is True

    async def test_recompute_after_invalidation(self):
        cache = InMemoryTagAwareCache()
        compute = Counter(tags=["customer.1"])
        await cache.get("customer.1", compute)

        await cache.invalidate_tags(["customer.1"])
        await cache.get("customer.1", compute)

        assert compute.calls == 2

    async def test_delete_and_clear(self):
        cache = InMemoryTagAwareCache()
        await cache.get("a", Counter())
        await cache.get("b", Counter())

        assert await cache.delete("a") is True
        assert await cache.delete("a") is False
        await cache.clear()
        assert not cache.has("b")


@pytest.mark.unit
class TestEarlyRecompute:
    async def test_infinite_beta_always_recomputes(self):
        cache = InMemoryTagAwareCache()
        compute = Counter()

        await cache.get("k", compute)
        await cache.get("k", compute, beta=float("inf"))

        assert compute.calls == 2

    async def test_zero_beta_never_recomputes_early(self):
        cache = InMemoryTagAwareCache()
        compute = Counter()

        await cache.get("k", compute)
        for _ in range(5):
            await cache.get("k", compute, beta=0)

        assert compute.calls == 1


@pytest.mark.unit
class TestMetrics:
    async def test_hits_misses_and_invalidations_recorded(self):
        metrics = CacheMetrics()
        cache = InMemoryTagAwareCache(metrics=metrics)

        await cache.get("customer.1", Counter(tags=["customer"]))
        await cache.get("customer.1", Counter(tags=["customer"]))
        await cache.invalidate_tags(["customer"])

        stats = metrics.get_stats("customer")
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["invalidations"] == 1


@pytest.mark.unit
class TestValueIsolation:
    async def test_mutating_computed_value_does_not_change_cache(self):
        cache = InMemoryTagAwareCache()
        computed = await cache.get("k", Counter(value={"initials": "JD"}))

        computed["initials"] = "ZZ"

        assert await cache.get("k", Counter()) == {"initials": "JD"}

    async def test_mutating_hit_does_not_change_cache(self):
        cache = InMemoryTagAwareCache()
        await cache.get("k", Counter(value={"initials": "JD"}))

        hit = await cache.get("k", Counter())
        hit["initials"] = "ZZ"

        assert await cache.get("k", Counter()) == {"initials": "JD"}
