"""Redis implementation of TagAwareCacheProtocol.

Key Patterns:
    - {namespace}:{key} -> JSON envelope {"v": value, "e": expiry,
      "c": compute seconds, "t": tags}, with a Redis TTL equal to the
      entry lifetime
    - {namespace}:tag:{tag} -> Redis Set of entry keys carrying the tag

Invalidating a tag reads its set and deletes every member plus the set
itself in one MULTI/EXEC pipeline.

Architecture:
    - Implements TagAwareCacheProtocol (structural typing)
    - Wraps RedisError in CacheError (raised, not returned)
    - Unreadable envelopes are treated as misses and overwritten
"""

import inspect
import json
import time
from typing import Any

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from customer_service.core.errors import CacheError
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
from customer_service.infrastructure.cache.serializers import (
    JsonValueSerializer,
    ValueSerializer,
)

logger = structlog.get_logger(__name__)

_SCAN_CHUNK_SIZE = 500


class RedisTagAwareCache:
    """Redis-backed tag-aware cache.

    Note: Does NOT inherit from TagAwareCacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client.
        _serializer: Converts values to JSON-compatible data.
        _namespace: Prefix for every key this cache owns.
        _default_beta: Beta used when get() receives None.
        _metrics: Optional hit/miss tracker.
    """

    def __init__(
        self,
        redis_client: Redis,
        *,
        serializer: ValueSerializer | None = None,
        namespace: str = "customer-service",
        default_beta: float = DEFAULT_BETA,
        metrics: CacheMetrics | None = None,
    ) -> None:
        """Initialize Redis tag-aware cache.

        Args:
            redis_client: Async Redis client instance.
            serializer: Value serializer (defaults to identity JSON).
            namespace: Key prefix shared by entries and tag sets.
            default_beta: Early recomputation weight when get() gets None.
            metrics: Optional cache metrics tracker.
        """
        self._redis = redis_client
        self._serializer = serializer or JsonValueSerializer()
        self._namespace = namespace
        self._default_beta = default_beta
        self._metrics = metrics

    def _entry_key(self, key: str) -> str:
        return f"{self._namespace}:{key}"

    def _tag_key(self, tag: str) -> str:
        return f"{self._namespace}:tag:{tag}"

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

        Raises:
            CacheError: If Redis fails while reading or writing.
        """
        effective_beta = self._default_beta if beta is None else beta
        entry = await self._read(key)
        now = time.time()

        if (
            entry is not None
            and not entry.is_expired(now)
            and not entry.should_recompute_early(now, effective_beta)
        ):
            self._record("hit", key)
            return entry.value

        self._record("miss", key)
        item = CacheItem(key)
        started = time.time()
        value = compute(item)
        if inspect.isawaitable(value):
            value = await value
        ctime = time.time() - started

        await self._write(item, value, ctime)
        return value

    async def invalidate_tags(self, tags: list[str]) -> bool:
        """Delete every entry carrying any of the tags, and the tag sets.

        Args:
            tags: Tag names.

        Returns:
            True on success.

        Raises:
            CacheError: If Redis fails.
        """
        if not tags:
            return True
        tag_keys = [self._tag_key(tag) for tag in tags]
        try:
            members: set[Any] = set()
            for tag_key in tag_keys:
                members.update(await self._redis.smembers(tag_key))

            async with self._redis.pipeline(transaction=True) as pipe:
                if members:
                    pipe.delete(*members)
                pipe.delete(*tag_keys)
                await pipe.execute()
        except RedisError as e:
            self._record("error", tags[0])
            raise CacheError(
                f"Failed to invalidate cache tags: {e}", tags=list(tags)
            ) from e

        if self._metrics is not None:
            for tag in tags:
                self._metrics.record_invalidation(namespace_from_key(tag))
        logger.debug("cache_tags_invalidated", tags=list(tags), entries=len(members))
        return True

    async def delete(self, key: str) -> bool:
        """Delete a single entry.

        Returns:
            True if the key existed.

        Raises:
            CacheError: If Redis fails.
        """
        try:
            deleted = await self._redis.delete(self._entry_key(key))
        except RedisError as e:
            self._record("error", key)
            raise CacheError(f"Failed to delete key '{key}': {e}", key=key) from e
        return deleted > 0

    async def clear(self) -> None:
        """Remove every key under this cache's namespace.

        Uses SCAN + batched UNLINK so the server is never blocked by KEYS.

        Raises:
            CacheError: If Redis fails.
        """
        try:
            chunk: list[Any] = []
            async for key in self._redis.scan_iter(
                match=f"{self._namespace}:*", count=_SCAN_CHUNK_SIZE
            ):
                chunk.append(key)
                if len(chunk) >= _SCAN_CHUNK_SIZE:
                    await self._redis.unlink(*chunk)
                    chunk = []
            if chunk:
                await self._redis.unlink(*chunk)
        except RedisError as e:
            raise CacheError(f"Failed to clear cache namespace: {e}") from e

    async def _read(self, key: str) -> StoredEntry | None:
        try:
            raw = await self._redis.get(self._entry_key(key))
        except RedisError as e:
            self._record("error", key)
            raise CacheError(f"Failed to get key '{key}' from cache: {e}", key=key) from e

        if raw is None:
            return None
        try:
            envelope = json.loads(raw)
            return StoredEntry(
                value=self._serializer.loads(envelope["v"]),
                expiry=envelope["e"],
                ctime=envelope["c"],
                tags=tuple(envelope["t"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("cache_entry_unreadable", cache_key=key, error=str(e))
            return None

    async def _write(self, item: CacheItem, value: Any, ctime: float) -> None:
        entry_key = self._entry_key(item.key)
        try:
            envelope = json.dumps(
                {
                    "v": self._serializer.dumps(value),
                    "e": compute_expiry(item.ttl),
                    "c": ctime,
                    "t": item.tags,
                }
            )
        except (TypeError, ValueError) as e:
            raise CacheError(
                f"Failed to serialize value for key '{item.key}': {e}", key=item.key
            ) from e

        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                pipe.set(entry_key, envelope, ex=item.ttl)
                for tag in item.tags:
                    tag_key = self._tag_key(tag)
                    pipe.sadd(tag_key, entry_key)
                    if item.ttl is not None:
                        # Tag sets live as long as their longest-lived member.
                        pipe.expire(tag_key, item.ttl, nx=True)
                        pipe.expire(tag_key, item.ttl, gt=True)
                await pipe.execute()
        except RedisError as e:
            self._record("error", item.key)
            raise CacheError(
                f"Failed to set key '{item.key}' in cache: {e}", key=item.key
            ) from e

    def _record(self, outcome: str, key: str) -> None:
        if self._metrics is None:
            return
        namespace = namespace_from_key(key)
        match outcome:
            case "hit":
                self._metrics.record_hit(namespace)
            case "miss":
                self._metrics.record_miss(namespace)
            case _:
                self._metrics.record_error(namespace)
