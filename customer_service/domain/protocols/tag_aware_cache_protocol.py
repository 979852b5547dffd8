"""Tag-aware cache protocol (port).

A get-or-compute cache whose entries carry tags. Writers never delete
entries by key; they invalidate tags, which evicts every entry carrying
any of them.

Architecture:
    - Protocol-based (structural typing)
    - Adapters: InMemoryTagAwareCache, RedisTagAwareCache
    - Failures are raised as CacheError (callers choose fallback or abort)
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Protocol


class CacheItemProtocol(Protocol):
    """Handle passed to a compute function on cache miss.

    The compute function configures the entry it is about to produce.
    """

    @property
    def key(self) -> str:
        """Cache key of the entry being computed."""
        ...

    def expires_after(self, seconds: int | None) -> "CacheItemProtocol":
        """Set the entry lifetime in seconds (None = no expiration)."""
        ...

    def tag(self, tags: str | Iterable[str]) -> "CacheItemProtocol":
        """Attach one or more tags to the entry."""
        ...


ComputeFn = Callable[[CacheItemProtocol], Any | Awaitable[Any]]
"""Compute function: sync or async, receives the item handle, returns the value."""


class TagAwareCacheProtocol(Protocol):
    """Cache protocol - what the repository decorator and subscribers need."""

    async def get(
        self,
        key: str,
        compute: ComputeFn,
        beta: float | None = None,
    ) -> Any:
        """Return the cached value for key, computing and storing it on miss.

        Args:
            key: Cache key.
            compute: Called only on miss (or early recomputation).
            beta: Early recomputation weight. 0 disables it, None uses the
                adapter default (1.0), float("inf") forces recomputation.

        Returns:
            Cached or freshly computed value.

        Raises:
            CacheError: If the cache backend fails.
            Exception: Whatever ``compute`` raised (nothing is stored).
        """
        ...

    async def invalidate_tags(self, tags: list[str]) -> bool:
        """Evict every entry tagged with any of ``tags``.

        Args:
            tags: Tag names.

        Returns:
            True on success.

        Raises:
            CacheError: If the cache backend fails.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a single entry.

        Returns:
            True if the key existed.
        """
        ...

    async def clear(self) -> None:
        """Remove every entry and tag index owned by this cache."""
        ...
