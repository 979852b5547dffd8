"""Cache item handle passed to compute functions.

Collects the lifetime and tags a compute function chooses for the entry it
produces. Adapters read them back after the compute function returns.
"""

import math
import random
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

DEFAULT_BETA = 1.0


class CacheItem:
    """Mutable handle for an entry being computed.

    Implements CacheItemProtocol (structural typing).

    Attributes:
        key: Cache key of the entry.
        ttl: Lifetime in seconds set via expires_after (None = no expiry).
        tags: Tags attached via tag(), in insertion order.
    """

    def __init__(self, key: str) -> None:
        self._key = key
        self.ttl: int | None = None
        self.tags: list[str] = []

    @property
    def key(self) -> str:
        """Cache key of the entry being computed."""
        return self._key

    def expires_after(self, seconds: int | None) -> "CacheItem":
        """Set the entry lifetime.

        Args:
            seconds: Lifetime in seconds, None for no expiration.

        Returns:
            Self, for chaining.

        Raises:
            ValueError: If seconds is not positive.
        """
        if seconds is not None and seconds <= 0:
            raise ValueError("Cache lifetime must be a positive number of seconds")
        self.ttl = seconds
        return self

    def tag(self, tags: str | Iterable[str]) -> "CacheItem":
        """Attach tags to the entry (duplicates ignored).

        Args:
            tags: One tag or an iterable of tags.

        Returns:
            Self, for chaining.
        """
        for tag in [tags] if isinstance(tags, str) else tags:
            if not tag:
                raise ValueError("Cache tags must be non-empty strings")
            if tag not in self.tags:
                self.tags.append(tag)
        return self


@dataclass(slots=True)
class StoredEntry:
    """Entry as kept by a cache adapter.

    Attributes:
        value: Cached value.
        expiry: Absolute expiry (epoch seconds), None for no expiry.
        ctime: Seconds the compute function took (drives early recomputation).
        tags: Tags attached to the entry.
    """

    value: Any
    expiry: float | None
    ctime: float
    tags: tuple[str, ...]

    def is_expired(self, now: float) -> bool:
        """True once the absolute expiry has passed."""
        return self.expiry is not None and now >= self.expiry

    def should_recompute_early(self, now: float, beta: float) -> bool:
        """Probabilistic early expiration (XFetch).

        Recomputes slightly before expiry with a probability that grows as
        expiry approaches, weighted by how long the value took to compute,
        so that one caller refreshes a hot entry before every caller misses
        at once.

        Args:
            now: Current epoch seconds.
            beta: Weight. 0 disables, inf always recomputes.

        Returns:
            True if the caller should recompute now.
        """
        if math.isinf(beta):
            return True
        if self.expiry is None or beta <= 0 or self.ctime <= 0:
            return False
        return now - self.ctime * beta * math.log(1.0 - random.random()) >= self.expiry


def compute_expiry(ttl: int | None) -> float | None:
    """Absolute expiry for a lifetime starting now."""
    return None if ttl is None else time.time() + ttl
