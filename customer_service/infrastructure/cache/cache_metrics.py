"""Cache metrics tracking for observability.

Lightweight in-memory hit/miss/error counters per cache namespace. The
namespace is the first dotted segment of the key ("customer" for both
"customer.{id}" and "customer.email.{hash}").

Usage:
    metrics = get_cache_metrics()
    metrics.record_hit("customer")
    print(metrics.get_stats("customer")["hit_rate"])
"""

from collections import defaultdict
from dataclasses import dataclass
from threading import Lock
from typing import Any


@dataclass
class CacheStats:
    """Cache statistics for a specific cache namespace.

    Attributes:
        hits: Values served from cache.
        misses: Values computed (miss or early recomputation).
        errors: Backend failures.
        invalidations: Tag invalidation calls.
    """

    hits: int = 0
    misses: int = 0
    errors: int = 0
    invalidations: int = 0

    @property
    def total_requests(self) -> int:
        """Total cache requests (hits + misses)."""
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Cache hit rate (0.0 to 1.0)."""
        if self.total_requests == 0:
            return 0.0
        return self.hits / self.total_requests

    def to_dict(self) -> dict[str, Any]:
        """Convert stats to dictionary for JSON serialization."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "errors": self.errors,
            "invalidations": self.invalidations,
            "total_requests": self.total_requests,
            "hit_rate": round(self.hit_rate, 4),
        }


def namespace_from_key(key: str) -> str:
    """Extract the metrics namespace from a cache key or tag."""
    return key.split(".", 1)[0] or "unknown"


class CacheMetrics:
    """In-memory cache metrics tracker (thread-safe)."""

    def __init__(self) -> None:
        self._stats: dict[str, CacheStats] = defaultdict(CacheStats)
        self._lock = Lock()

    def record_hit(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].hits += 1

    def record_miss(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].misses += 1

    def record_error(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].errors += 1

    def record_invalidation(self, namespace: str) -> None:
        with self._lock:
            self._stats[namespace].invalidations += 1

    def get_stats(self, namespace: str) -> dict[str, Any]:
        """Get statistics for a specific namespace.

        Args:
            namespace: Cache namespace to query.

        Returns:
            Dictionary with hits, misses, errors, invalidations,
            total_requests, hit_rate.
        """
        with self._lock:
            stats = self._stats.get(namespace, CacheStats())
            return stats.to_dict()

    def get_all_stats(self) -> dict[str, dict[str, Any]]:
        """Get statistics for all namespaces."""
        with self._lock:
            return {
                namespace: stats.to_dict() for namespace, stats in self._stats.items()
            }

    def reset(self, namespace: str | None = None) -> None:
        """Reset metrics.

        Args:
            namespace: Optional namespace to reset. If None, reset all.
        """
        with self._lock:
            if namespace is None:
                self._stats.clear()
            else:
                self._stats[namespace] = CacheStats()


_metrics_instance: CacheMetrics | None = None


def get_cache_metrics() -> CacheMetrics:
    """Get global cache metrics singleton."""
    global _metrics_instance
    if _metrics_instance is None:
        _metrics_instance = CacheMetrics()
    return _metrics_instance
