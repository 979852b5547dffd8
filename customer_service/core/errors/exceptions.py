"""Exceptions raised by infrastructure adapters.

Unlike DomainError values, these are raised: callers decide whether a
failure is recoverable (cached reads fall back to the database) or must
abort the operation (cache invalidation after a write).
"""


class CacheError(Exception):
    """Base exception for cache operations.

    Attributes:
        key: Cache key involved, if any.
        tags: Tags involved in an invalidation, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        tags: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.key = key
        self.tags = tags


class MetricsEmissionError(Exception):
    """Raised when a business metric cannot be emitted."""

    def __init__(self, message: str, *, metric_name: str | None = None) -> None:
        super().__init__(message)
        self.metric_name = metric_name
