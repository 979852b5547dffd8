"""Caching decorator for CustomerRepositoryProtocol.

Reads go through the tag-aware cache (cache-aside); writes go straight to
the wrapped repository. Cache entries are evicted by the invalidation
subscribers reacting to customer events, never by this class.

Key Patterns:
    customer.{ulid}               TTL 600s  tags: customer, customer.{ulid}
    customer.email.{sha256(email)} TTL 300s  tags: customer, customer.email,
                                                  customer.email.{sha256}

If the cache layer raises, the error is logged and the read is served from
the wrapped repository. A cache outage degrades latency, never availability.
"""

from typing import Any

from customer_service.domain.entities.customer import Customer
from customer_service.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from customer_service.domain.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from customer_service.domain.protocols.logger_protocol import LoggerProtocol
from customer_service.domain.protocols.tag_aware_cache_protocol import (
    CacheItemProtocol,
    TagAwareCacheProtocol,
)
from customer_service.infrastructure.cache.cache_keys import (
    CUSTOMER_EMAIL_TAG,
    CUSTOMER_TAG,
)

CUSTOMER_TTL_SECONDS = 600
CUSTOMER_EMAIL_TTL_SECONDS = 300
EARLY_RECOMPUTE_BETA = 1.0


class CachedCustomerRepository:
    """Cache-aside decorator around a customer repository.

    Substitutable wherever the wrapped repository is used: every protocol
    method is delegated explicitly and any other attribute is forwarded.

    Attributes:
        _inner: Wrapped repository (system of record).
        _cache: Tag-aware cache.
        _keys: Cache key builder.
        _logger: Structured logger.
    """

    def __init__(
        self,
        inner: CustomerRepositoryProtocol,
        cache: TagAwareCacheProtocol,
        cache_key_builder: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._inner = inner
        self._cache = cache
        self._keys = cache_key_builder
        self._logger = logger

    async def find(
        self,
        customer_id: str,
        lock_mode: int = 0,
        lock_version: int | None = None,
    ) -> Customer | None:
        """Find customer by ULID, serving from cache when possible.

        Args:
            customer_id: Customer ULID.
            lock_mode: Passed to the wrapped repository untouched.
            lock_version: Passed to the wrapped repository untouched.

        Returns:
            Customer if found, None otherwise. A None result is cached too.
        """
        cache_key = self._keys.build_customer_key(customer_id)

        async def load(item: CacheItemProtocol) -> Customer | None:
            item.expires_after(CUSTOMER_TTL_SECONDS)
            item.tag([CUSTOMER_TAG, self._keys.build_customer_tag(customer_id)])
            self._logger.info(
                "Cache miss - loading customer from database",
                cache_key=cache_key,
                customer_id=customer_id,
                operation="cache.miss",
            )
            return await self._inner.find(customer_id, lock_mode, lock_version)

        try:
            return await self._cache.get(cache_key, load, beta=EARLY_RECOMPUTE_BETA)
        except Exception as e:  # noqa: BLE001
            self._log_cache_error(cache_key, e)
            return await self._inner.find(customer_id, lock_mode, lock_version)

    async def find_by_email(self, email: str) -> Customer | None:
        """Find customer by email, serving from cache when possible.

        The cache key holds a SHA-256 digest of the normalized email so the
        address itself never appears in cache keys or logs.
        """
        cache_key = self._keys.build_customer_email_key(email)

        async def load(item: CacheItemProtocol) -> Customer | None:
            item.expires_after(CUSTOMER_EMAIL_TTL_SECONDS)
            item.tag(
                [
                    CUSTOMER_TAG,
                    CUSTOMER_EMAIL_TAG,
                    self._keys.build_customer_email_tag(email),
                ]
            )
            self._logger.info(
                "Cache miss - loading customer by email",
                cache_key=cache_key,
                operation="cache.miss",
            )
            return await self._inner.find_by_email(email)

        try:
            return await self._cache.get(cache_key, load)
        except Exception as e:  # noqa: BLE001
            self._log_cache_error(cache_key, e)
            return await self._inner.find_by_email(email)

    async def save(self, customer: Customer) -> None:
        await self._inner.save(customer)

    async def delete(self, customer: Customer) -> None:
        await self._inner.delete(customer)

    async def find_all(self, *, limit: int = 50, offset: int = 0) -> list[Customer]:
        return await self._inner.find_all(limit=limit, offset=offset)

    async def count(self) -> int:
        return await self._inner.count()

    def __getattr__(self, name: str) -> Any:
        # Only called for attributes not found on the decorator itself.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    def _log_cache_error(self, cache_key: str, error: Exception) -> None:
        self._logger.error(
            "Cache error - falling back to database",
            cache_key=cache_key,
            error=str(error),
            operation="cache.error",
        )
