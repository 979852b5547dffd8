"""Cache invalidation subscribers for customer events.

One subscriber per customer event. Each evicts every cache entry that may
hold the changed customer (id lookup, email lookup, collections) by tag.

Failure policy: invalidation errors are NOT caught. A stale entry left
behind silently would be served until its TTL expires, so the error
propagates through the event bus to the command handler instead.

Whether customer_id appears in the log line is decided by the event
registry's PII policy, not by each subscriber.
"""

from typing import Any

from customer_service.domain.events.base_event import DomainEvent
from customer_service.domain.events.customer_events import (
    CustomerCreated,
    CustomerDeleted,
    CustomerUpdated,
)
from customer_service.domain.events.registry import get_event_metadata
from customer_service.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from customer_service.domain.protocols.logger_protocol import LoggerProtocol
from customer_service.domain.protocols.tag_aware_cache_protocol import (
    TagAwareCacheProtocol,
)
from customer_service.infrastructure.cache.cache_keys import CUSTOMER_COLLECTION_TAG

INVALIDATION_OPERATION = "cache.invalidation"


class _CacheInvalidationSubscriber:
    """Shared wiring and log formatting for invalidation subscribers.

    Subclasses set ``event_class`` and ``log_message`` and implement
    ``_tags_for``.
    """

    event_class: type[DomainEvent]
    log_message: str

    def __init__(
        self,
        cache: TagAwareCacheProtocol,
        cache_key_builder: CacheKeysProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._cache = cache
        self._keys = cache_key_builder
        self._logger = logger
        self._metadata = get_event_metadata(self.event_class)

    @classmethod
    def subscribed_to(cls) -> list[type[DomainEvent]]:
        return [cls.event_class]

    async def __call__(self, event: Any) -> None:
        """Invalidate the event's tags, then log.

        Raises:
            Exception: Whatever the cache raised (never swallowed).
        """
        await self._cache.invalidate_tags(self._tags_for(event))
        self._logger.info(self.log_message, **self._log_context(event))

    def _tags_for(self, event: Any) -> list[str]:
        raise NotImplementedError

    def _customer_tags(self, customer_id: str, email: str) -> list[str]:
        return [
            self._keys.build_customer_tag(customer_id),
            self._keys.build_customer_email_tag(email),
            CUSTOMER_COLLECTION_TAG,
        ]

    def _log_context(self, event: Any) -> dict[str, Any]:
        context: dict[str, Any] = {}
        if self._metadata.pii.invalidation:
            context["customer_id"] = event.customer_id
        context.update(
            event_id=str(event.event_id),
            operation=INVALIDATION_OPERATION,
            reason=self._metadata.invalidation_reason,
        )
        return context


class CustomerCreatedCacheInvalidationSubscriber(_CacheInvalidationSubscriber):
    """Evicts stale negative lookups and collections after a create."""

    event_class = CustomerCreated
    log_message = "Cache invalidated after customer creation"

    def _tags_for(self, event: CustomerCreated) -> list[str]:
        return self._customer_tags(event.customer_id, event.customer_email)


class CustomerUpdatedCacheInvalidationSubscriber(_CacheInvalidationSubscriber):
    """Evicts the customer's entries after an update.

    When the email changed, entries cached under the previous email are
    evicted as well (appended last).
    """

    event_class = CustomerUpdated
    log_message = "Cache invalidated after customer update"

    def _tags_for(self, event: CustomerUpdated) -> list[str]:
        tags = self._customer_tags(event.customer_id, event.current_email)
        if event.email_changed and event.previous_email is not None:
            tags.append(self._keys.build_customer_email_tag(event.previous_email))
        return tags

    def _log_context(self, event: CustomerUpdated) -> dict[str, Any]:
        context = super()._log_context(event)
        context["email_changed"] = event.email_changed
        return context


class CustomerDeletedCacheInvalidationSubscriber(_CacheInvalidationSubscriber):
    event_class = CustomerDeleted
    log_message = "Cache invalidated after customer deletion"

    def _tags_for(self, event: CustomerDeleted) -> list[str]:
        return self._customer_tags(event.customer_id, event.customer_email)
