# mypy: disable-error-code="arg-type"
"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscribers are
wired from EVENT_REGISTRY: for each event, one subscriber per kind listed
in its metadata, in the listed order (cache invalidation before metrics).
"""

from functools import lru_cache
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from customer_service.domain.protocols.event_bus_protocol import EventBusProtocol


def _index_by_event(subscriber_classes: list[type[Any]]) -> dict[type, type[Any]]:
    index: dict[type, type[Any]] = {}
    for subscriber_class in subscriber_classes:
        for event_class in subscriber_class.subscribed_to():
            index[event_class] = subscriber_class
    return index


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Raises:
        RuntimeError: If a registered event names a subscriber kind with no
            matching subscriber class.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(CustomerCreated(...))
    """
    from customer_service.application.event_handlers import (
        CustomerCreatedCacheInvalidationSubscriber,
        CustomerCreatedMetricsSubscriber,
        CustomerDeletedCacheInvalidationSubscriber,
        CustomerDeletedMetricsSubscriber,
        CustomerUpdatedCacheInvalidationSubscriber,
        CustomerUpdatedMetricsSubscriber,
    )
    from customer_service.core.container.infrastructure import (
        get_cache_key_builder,
        get_logger,
        get_metrics_emitter,
        get_tag_aware_cache,
    )
    from customer_service.domain.events.registry import EVENT_REGISTRY, SubscriberKind
    from customer_service.infrastructure.events.in_memory_event_bus import (
        InMemoryEventBus,
    )

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)

    subscribers_by_kind = {
        SubscriberKind.CACHE_INVALIDATION: _index_by_event(
            [
                CustomerCreatedCacheInvalidationSubscriber,
                CustomerUpdatedCacheInvalidationSubscriber,
                CustomerDeletedCacheInvalidationSubscriber,
            ]
        ),
        SubscriberKind.METRICS: _index_by_event(
            [
                CustomerCreatedMetricsSubscriber,
                CustomerUpdatedMetricsSubscriber,
                CustomerDeletedMetricsSubscriber,
            ]
        ),
    }
    factories = {
        SubscriberKind.CACHE_INVALIDATION: lambda cls: cls(
            cache=get_tag_aware_cache(),
            cache_key_builder=get_cache_key_builder(),
            logger=logger,
        ),
        SubscriberKind.METRICS: lambda cls: cls(
            emitter=get_metrics_emitter(),
            logger=logger,
        ),
    }

    for metadata in EVENT_REGISTRY:
        event_class = metadata.event_class
        for kind in metadata.subscribers:
            subscriber_class = subscribers_by_kind[kind].get(event_class)
            if subscriber_class is None:
                raise RuntimeError(
                    f"Missing {kind.value} subscriber for {event_class.__name__}"
                )
            event_bus.subscribe(event_class, factories[kind](subscriber_class))

    return event_bus
