"""Domain Events Registry - Single Source of Truth.

Catalogs every customer event with the metadata the container and the
subscribers need:

- which subscribers handle the event, in the order they must run
  (cache invalidation always before metrics),
- which business metric the event produces,
- whether customer_id may appear in each subscriber's log lines.

Adding a new event:
1. Define the event dataclass in customer_events.py
2. Add an entry to EVENT_REGISTRY below
3. Run tests - the registry compliance tests list what is missing
"""

from dataclasses import dataclass, field
from enum import Enum

from customer_service.domain.events.base_event import DomainEvent
from customer_service.domain.events.customer_events import (
    CustomerCreated,
    CustomerDeleted,
    CustomerUpdated,
)


class SubscriberKind(Enum):
    """Kinds of subscribers wired per event, in execution order."""

    CACHE_INVALIDATION = "cache_invalidation"
    METRICS = "metrics"


class CustomerOperation(Enum):
    """Write operation that produced the event (metric dimension value)."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class LogPiiPolicy:
    """Whether customer_id may be logged by each subscriber of one event.

    Attributes:
        invalidation: Included in the cache invalidation info log.
        metrics_success: Included in the metrics debug log.
        metrics_failure: Included in the metrics warning log.
    """

    invalidation: bool
    metrics_success: bool
    metrics_failure: bool


@dataclass(frozen=True)
class EventMetadata:
    """Metadata for a domain event.

    Attributes:
        event_class: The event dataclass.
        operation: Write operation the event reports.
        metric_name: Business metric emitted by the metrics subscriber.
        invalidation_reason: ``reason`` field of the invalidation log.
        pii: Log field policy for customer_id.
        subscribers: Subscriber kinds, in the order they run.
    """

    event_class: type[DomainEvent]
    operation: CustomerOperation
    metric_name: str
    invalidation_reason: str
    pii: LogPiiPolicy
    subscribers: tuple[SubscriberKind, ...] = field(
        default=(SubscriberKind.CACHE_INVALIDATION, SubscriberKind.METRICS)
    )


EVENT_REGISTRY: list[EventMetadata] = [
    EventMetadata(
        event_class=CustomerCreated,
        operation=CustomerOperation.CREATE,
        metric_name="CustomersCreated",
        invalidation_reason="customer_created",
        pii=LogPiiPolicy(
            invalidation=False, metrics_success=False, metrics_failure=False
        ),
    ),
    EventMetadata(
        event_class=CustomerUpdated,
        operation=CustomerOperation.UPDATE,
        metric_name="CustomersUpdated",
        invalidation_reason="customer_updated",
        pii=LogPiiPolicy(
            invalidation=True, metrics_success=False, metrics_failure=True
        ),
    ),
    EventMetadata(
        event_class=CustomerDeleted,
        operation=CustomerOperation.DELETE,
        metric_name="CustomersDeleted",
        invalidation_reason="customer_deleted",
        pii=LogPiiPolicy(
            invalidation=True, metrics_success=True, metrics_failure=True
        ),
    ),
]


def get_event_metadata(event_class: type[DomainEvent]) -> EventMetadata:
    """Look up registry metadata for an event class.

    Args:
        event_class: Event dataclass.

    Returns:
        Registered metadata.

    Raises:
        KeyError: If the event is not registered.
    """
    for metadata in EVENT_REGISTRY:
        if metadata.event_class is event_class:
            return metadata
    raise KeyError(f"Event not registered: {event_class.__name__}")


def get_all_events() -> list[type[DomainEvent]]:
    """Get all registered event classes.

    Returns:
        Event classes in registry order.
    """
    return [meta.event_class for meta in EVENT_REGISTRY]


def get_events_requiring(kind: SubscriberKind) -> list[type[DomainEvent]]:
    """Get events handled by a given subscriber kind.

    Args:
        kind: Subscriber kind.

    Returns:
        Event classes whose metadata lists ``kind``.
    """
    return [meta.event_class for meta in EVENT_REGISTRY if kind in meta.subscribers]
