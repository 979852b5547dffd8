"""In-memory event bus implementation.

Implements EventBusProtocol with a dictionary-based handler registry.
Handlers run one after another, in the order they were subscribed, and the
first handler exception stops publication and propagates to the publisher.

Architecture:
    - Implements EventBusProtocol (hexagonal adapter pattern)
    - Dictionary-based handler registry (event_type -> list of handlers)
    - Fail-closed: a handler failure is logged, then re-raised
    - Sequential execution so cache invalidation finishes before metrics run

Usage:
    >>> bus = InMemoryEventBus(logger=get_logger())
    >>> bus.subscribe(CustomerCreated, CustomerCreatedCacheInvalidationSubscriber(...))
    >>> await bus.publish(CustomerCreated(customer_id=..., customer_email=...))
"""

from collections import defaultdict

from customer_service.domain.events.base_event import DomainEvent
from customer_service.domain.protocols.event_bus_protocol import EventHandler
from customer_service.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """In-memory event bus with ordered, fail-closed delivery.

    Thread Safety:
        - NOT thread-safe (single-server, single-threaded async design)

    Attributes:
        _handlers: Event class -> handlers in subscription order.
        _logger: Logger for event publishing and handler failures.

    Design Decisions:
        - **Ordered**: handler N+1 starts only after handler N completed
        - **Fail-closed**: remaining handlers are skipped after a failure
        - **Exact type routing**: no inheritance matching
        - **In-memory**: no persistence, no distribution
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize event bus with logger.

        Args:
            logger: Logger for event publishing (debug) and handler
                failures (error).
        """
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle. Only exact type matches.
            handler: Async callable accepting the event.

        Notes:
            - Subscription order is execution order
            - No duplicate detection (same handler can be registered twice)
        """
        self._handlers[event_type].append(handler)

    def handler_count(self, event_type: type[DomainEvent]) -> int:
        """Number of handlers subscribed to event_type."""
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to registered handlers, in subscription order.

        Args:
            event: Domain event to publish.

        Raises:
            Exception: Whatever the first failing handler raised. Handlers
                after it are not called.

        Notes:
            - No handlers = no-op (not an error)
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=event_type.__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                self._logger.error(
                    "event_handler_failed",
                    error=e,
                    event_type=event_type.__name__,
                    event_id=str(event.event_id),
                    handler_name=_handler_name(handler),
                )
                raise


def _handler_name(handler: EventHandler) -> str:
    name = getattr(handler, "__name__", None)
    if name is not None:
        return name
    return type(handler).__name__
