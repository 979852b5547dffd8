"""Event bus protocol (port) for domain events.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure provides the adapter (InMemoryEventBus)
    - Container (customer_service.core.container) wires subscribers

Usage:
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(CustomerCreated(customer_id=..., customer_email=...))
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from customer_service.domain.events.base_event import DomainEvent

# Type alias for event handler callables (functions or __call__ objects)
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Ordered delivery**: handlers for one event type run one after
           another, in subscription order.
        2. **Fail-closed**: a handler exception stops publication and is
           raised to the publisher. Handlers that must never fail the write
           path (metrics) catch their own errors.
        3. **Exact type routing**: handlers registered for a type only
           receive events of that exact type.
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle.
            handler: Async callable accepting the event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers, in order.

        Args:
            event: Domain event to publish.

        Raises:
            Exception: Whatever the first failing handler raised.
        """
        ...
