"""Domain events package.

Usage:
    from customer_service.domain.events import CustomerCreated, DomainEvent
"""

from customer_service.domain.events.base_event import DomainEvent
from customer_service.domain.events.customer_events import (
    CustomerCreated,
    CustomerDeleted,
    CustomerUpdated,
)

__all__ = ["DomainEvent", "CustomerCreated", "CustomerUpdated", "CustomerDeleted"]
