"""Base domain event class.

Domain events represent "things that happened" in the business domain and are
always named in past tense (CustomerCreated, CustomerUpdated, ...).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUIDv7, time-ordered) for log correlation
    - occurred_at timestamp (UTC) for event ordering
    - Events are not persisted: in-process pub/sub within one request

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class CustomerCreated(DomainEvent):
    ...     customer_id: str
    ...     customer_email: str
    >>>
    >>> event = CustomerCreated(customer_id="01ARZ...", customer_email="a@b.c")
    >>> event.event_id  # Auto-generated
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, ClassVar
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming
        3. Be frozen dataclasses with kw_only=True
        4. Declare a dotted ``event_name`` (e.g. "customer.created")

    Attributes:
        event_id: Unique identifier for this publication. Used to correlate
            log lines across subscribers without logging PII.
        occurred_at: Timestamp when the event occurred (UTC).
    """

    event_name: ClassVar[str] = "domain.event"

    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_primitives(self) -> dict[str, Any]:
        """Return the event body as a plain dict (no envelope fields).

        Returns:
            Mapping of body field names to primitive values.
        """
        return {}

    def to_envelope(self) -> dict[str, Any]:
        """Return the event with its envelope (name, id, timestamp).

        Returns:
            Dict with event_name, event_id, occurred_at and body.
        """
        return {
            "event_name": self.event_name,
            "event_id": str(self.event_id),
            "occurred_at": self.occurred_at.isoformat(),
            "body": self.to_primitives(),
        }
