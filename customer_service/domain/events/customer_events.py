"""Customer domain events.

Published by command handlers immediately after a successful write. Each
event carries the minimum data its subscribers need to invalidate cache
tags and emit business metrics.

Events:
    - CustomerCreated: customer persisted for the first time
    - CustomerUpdated: customer modified (carries previous email on change)
    - CustomerDeleted: customer removed
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Self
from uuid import UUID

from customer_service.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerCreated(DomainEvent):
    """Customer was created.

    Attributes:
        customer_id: ULID of the new customer.
        customer_email: Email of the new customer.
    """

    event_name: ClassVar[str] = "customer.created"

    customer_id: str
    customer_email: str

    def to_primitives(self) -> dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "customer_email": self.customer_email,
        }

    @classmethod
    def from_primitives(
        cls, body: dict[str, Any], event_id: UUID, occurred_at: datetime
    ) -> Self:
        return cls(
            customer_id=body["customer_id"],
            customer_email=body["customer_email"],
            event_id=event_id,
            occurred_at=occurred_at,
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerUpdated(DomainEvent):
    """Customer was updated.

    Attributes:
        customer_id: ULID of the updated customer.
        current_email: Email after the update.
        previous_email: Email before the update. None when the email did
            not change.
    """

    event_name: ClassVar[str] = "customer.updated"

    customer_id: str
    current_email: str
    previous_email: str | None = None

    @property
    def email_changed(self) -> bool:
        """True when the update moved the customer to a different email."""
        return (
            self.previous_email is not None
            and self.previous_email != self.current_email
        )

    def to_primitives(self) -> dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "current_email": self.current_email,
            "previous_email": self.previous_email,
        }

    @classmethod
    def from_primitives(
        cls, body: dict[str, Any], event_id: UUID, occurred_at: datetime
    ) -> Self:
        return cls(
            customer_id=body["customer_id"],
            current_email=body["current_email"],
            previous_email=body.get("previous_email"),
            event_id=event_id,
            occurred_at=occurred_at,
        )


@dataclass(frozen=True, kw_only=True, slots=True)
class CustomerDeleted(DomainEvent):
    """Customer was deleted.

    Attributes:
        customer_id: ULID of the deleted customer.
        customer_email: Email the customer had when deleted.
    """

    event_name: ClassVar[str] = "customer.deleted"

    customer_id: str
    customer_email: str

    def to_primitives(self) -> dict[str, Any]:
        return {
            "customer_id": self.customer_id,
            "customer_email": self.customer_email,
        }

    @classmethod
    def from_primitives(
        cls, body: dict[str, Any], event_id: UUID, occurred_at: datetime
    ) -> Self:
        return cls(
            customer_id=body["customer_id"],
            customer_email=body["customer_email"],
            event_id=event_id,
            occurred_at=occurred_at,
        )
