"""Value serializers for the Redis tag-aware cache.

Redis stores JSON envelopes; serializers convert cached values to and from
JSON-compatible primitives. ``None`` round-trips as ``None`` so that a
"not found" result is cached like any other value.
"""

from datetime import datetime
from typing import Any, Protocol

from customer_service.domain.entities.customer import (
    Customer,
    CustomerStatus,
    CustomerType,
)


class ValueSerializer(Protocol):
    """Converts cached values to JSON-compatible data and back."""

    def dumps(self, value: Any) -> Any:
        """Return JSON-compatible data for value."""
        ...

    def loads(self, data: Any) -> Any:
        """Rebuild a value from data produced by dumps()."""
        ...


class JsonValueSerializer:
    """Identity serializer for values that are already JSON-compatible."""

    def dumps(self, value: Any) -> Any:
        return value

    def loads(self, data: Any) -> Any:
        return data


class CustomerCacheSerializer:
    """Serializer for Customer aggregates (and None)."""

    def dumps(self, value: Customer | None) -> dict[str, Any] | None:
        """Convert a Customer into a JSON-compatible dict.

        Args:
            value: Customer or None.

        Returns:
            Dict of primitives, or None.

        Raises:
            TypeError: If value is neither Customer nor None.
        """
        if value is None:
            return None
        if not isinstance(value, Customer):
            raise TypeError(f"Cannot serialize {type(value).__name__} as Customer")
        return {
            "ulid": value.ulid,
            "initials": value.initials,
            "email": value.email,
            "phone": value.phone,
            "lead_source": value.lead_source,
            "type": {"ulid": value.type.ulid, "value": value.type.value},
            "status": {"ulid": value.status.ulid, "value": value.status.value},
            "confirmed": value.confirmed,
            "created_at": value.created_at.isoformat(),
            "updated_at": value.updated_at.isoformat(),
        }

    def loads(self, data: dict[str, Any] | None) -> Customer | None:
        """Rebuild a Customer from dumps() output.

        Raises:
            KeyError: If a field is missing.
            ValueError: If a timestamp is malformed.
        """
        if data is None:
            return None
        return Customer(
            ulid=data["ulid"],
            initials=data["initials"],
            email=data["email"],
            phone=data["phone"],
            lead_source=data["lead_source"],
            type=CustomerType(**data["type"]),
            status=CustomerStatus(**data["status"]),
            confirmed=data["confirmed"],
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )
