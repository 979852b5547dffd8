"""Unit tests for customer domain events."""

import dataclasses
from datetime import UTC, datetime
from uuid import UUID

import pytest

from customer_service.domain.events.base_event import DomainEvent
from customer_service.domain.events.customer_events import (
    CustomerCreated,
    CustomerDeleted,
    CustomerUpdated,
)


@pytest.mark.unit
class TestEventEnvelope:
    def test_events_get_unique_ids_and_utc_timestamps(self):
        first = CustomerCreated(customer_id="1", customer_email="a@example.com")
        second = CustomerCreated(customer_id="1", customer_email="a@example.com")

        assert isinstance(first.event_id, UUID)
        assert first.event_id != second.event_id
        assert first.occurred_at.tzinfo is UTC

    def test_events_are_immutable(self):
        event = CustomerDeleted(customer_id="1", customer_email="a@example.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            event.customer_id = "2"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("event_class", "name"),
        [
            (CustomerCreated, "customer.created"),
            (CustomerUpdated, "customer.updated"),
            (CustomerDeleted, "customer.deleted"),
        ],
    )
    def test_event_names(self, event_class, name):
        assert issubclass(event_class, DomainEvent)
        assert event_class.event_name == name

    def test_to_envelope(self):
        event = CustomerCreated(customer_id="1", customer_email="a@example.com")

        envelope = event.to_envelope()

        assert envelope == {
            "event_name": "customer.created",
            "event_id": str(event.event_id),
            "occurred_at": event.occurred_at.isoformat(),
            "body": {"customer_id": "1", "customer_email": "a@example.com"},
        }


@pytest.mark.unit
class TestCustomerUpdated:
    def test_email_changed_when_previous_differs(self):
        event = CustomerUpdated(
            customer_id="1",
            current_email="new@example.com",
            previous_email="old@example.com",
        )

        assert event.email_changed is True

    def test_email_not_changed_without_previous(self):
        event = CustomerUpdated(customer_id="1", current_email="a@example.com")

        assert event.previous_email is None
        assert event.email_changed is False

    def test_email_not_changed_when_previous_equals_current(self):
        event = CustomerUpdated(
            customer_id="1",
            current_email="a@example.com",
            previous_email="a@example.com",
        )

        assert event.email_changed is False

    def test_from_primitives_rebuilds_event(self):
        occurred_at = datetime(2026, 1, 1, tzinfo=UTC)
        original = CustomerUpdated(
            customer_id="1",
            current_email="new@example.com",
            previous_email="old@example.com",
            occurred_at=occurred_at,
        )

        rebuilt = CustomerUpdated.from_primitives(
            original.to_primitives(), original.event_id, occurred_at
        )

        assert rebuilt == original

    def test_from_primitives_without_previous_email(self):
        rebuilt = CustomerUpdated.from_primitives(
            {"customer_id": "1", "current_email": "a@example.com"},
            UUID("01900000-0000-7000-8000-000000000000"),
            datetime(2026, 1, 1, tzinfo=UTC),
        )

        assert rebuilt.previous_email is None
