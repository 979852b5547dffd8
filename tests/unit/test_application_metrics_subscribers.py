"""Unit tests for customer business metrics subscribers.

Tests cover:
- Metric name, value, unit and dimensions per event
- Emitter failures are swallowed and logged at warning
- customer_id inclusion follows the registry PII policy
"""

from unittest.mock import MagicMock

import pytest

from customer_service.application.event_handlers.metrics_subscribers import (
    CustomerCreatedMetricsSubscriber,
    CustomerDeletedMetricsSubscriber,
    CustomerUpdatedMetricsSubscriber,
)
from customer_service.application.observability.business_metric import MetricUnit
from customer_service.core.errors import MetricsEmissionError
from customer_service.domain.events.customer_events import (
    CustomerCreated,
    CustomerDeleted,
    CustomerUpdated,
)
from customer_service.infrastructure.observability.in_memory_metrics_emitter import (
    InMemoryMetricsEmitter,
)
from tests.conftest import CUSTOMER_ID

CASES = [
    (
        CustomerCreatedMetricsSubscriber,
        CustomerCreated(customer_id=CUSTOMER_ID, customer_email="a@example.com"),
        "CustomersCreated",
        "create",
    ),
    (
        CustomerUpdatedMetricsSubscriber,
        CustomerUpdated(customer_id=CUSTOMER_ID, current_email="a@example.com"),
        "CustomersUpdated",
        "update",
    ),
    (
        CustomerDeletedMetricsSubscriber,
        CustomerDeleted(customer_id=CUSTOMER_ID, customer_email="a@example.com"),
        "CustomersDeleted",
        "delete",
    ),
]


def _failing_emitter() -> MagicMock:
    emitter = MagicMock()
    emitter.emit.side_effect = MetricsEmissionError("stdout closed")
    return emitter


@pytest.mark.unit
class TestMetricEmission:
    @pytest.mark.parametrize(("subscriber_class", "event", "name", "operation"), CASES)
    async def test_emits_count_metric_with_dimensions(
        self, subscriber_class, event, name, operation, mock_logger
    ):
        emitter = InMemoryMetricsEmitter()
        subscriber = subscriber_class(emitter, mock_logger)

        await subscriber(event)

        (metric,) = emitter.metrics
        assert metric.name == name
        assert metric.value == 1
        assert metric.unit is MetricUnit.COUNT
        assert metric.dimensions.to_dict() == {
            "Endpoint": "Customer",
            "Operation": operation,
        }

    async def test_custom_metric_factory_is_used(self, mock_logger):
        emitter = InMemoryMetricsEmitter()
        factory = MagicMock(name="factory")
        subscriber = CustomerCreatedMetricsSubscriber(emitter, mock_logger, factory)

        await subscriber(CASES[0][1])

        assert emitter.metrics == [factory.return_value]


@pytest.mark.unit
class TestMetricFailuresAreSwallowed:
    @pytest.mark.parametrize(("subscriber_class", "event", "name", "operation"), CASES)
    async def test_emitter_error_does_not_propagate(
        self, subscriber_class, event, name, operation, mock_logger
    ):
        subscriber = subscriber_class(_failing_emitter(), mock_logger)

        await subscriber(event)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.kwargs["metric"] == name
        assert mock_logger.warning.call_args.kwargs["error"] == "stdout closed"

    async def test_unexpected_exception_is_swallowed(self, mock_logger):
        emitter = MagicMock()
        emitter.emit.side_effect = RuntimeError("anything")
        subscriber = CustomerDeletedMetricsSubscriber(emitter, mock_logger)

        await subscriber(CASES[2][1])

        mock_logger.warning.assert_called_once()

    async def test_created_failure_log_excludes_customer_id(self, mock_logger):
        subscriber = CustomerCreatedMetricsSubscriber(_failing_emitter(), mock_logger)
        event = CASES[0][1]

        await subscriber(event)

        mock_logger.warning.assert_called_once_with(
            "Failed to emit business metric",
            metric="CustomersCreated",
            event_id=str(event.event_id),
            error="stdout closed",
        )

    @pytest.mark.parametrize("index", [1, 2])
    async def test_updated_and_deleted_failure_logs_include_customer_id(
        self, index, mock_logger
    ):
        subscriber_class, event, _, _ = CASES[index]
        subscriber = subscriber_class(_failing_emitter(), mock_logger)

        await subscriber(event)

        assert mock_logger.warning.call_args.kwargs["customer_id"] == CUSTOMER_ID


@pytest.mark.unit
class TestSuccessLogs:
    @pytest.mark.parametrize("index", [0, 1])
    async def test_created_and_updated_success_logs_exclude_customer_id(
        self, index, mock_logger
    ):
        subscriber_class, event, name, _ = CASES[index]
        subscriber = subscriber_class(InMemoryMetricsEmitter(), mock_logger)

        await subscriber(event)

        mock_logger.debug.assert_called_once_with(
            "Business metric emitted",
            metric=name,
            event_id=str(event.event_id),
        )

    async def test_deleted_success_log_includes_customer_id(self, mock_logger):
        subscriber_class, event, name, _ = CASES[2]
        subscriber = subscriber_class(InMemoryMetricsEmitter(), mock_logger)

        await subscriber(event)

        mock_logger.debug.assert_called_once_with(
            "Business metric emitted",
            metric=name,
            event_id=str(event.event_id),
            customer_id=CUSTOMER_ID,
        )
