"""Business metrics subscribers for customer events.

Each subscriber emits one Count=1 metric per event. Metrics are
best-effort: emitter failures are logged at warning level and swallowed,
so a metrics outage never fails a customer write.
"""

from collections.abc import Callable
from typing import Any

from customer_service.application.observability.business_metric import (
    BusinessMetric,
    customers_created_metric,
    customers_deleted_metric,
    customers_updated_metric,
)
from customer_service.domain.events.base_event import DomainEvent
from customer_service.domain.events.customer_events import (
    CustomerCreated,
    CustomerDeleted,
    CustomerUpdated,
)
from customer_service.domain.events.registry import get_event_metadata
from customer_service.domain.protocols.business_metrics_emitter_protocol import (
    BusinessMetricsEmitterProtocol,
)
from customer_service.domain.protocols.logger_protocol import LoggerProtocol

MetricFactory = Callable[[], BusinessMetric]


class _MetricsSubscriber:
    event_class: type[DomainEvent]
    default_metric_factory: MetricFactory

    def __init__(
        self,
        emitter: BusinessMetricsEmitterProtocol,
        logger: LoggerProtocol,
        metric_factory: MetricFactory | None = None,
    ) -> None:
        self._emitter = emitter
        self._logger = logger
        self._metadata = get_event_metadata(self.event_class)
        self._metric_factory = metric_factory or type(self).default_metric_factory

    @classmethod
    def subscribed_to(cls) -> list[type[DomainEvent]]:
        return [cls.event_class]

    async def __call__(self, event: Any) -> None:
        """Emit the metric; never raises."""
        pii = self._metadata.pii
        metric_name = self._metadata.metric_name
        try:
            self._emitter.emit(self._metric_factory())
        except Exception as e:  # noqa: BLE001
            context: dict[str, Any] = {
                "metric": metric_name,
                "event_id": str(event.event_id),
                "error": str(e),
            }
            if pii.metrics_failure:
                context["customer_id"] = event.customer_id
            self._logger.warning("Failed to emit business metric", **context)
            return

        context = {"metric": metric_name, "event_id": str(event.event_id)}
        if pii.metrics_success:
            context["customer_id"] = event.customer_id
        self._logger.debug("Business metric emitted", **context)


class CustomerCreatedMetricsSubscriber(_MetricsSubscriber):
    event_class = CustomerCreated
    default_metric_factory = staticmethod(customers_created_metric)


class CustomerUpdatedMetricsSubscriber(_MetricsSubscriber):
    event_class = CustomerUpdated
    default_metric_factory = staticmethod(customers_updated_metric)


class CustomerDeletedMetricsSubscriber(_MetricsSubscriber):
    event_class = CustomerDeleted
    default_metric_factory = staticmethod(customers_deleted_metric)
