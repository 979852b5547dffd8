"""In-memory business metrics emitter (development and tests)."""

from customer_service.application.observability.business_metric import BusinessMetric


class InMemoryMetricsEmitter:
    """Records emitted metrics in a list.

    Attributes:
        metrics: Emitted metrics, in order.
    """

    def __init__(self) -> None:
        self.metrics: list[BusinessMetric] = []

    def emit(self, metric: BusinessMetric) -> None:
        self.metrics.append(metric)

    def names(self) -> list[str]:
        return [metric.name for metric in self.metrics]

    def clear(self) -> None:
        self.metrics.clear()
