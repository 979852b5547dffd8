"""Business metrics emitter protocol (port).

Emitters may raise (MetricsEmissionError or backend errors). Subscribers
that call them are responsible for keeping failures off the write path.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from customer_service.application.observability.business_metric import (
        BusinessMetric,
    )


class BusinessMetricsEmitterProtocol(Protocol):
    """Protocol for business metric emitters (EMF, in-memory)."""

    def emit(self, metric: "BusinessMetric") -> None:
        """Emit a single business metric.

        Args:
            metric: Metric name, value, unit and dimensions.

        Raises:
            MetricsEmissionError: If the metric cannot be emitted.
        """
        ...
