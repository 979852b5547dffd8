"""Business metrics emitters."""

from customer_service.infrastructure.observability.emf_metrics_emitter import (
    EmfMetricsEmitter,
)
from customer_service.infrastructure.observability.in_memory_metrics_emitter import (
    InMemoryMetricsEmitter,
)

__all__ = ["EmfMetricsEmitter", "InMemoryMetricsEmitter"]
