"""Domain protocols (ports)."""

from customer_service.domain.protocols.business_metrics_emitter_protocol import (
    BusinessMetricsEmitterProtocol,
)
from customer_service.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from customer_service.domain.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from customer_service.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from customer_service.domain.protocols.logger_protocol import LoggerProtocol
from customer_service.domain.protocols.tag_aware_cache_protocol import (
    CacheItemProtocol,
    ComputeFn,
    TagAwareCacheProtocol,
)

__all__ = [
    "BusinessMetricsEmitterProtocol",
    "CacheItemProtocol",
    "CacheKeysProtocol",
    "ComputeFn",
    "CustomerRepositoryProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "TagAwareCacheProtocol",
]
