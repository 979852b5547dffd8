"""Customer event subscribers.

Wired by the container from EVENT_REGISTRY: for every customer event the
cache invalidation subscriber runs first, then the metrics subscriber.
"""

from customer_service.application.event_handlers.cache_invalidation_subscribers import (
    CustomerCreatedCacheInvalidationSubscriber,
    CustomerDeletedCacheInvalidationSubscriber,
    CustomerUpdatedCacheInvalidationSubscriber,
)
from customer_service.application.event_handlers.metrics_subscribers import (
    CustomerCreatedMetricsSubscriber,
    CustomerDeletedMetricsSubscriber,
    CustomerUpdatedMetricsSubscriber,
)

__all__ = [
    "CustomerCreatedCacheInvalidationSubscriber",
    "CustomerCreatedMetricsSubscriber",
    "CustomerDeletedCacheInvalidationSubscriber",
    "CustomerDeletedMetricsSubscriber",
    "CustomerUpdatedCacheInvalidationSubscriber",
    "CustomerUpdatedMetricsSubscriber",
]
