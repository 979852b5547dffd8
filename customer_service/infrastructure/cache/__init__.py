"""Tag-aware cache adapters, key builder and metrics."""

from customer_service.infrastructure.cache.cache_item import CacheItem
from customer_service.infrastructure.cache.cache_keys import (
    CUSTOMER_COLLECTION_TAG,
    CUSTOMER_EMAIL_TAG,
    CUSTOMER_TAG,
    CacheKeyBuilder,
)
from customer_service.infrastructure.cache.cache_metrics import (
    CacheMetrics,
    get_cache_metrics,
)
from customer_service.infrastructure.cache.memory_tag_aware_cache import (
    InMemoryTagAwareCache,
)
from customer_service.infrastructure.cache.redis_tag_aware_cache import (
    RedisTagAwareCache,
)
from customer_service.infrastructure.cache.serializers import (
    CustomerCacheSerializer,
    JsonValueSerializer,
)

__all__ = [
    "CUSTOMER_COLLECTION_TAG",
    "CUSTOMER_EMAIL_TAG",
    "CUSTOMER_TAG",
    "CacheItem",
    "CacheKeyBuilder",
    "CacheMetrics",
    "CustomerCacheSerializer",
    "InMemoryTagAwareCache",
    "JsonValueSerializer",
    "RedisTagAwareCache",
    "get_cache_metrics",
]
