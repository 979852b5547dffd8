"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console/CloudWatch)
- Tag-aware cache (Redis/in-memory)
- Cache key builder
- Database (PostgreSQL)
- Business metrics emitter (EMF)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from customer_service.core.config import get_settings
from customer_service.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from customer_service.domain.protocols.business_metrics_emitter_protocol import (
        BusinessMetricsEmitterProtocol,
    )
    from customer_service.domain.protocols.cache_keys_protocol import (
        CacheKeysProtocol,
    )
    from customer_service.domain.protocols.logger_protocol import LoggerProtocol
    from customer_service.domain.protocols.tag_aware_cache_protocol import (
        TagAwareCacheProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)
    - production: CloudWatchAdapter (AWS CloudWatch)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from datetime import UTC, datetime
    from socket import gethostname

    settings = get_settings()
    env = settings.environment.value
    instance_id = settings.instance_id or gethostname()

    if env == "production":
        from customer_service.infrastructure.logging.cloudwatch_adapter import (
            CloudWatchAdapter,
        )

        return CloudWatchAdapter(
            log_group=f"/{settings.app_name}/{env}/app",
            log_stream=f"{instance_id}/{datetime.now(UTC).date().isoformat()}",
            region=settings.aws_region,
            level=settings.log_level,
        )

    from customer_service.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=env in {"testing", "ci"},
        level=settings.log_level,
        service=settings.app_name,
    )


@lru_cache()
def get_redis_client() -> "Redis":
    """Get Redis client singleton with a shared connection pool."""
    from redis.asyncio import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        get_settings().redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
        socket_keepalive=True,
        socket_keepalive_options={
            1: 1,  # TCP_KEEPIDLE
            2: 1,  # TCP_KEEPINTVL
            3: 5,  # TCP_KEEPCNT
        },
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_tag_aware_cache() -> "TagAwareCacheProtocol":
    """Get tag-aware cache singleton (app-scoped).

    Returns adapter based on CACHE_BACKEND:
        - 'redis': RedisTagAwareCache storing Customer values
        - 'memory': InMemoryTagAwareCache (single process only)
    """
    from customer_service.infrastructure.cache.cache_metrics import get_cache_metrics

    settings = get_settings()

    if settings.cache_backend == "memory":
        from customer_service.infrastructure.cache.memory_tag_aware_cache import (
            InMemoryTagAwareCache,
        )

        return InMemoryTagAwareCache(metrics=get_cache_metrics())

    from customer_service.infrastructure.cache.redis_tag_aware_cache import (
        RedisTagAwareCache,
    )
    from customer_service.infrastructure.cache.serializers import (
        CustomerCacheSerializer,
    )

    return RedisTagAwareCache(
        get_redis_client(),
        serializer=CustomerCacheSerializer(),
        namespace=settings.cache_namespace,
        metrics=get_cache_metrics(),
    )


@lru_cache()
def get_cache_key_builder() -> "CacheKeysProtocol":
    from customer_service.infrastructure.cache.cache_keys import CacheKeyBuilder

    return CacheKeyBuilder()


@lru_cache()
def get_metrics_emitter() -> "BusinessMetricsEmitterProtocol":
    """Get business metrics emitter singleton.

    Testing uses InMemoryMetricsEmitter; every other environment writes
    EMF documents to stdout for CloudWatch to extract.
    """
    settings = get_settings()

    if settings.is_testing:
        from customer_service.infrastructure.observability.in_memory_metrics_emitter import (
            InMemoryMetricsEmitter,
        )

        return InMemoryMetricsEmitter()

    from customer_service.infrastructure.observability.emf_metrics_emitter import (
        EmfMetricsEmitter,
    )

    return EmfMetricsEmitter(namespace=settings.metrics_namespace)


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Note:
        Prefer get_db_session() for sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a transactional session (commit on success, rollback on error).

    Usage:
        async for session in get_db_session():
            handler = get_update_customer_handler(session)
    """
    async with get_database().get_session() as session:
        yield session
