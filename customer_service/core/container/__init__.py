"""Container module - Centralized dependency injection.

Re-exports factory functions from submodules:

    from customer_service.core.container import get_event_bus, get_logger

- infrastructure: Core services (logging, cache, db, metrics)
- events: Event bus and registry-driven subscriptions
- repositories: Repository factories
- handlers: Command handler factories
"""

from customer_service.core.container.events import get_event_bus
from customer_service.core.container.handlers import (
    get_create_customer_handler,
    get_delete_customer_handler,
    get_update_customer_handler,
)
from customer_service.core.container.infrastructure import (
    get_cache_key_builder,
    get_database,
    get_db_session,
    get_logger,
    get_metrics_emitter,
    get_redis_client,
    get_tag_aware_cache,
)
from customer_service.core.container.repositories import get_customer_repository

__all__ = [
    "get_cache_key_builder",
    "get_create_customer_handler",
    "get_customer_repository",
    "get_database",
    "get_db_session",
    "get_delete_customer_handler",
    "get_event_bus",
    "get_logger",
    "get_metrics_emitter",
    "get_redis_client",
    "get_tag_aware_cache",
    "get_update_customer_handler",
]
