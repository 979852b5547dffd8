"""Pytest configuration and shared fixtures.

- Registers markers and auto-marks async tests
- Resets lru_cache'd singletons (settings, container) and structlog between tests
- Provides customer factories and a mock logger
"""

import inspect
from unittest.mock import MagicMock

import pytest
import structlog

from customer_service.domain.entities.customer import (
    Customer,
    CustomerStatus,
    CustomerType,
)
from customer_service.infrastructure.cache.cache_keys import CacheKeyBuilder

CUSTOMER_ID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
CUSTOMER_EMAIL = "jane.doe@example.com"

INDIVIDUAL = CustomerType(ulid="01HZY8V2K3M4N5P6Q7R8S9T0V1", value="individual")
ACTIVE = CustomerStatus(ulid="01HZY8V2K3M4N5P6Q7R8S9T0V2", value="active")


def make_customer(
    ulid: str = CUSTOMER_ID,
    email: str = CUSTOMER_EMAIL,
    **overrides,
) -> Customer:
    """Helper to create a Customer for testing.

    Args:
        ulid: Customer ULID (default: CUSTOMER_ID).
        email: Customer email (default: CUSTOMER_EMAIL).
        **overrides: Any other Customer field.
    """
    fields = {
        "initials": "JD",
        "phone": "+3706555555",
        "lead_source": "Google",
        "type": INDIVIDUAL,
        "status": ACTIVE,
        "confirmed": False,
    }
    fields.update(overrides)
    return Customer(ulid=ulid, email=email, **fields)


@pytest.fixture
def customer() -> Customer:
    return make_customer()


@pytest.fixture
def mock_logger():
    """MagicMock logger exposing the LoggerProtocol methods."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def key_builder() -> CacheKeyBuilder:
    return CacheKeyBuilder()


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings, container singletons and structlog config around each test.

    ConsoleAdapter configures structlog globally with a PrintLogger bound to
    the stdout of the test that created it.
    """
    from customer_service.core import container
    from customer_service.core.config import get_settings

    caches = [
        get_settings,
        container.get_logger,
        container.get_redis_client,
        container.get_tag_aware_cache,
        container.get_cache_key_builder,
        container.get_metrics_emitter,
        container.get_database,
        container.get_event_bus,
    ]
    for cached in caches:
        cached.cache_clear()
    structlog.reset_defaults()
    yield
    for cached in caches:
        cached.cache_clear()
    structlog.reset_defaults()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real services"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
