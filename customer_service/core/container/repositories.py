"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from customer_service.core.container.infrastructure import (
    get_cache_key_builder,
    get_logger,
    get_tag_aware_cache,
)

if TYPE_CHECKING:
    from customer_service.domain.protocols.customer_repository import (
        CustomerRepositoryProtocol,
    )


def get_customer_repository(session: AsyncSession) -> "CustomerRepositoryProtocol":
    """Get customer repository (request-scoped).

    Returns the SQLAlchemy repository wrapped in the caching decorator, so
    reads go through the tag-aware cache and writes go to the database.

    Args:
        session: Database session for request duration.
    """
    from customer_service.infrastructure.persistence.repositories import (
        CachedCustomerRepository,
        CustomerRepository,
    )

    return CachedCustomerRepository(
        inner=CustomerRepository(session),
        cache=get_tag_aware_cache(),
        cache_key_builder=get_cache_key_builder(),
        logger=get_logger(),
    )
