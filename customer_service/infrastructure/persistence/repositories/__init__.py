"""Repository adapters."""

from customer_service.infrastructure.persistence.repositories.cached_customer_repository import (
    CachedCustomerRepository,
)
from customer_service.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)

__all__ = ["CachedCustomerRepository", "CustomerRepository"]
