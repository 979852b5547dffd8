"""Domain entities."""

from customer_service.domain.entities.customer import (
    Customer,
    CustomerStatus,
    CustomerType,
    CustomerUpdate,
)

__all__ = ["Customer", "CustomerStatus", "CustomerType", "CustomerUpdate"]
