"""SQLAlchemy models."""

from customer_service.infrastructure.persistence.models.customer import (
    CustomerModel,
    CustomerStatusModel,
    CustomerTypeModel,
)

__all__ = ["CustomerModel", "CustomerStatusModel", "CustomerTypeModel"]
