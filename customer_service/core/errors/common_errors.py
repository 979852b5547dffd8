"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate email)

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.CUSTOMER_NOT_FOUND,
        message="Customer not found",
        resource_type="Customer",
        resource_id=customer_id,
    ))
"""

from dataclasses import dataclass

from customer_service.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Customer, CustomerType, ...).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, ...).
    """

    resource_type: str
    conflicting_field: str | None = None
