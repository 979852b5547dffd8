"""Customer commands (CQRS write operations).

Commands represent intent to change customer state. All commands are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).
Handlers execute the logic and return Result types.
"""

from dataclasses import dataclass

from customer_service.domain.entities.customer import (
    CustomerStatus,
    CustomerType,
    CustomerUpdate,
)


@dataclass(frozen=True, kw_only=True)
class CreateCustomer:
    """Create a new customer.

    Attributes:
        initials: Customer initials.
        email: Unique email address.
        phone: Phone number.
        lead_source: Acquisition channel.
        type: Customer type.
        status: Initial status.
        confirmed: Whether the customer is already confirmed.

    Example:
        >>> command = CreateCustomer(
        ...     initials="JD",
        ...     email="jd@example.com",
        ...     phone="+3706555555",
        ...     lead_source="Google",
        ...     type=individual,
        ...     status=active,
        ... )
        >>> result = await handler.handle(command)
    """

    initials: str
    email: str
    phone: str
    lead_source: str
    type: CustomerType
    status: CustomerStatus
    confirmed: bool = False


@dataclass(frozen=True, kw_only=True)
class UpdateCustomer:
    """Replace a customer's mutable fields.

    Attributes:
        customer_id: ULID of the customer to update.
        update: New field values.
    """

    customer_id: str
    update: CustomerUpdate


@dataclass(frozen=True, kw_only=True)
class DeleteCustomer:
    """Delete a customer.

    Attributes:
        customer_id: ULID of the customer to delete.
    """

    customer_id: str
