"""Customer commands."""

from customer_service.application.commands.customer_commands import (
    CreateCustomer,
    DeleteCustomer,
    UpdateCustomer,
)

__all__ = ["CreateCustomer", "DeleteCustomer", "UpdateCustomer"]
