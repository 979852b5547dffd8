"""Customer command handlers."""

from customer_service.application.commands.handlers.create_customer_handler import (
    CreateCustomerHandler,
)
from customer_service.application.commands.handlers.delete_customer_handler import (
    DeleteCustomerHandler,
)
from customer_service.application.commands.handlers.update_customer_handler import (
    UpdateCustomerHandler,
)

__all__ = ["CreateCustomerHandler", "DeleteCustomerHandler", "UpdateCustomerHandler"]
