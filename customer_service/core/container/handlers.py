"""Customer command handler factories (request-scoped).

Each handler gets:
- CustomerRepository (cached decorator, request-scoped)
- EventBus (app-scoped singleton)
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from customer_service.core.container.events import get_event_bus
from customer_service.core.container.repositories import get_customer_repository

if TYPE_CHECKING:
    from customer_service.application.commands.handlers import (
        CreateCustomerHandler,
        DeleteCustomerHandler,
        UpdateCustomerHandler,
    )


def get_create_customer_handler(session: AsyncSession) -> "CreateCustomerHandler":
    from customer_service.application.commands.handlers import CreateCustomerHandler

    return CreateCustomerHandler(
        customer_repo=get_customer_repository(session),
        event_bus=get_event_bus(),
    )


def get_update_customer_handler(session: AsyncSession) -> "UpdateCustomerHandler":
    from customer_service.application.commands.handlers import UpdateCustomerHandler

    return UpdateCustomerHandler(
        customer_repo=get_customer_repository(session),
        event_bus=get_event_bus(),
    )


def get_delete_customer_handler(session: AsyncSession) -> "DeleteCustomerHandler":
    from customer_service.application.commands.handlers import DeleteCustomerHandler

    return DeleteCustomerHandler(
        customer_repo=get_customer_repository(session),
        event_bus=get_event_bus(),
    )
