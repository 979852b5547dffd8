"""DeleteCustomer command handler."""

from customer_service.application.commands.customer_commands import DeleteCustomer
from customer_service.core.enums import ErrorCode
from customer_service.core.errors import NotFoundError
from customer_service.core.result import Failure, Result, Success
from customer_service.domain.events.customer_events import CustomerDeleted
from customer_service.domain.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from customer_service.domain.protocols.event_bus_protocol import EventBusProtocol


class DeleteCustomerHandler:
    """Handler for DeleteCustomer command.

    Dependencies (injected via constructor):
        - CustomerRepositoryProtocol: For persistence
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        customer_repo: CustomerRepositoryProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteCustomer) -> Result[None, NotFoundError]:
        """Handle DeleteCustomer command.

        Returns:
            Success(None): Customer deleted.
            Failure(NotFoundError): No customer with that ULID.

        Raises:
            Exception: If a CustomerDeleted subscriber fails.
        """
        customer = await self._customer_repo.find(cmd.customer_id)
        if customer is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.CUSTOMER_NOT_FOUND,
                    message="Customer not found",
                    resource_type="Customer",
                    resource_id=cmd.customer_id,
                )
            )

        await self._customer_repo.delete(customer)
        await self._event_bus.publish(
            CustomerDeleted(customer_id=customer.ulid, customer_email=customer.email)
        )
        return Success(value=None)
