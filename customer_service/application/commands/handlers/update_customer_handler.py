"""UpdateCustomer command handler.

Loads the customer through the repository (cached decorator), applies the
update and publishes CustomerUpdated. When the email changes the event
carries the previous email so entries cached under it are evicted too.
The update is applied to a copy: the loaded customer may be the cached
instance, and a failed save must leave it untouched.
"""

from dataclasses import replace

from customer_service.application.commands.customer_commands import UpdateCustomer
from customer_service.core.enums import ErrorCode
from customer_service.core.errors import ConflictError, NotFoundError
from customer_service.core.result import Failure, Result, Success
from customer_service.domain.entities.customer import Customer
from customer_service.domain.events.customer_events import CustomerUpdated
from customer_service.domain.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from customer_service.domain.protocols.event_bus_protocol import EventBusProtocol


class UpdateCustomerHandler:
    """Handler for UpdateCustomer command."""

    def __init__(
        self,
        customer_repo: CustomerRepositoryProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_bus = event_bus

    async def handle(
        self, cmd: UpdateCustomer
    ) -> Result[Customer, NotFoundError | ConflictError]:
        """Handle UpdateCustomer command.

        Returns:
            Success(customer): Updated customer.
            Failure(NotFoundError): No customer with that ULID.
            Failure(ConflictError): New email belongs to another customer.

        Raises:
            Exception: If a CustomerUpdated subscriber fails.
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

        previous_email = customer.email
        new_email = cmd.update.email
        if new_email != previous_email:
            owner = await self._customer_repo.find_by_email(new_email)
            if owner is not None and owner.ulid != customer.ulid:
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.EMAIL_ALREADY_EXISTS,
                        message="A customer with this email already exists",
                        resource_type="Customer",
                        conflicting_field="email",
                    )
                )

        customer = replace(customer)
        customer.update(cmd.update)
        await self._customer_repo.save(customer)

        await self._event_bus.publish(
            CustomerUpdated(
                customer_id=customer.ulid,
                current_email=customer.email,
                previous_email=previous_email if previous_email != customer.email else None,
            )
        )
        return Success(value=customer)
