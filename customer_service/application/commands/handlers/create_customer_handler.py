"""CreateCustomer command handler.

Architecture:
- Application layer handler (orchestrates persistence and events)
- Depends on domain protocols only
- Expected failures (duplicate email) returned as Failure
- Event bus failures (cache invalidation) raised to the caller
"""

from ulid import ULID

from customer_service.application.commands.customer_commands import CreateCustomer
from customer_service.core.enums import ErrorCode
from customer_service.core.errors import ConflictError
from customer_service.core.result import Failure, Result, Success
from customer_service.domain.entities.customer import Customer
from customer_service.domain.events.customer_events import CustomerCreated
from customer_service.domain.protocols.customer_repository import (
    CustomerRepositoryProtocol,
)
from customer_service.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateCustomerHandler:
    """Handler for CreateCustomer command.

    Dependencies (injected via constructor):
        - CustomerRepositoryProtocol: For persistence (cached decorator)
        - EventBusProtocol: For domain events
    """

    def __init__(
        self,
        customer_repo: CustomerRepositoryProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._customer_repo = customer_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CreateCustomer) -> Result[Customer, ConflictError]:
        """Handle CreateCustomer command.

        Returns:
            Success(customer): Customer persisted with a new ULID.
            Failure(ConflictError): Email already belongs to a customer.

        Raises:
            Exception: If a CustomerCreated subscriber fails (cache
                invalidation). The customer is already persisted.

        Side Effects:
            - Saves the customer
            - Publishes CustomerCreated, which evicts stale lookups
        """
        if await self._customer_repo.find_by_email(cmd.email) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message="A customer with this email already exists",
                    resource_type="Customer",
                    conflicting_field="email",
                )
            )

        customer = Customer(
            ulid=str(ULID()),
            initials=cmd.initials,
            email=cmd.email,
            phone=cmd.phone,
            lead_source=cmd.lead_source,
            type=cmd.type,
            status=cmd.status,
            confirmed=cmd.confirmed,
        )
        await self._customer_repo.save(customer)

        await self._event_bus.publish(
            CustomerCreated(customer_id=customer.ulid, customer_email=customer.email)
        )
        return Success(value=customer)
