"""CustomerRepository - SQLAlchemy implementation of CustomerRepositoryProtocol.

Adapter for hexagonal architecture.
Maps between domain Customer entities and CustomerModel rows.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_service.domain.entities.customer import (
    Customer,
    CustomerStatus,
    CustomerType,
)
from customer_service.infrastructure.persistence.models.customer import CustomerModel

LOCK_NONE = 0
LOCK_PESSIMISTIC_READ = 1
LOCK_PESSIMISTIC_WRITE = 2


class CustomerRepository:
    """SQLAlchemy implementation of CustomerRepositoryProtocol.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CustomerRepository(session)
        ...     customer = await repo.find_by_email("jd@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self,
        customer_id: str,
        lock_mode: int = LOCK_NONE,
        lock_version: int | None = None,
    ) -> Customer | None:
        """Find customer by ULID.

        Args:
            customer_id: Customer ULID.
            lock_mode: LOCK_NONE, LOCK_PESSIMISTIC_READ (FOR SHARE) or
                LOCK_PESSIMISTIC_WRITE (FOR UPDATE).
            lock_version: Accepted for interface compatibility. Customer rows
                carry no version column, so it is not checked.

        Returns:
            Domain Customer if found, None otherwise.
        """
        stmt = select(CustomerModel).where(CustomerModel.ulid == customer_id)
        if lock_mode == LOCK_PESSIMISTIC_READ:
            stmt = stmt.with_for_update(read=True)
        elif lock_mode == LOCK_PESSIMISTIC_WRITE:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        model = result.unique().scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def find_by_email(self, email: str) -> Customer | None:
        """Find customer by email address (trimmed, case-insensitive).

        Args:
            email: Customer email address.

        Returns:
            Domain Customer if found, None otherwise.
        """
        stmt = select(CustomerModel).where(
            func.lower(CustomerModel.email) == email.strip().lower()
        )
        result = await self.session.execute(stmt)
        model = result.unique().scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def save(self, customer: Customer) -> None:
        """Insert or update a customer.

        Raises:
            IntegrityError: If the email already belongs to another customer.
        """
        model = await self.session.get(CustomerModel, customer.ulid)
        if model is None:
            self.session.add(self._to_model(customer))
        else:
            model.initials = customer.initials
            model.email = customer.email
            model.phone = customer.phone
            model.lead_source = customer.lead_source
            model.type_ulid = customer.type.ulid
            model.status_ulid = customer.status.ulid
            model.confirmed = customer.confirmed
            model.updated_at = customer.updated_at
        await self.session.commit()

    async def delete(self, customer: Customer) -> None:
        """Delete a customer row (no-op if already gone)."""
        model = await self.session.get(CustomerModel, customer.ulid)
        if model is None:
            return
        await self.session.delete(model)
        await self.session.commit()

    async def find_all(self, *, limit: int = 50, offset: int = 0) -> list[Customer]:
        """List customers ordered by ULID (creation order).

        Args:
            limit: Maximum rows to return.
            offset: Rows to skip.

        Returns:
            Domain customers.
        """
        stmt = (
            select(CustomerModel)
            .order_by(CustomerModel.ulid)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.unique().scalars().all()]

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(CustomerModel.ulid)))
        return int(result.scalar_one())

    def _to_domain(self, model: CustomerModel) -> Customer:
        return Customer(
            ulid=model.ulid,
            initials=model.initials,
            email=model.email,
            phone=model.phone,
            lead_source=model.lead_source,
            type=CustomerType(ulid=model.type.ulid, value=model.type.value),
            status=CustomerStatus(ulid=model.status.ulid, value=model.status.value),
            confirmed=model.confirmed,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, customer: Customer) -> CustomerModel:
        return CustomerModel(
            ulid=customer.ulid,
            initials=customer.initials,
            email=customer.email,
            phone=customer.phone,
            lead_source=customer.lead_source,
            type_ulid=customer.type.ulid,
            status_ulid=customer.status.ulid,
            confirmed=customer.confirmed,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )
