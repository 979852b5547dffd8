"""CustomerRepository protocol for customer persistence.

Port (interface) for hexagonal architecture. Implemented by the SQLAlchemy
repository (system of record) and by the caching decorator, which must stay
substitutable wherever the undecorated repository is used.
"""

from typing import Protocol

from customer_service.domain.entities.customer import Customer


class CustomerRepositoryProtocol(Protocol):
    """Customer repository protocol (port).

    Methods:
        find: Retrieve customer by ULID
        find_by_email: Retrieve customer by email
        save: Create or update customer
        delete: Remove customer
        find_all: Page through customers
        count: Count customers
    """

    async def find(
        self,
        customer_id: str,
        lock_mode: int = 0,
        lock_version: int | None = None,
    ) -> Customer | None:
        """Find customer by ULID.

        Args:
            customer_id: Customer ULID.
            lock_mode: Lock mode hint (0 = none). Passed through untouched.
            lock_version: Expected version for optimistic locking.

        Returns:
            Customer if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Customer | None:
        """Find customer by email (case-insensitive).

        Returns:
            Customer if found, None otherwise.
        """
        ...

    async def save(self, customer: Customer) -> None:
        """Create or update customer."""
        ...

    async def delete(self, customer: Customer) -> None:
        """Delete customer."""
        ...

    async def find_all(self, *, limit: int = 50, offset: int = 0) -> list[Customer]:
        """List customers ordered by ULID."""
        ...

    async def count(self) -> int:
        """Count customers."""
        ...
