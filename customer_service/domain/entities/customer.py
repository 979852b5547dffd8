"""Customer domain entities.

Pure business logic, no framework dependencies. The cache layer treats a
Customer as an opaque value: it is read, cached and handed back, never
mutated by the caching code.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class CustomerType:
    """Customer classification (e.g. "individual", "company").

    Attributes:
        ulid: Type identifier (ULID string).
        value: Human-readable type name.
    """

    ulid: str
    value: str


@dataclass
class CustomerStatus:
    """Customer lifecycle status (e.g. "active", "lead").

    Attributes:
        ulid: Status identifier (ULID string).
        value: Human-readable status name.
    """

    ulid: str
    value: str


@dataclass(frozen=True, kw_only=True)
class CustomerUpdate:
    """Full set of values applied to a customer by an update.

    Attributes:
        initials: New initials.
        email: New email address.
        phone: New phone number.
        lead_source: New lead source.
        type: New customer type.
        status: New customer status.
        confirmed: New confirmation flag.
    """

    initials: str
    email: str
    phone: str
    lead_source: str
    type: CustomerType
    status: CustomerStatus
    confirmed: bool


@dataclass
class Customer:
    """Customer aggregate.

    Identified by a ULID (lexicographically sortable 128-bit identifier)
    and a unique email address.

    Attributes:
        ulid: Customer identifier (26-character ULID string).
        initials: Customer initials.
        email: Unique email address.
        phone: Phone number.
        lead_source: Where the customer came from.
        type: Customer type.
        status: Customer status.
        confirmed: Whether the customer has been confirmed.
        created_at: Creation timestamp (UTC).
        updated_at: Last modification timestamp (UTC).

    Example:
        >>> customer = Customer(
        ...     ulid="01ARZ3NDEKTSV4RRFFQ69G5FAV",
        ...     initials="JD",
        ...     email="jd@example.com",
        ...     phone="+3706555555",
        ...     lead_source="Google",
        ...     type=CustomerType(ulid="01H...", value="individual"),
        ...     status=CustomerStatus(ulid="01H...", value="active"),
        ...     confirmed=False,
        ... )
    """

    ulid: str
    initials: str
    email: str
    phone: str
    lead_source: str
    type: CustomerType
    status: CustomerStatus
    confirmed: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def update(self, update: CustomerUpdate) -> None:
        """Apply an update and refresh updated_at.

        Args:
            update: New values for every mutable field.
        """
        self.initials = update.initials
        self.email = update.email
        self.phone = update.phone
        self.lead_source = update.lead_source
        self.type = update.type
        self.status = update.status
        self.confirmed = update.confirmed
        self.updated_at = datetime.now(UTC)
