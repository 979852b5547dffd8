"""Customer database models.

Tables:
    customer_types: Lookup of customer types
    customer_statuses: Lookup of customer statuses
    customers: Customer aggregate rows (type/status via foreign keys)
"""

from sqlalchemy import Boolean, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from customer_service.infrastructure.persistence.base import (
    ULID_LENGTH,
    BaseModel,
    BaseMutableModel,
)


class CustomerTypeModel(BaseModel):
    """Customer type lookup row."""

    __tablename__ = "customer_types"

    value: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)


class CustomerStatusModel(BaseModel):
    """Customer status lookup row."""

    __tablename__ = "customer_statuses"

    value: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)


class CustomerModel(BaseMutableModel):
    """Customer row.

    Email uniqueness is enforced case-insensitively by a functional index
    on lower(email), matching the lower(email) lookups in the repository.
    """

    __tablename__ = "customers"
    initials: Mapped[str] = mapped_column(String(16), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(32), nullable=False)
    lead_source: Mapped[str] = mapped_column(String(64), nullable=False)
    type_ulid: Mapped[str] = mapped_column(
        String(ULID_LENGTH), ForeignKey("customer_types.ulid"), nullable=False
    )
    status_ulid: Mapped[str] = mapped_column(
        String(ULID_LENGTH), ForeignKey("customer_statuses.ulid"), nullable=False
    )
    confirmed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )

    type: Mapped[CustomerTypeModel] = relationship(lazy="joined")
    status: Mapped[CustomerStatusModel] = relationship(lazy="joined")


Index("ix_customers_email_lower", func.lower(CustomerModel.email), unique=True)
