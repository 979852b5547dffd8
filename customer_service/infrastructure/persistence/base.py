"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides ulid, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Recommended base for mutable models (combines above)

Primary keys are ULID strings generated by the application, not by the
database, so an aggregate has its identifier before it is first saved.

Domain entities do NOT inherit from these classes; repositories map
between the two.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

ULID_LENGTH = 26


class BaseModel(DeclarativeBase):
    """Base class for all database models (mutable and immutable).

    Provides:
    - ulid: 26-character ULID primary key
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    ulid: Mapped[str] = mapped_column(
        String(ULID_LENGTH),
        primary_key=True,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(ulid={self.ulid})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "ulid": self.ulid,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Note:
        Use BaseMutableModel instead of mixing this in manually.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Provides:
        - ulid: ULID primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
    """

    __abstract__ = True
