"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Internal mixin that adds updated_at
- BaseMutableModel: Recommended base for mutable models (combines above)

Following hexagonal architecture:
- This is an infrastructure concern (database implementation detail)
- Domain entities should NOT inherit from this
- Domain entities are mapped to/from database models by repositories

Note: The models stay database-agnostic (SQLAlchemy's generic Uuid type) so
the same schema runs on PostgreSQL in production and SQLite in tests.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, event, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides common fields that ALL database models need:
    - id: UUIDv7 primary key (time-ordered, generated application-side)
    - created_at: Timestamp when record was created (UTC, microsecond
      precision, set application-side so insertion order is stable on every
      backend)

    This is an infrastructure concern - domain entities should not
    inherit from or depend on this class.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging).

        Returns:
            dict: Dictionary representation of the model.
        """
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates.

    Note:
        This is typically used via BaseMutableModel, not directly.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include updated_at.

        Returns:
            dict: Dictionary representation including updated_at.
        """
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models.

    Combines TimestampMixin + BaseModel with proper MRO.

    Provides:
        - id: UUID primary key (from BaseModel)
        - created_at: Timestamp when created (from BaseModel)
        - updated_at: Timestamp when last updated (from TimestampMixin)
    """

    __abstract__ = True


@event.listens_for(BaseMutableModel, "before_insert", propagate=True)
def _stamp_new_row(mapper: Any, connection: Any, target: BaseMutableModel) -> None:
    """Give a new row one timestamp so updated_at never precedes created_at."""
    now = _utcnow()
    if target.created_at is None:
        target.created_at = now
    if target.updated_at is None:
        target.updated_at = target.created_at
