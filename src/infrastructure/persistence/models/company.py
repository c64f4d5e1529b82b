"""Company database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Company(BaseMutableModel):
    """Company model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when company was created (from BaseMutableModel)
        updated_at: Timestamp when company was last updated (from BaseMutableModel)
        name: Display name

    Relationships:
        - users: One-to-many via users.company_id (ON DELETE CASCADE)
    """

    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Company display name",
    )
