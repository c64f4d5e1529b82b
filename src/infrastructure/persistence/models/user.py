"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email: unique constraint is the authority for email uniqueness; the
      repository translates its IntegrityError into DuplicateEmailError
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model for every principal (customers, company owners, administrators).

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when user was created (from BaseMutableModel)
        updated_at: Timestamp when user last updated (from BaseMutableModel)
        name: Display name
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password (NEVER plaintext)
        role: UserRole value
        company_id: Owning company (nullable, required for company_owner)

    Indexes:
        - ix_users_email: (email) unique
        - idx_users_company_role: (company_id, role) for company user listings
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User display name",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    role: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="customer, company_owner or administrator",
    )

    company_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=True,
        comment="Owning company (required for company_owner)",
    )

    __table_args__ = (Index("idx_users_company_role", "company_id", "role"),)
