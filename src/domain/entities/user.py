"""User domain entity.

Pure business logic, no framework dependencies. Every principal the system
knows about is a User row; "company users" are the rows with role
COMPANY_OWNER and a company_id.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import UserRole
from src.domain.value_objects import Principal


@dataclass
class User:
    """User domain entity.

    Business Rules:
        - Email is globally unique (stored lowercase)
        - A COMPANY_OWNER always has company_id set
        - Role is assigned by the store or by an administrator, never by
          the user themselves

    Attributes:
        id: Unique user identifier
        name: Display name
        email: Email address (lowercase)
        password_hash: Bcrypt hashed password (never plaintext)
        role: Assigned role
        company_id: Owning company (required for COMPANY_OWNER)
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     name="Ada",
        ...     email="a@acme.com",
        ...     password_hash="$2b$12$...",
        ...     role=UserRole.COMPANY_OWNER,
        ...     company_id=acme_id,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.is_company_user_of(acme_id)
        True
    """

    id: UUID
    name: str
    email: str
    password_hash: str
    role: UserRole
    company_id: UUID | None
    created_at: datetime
    updated_at: datetime

    def is_company_user_of(self, company_id: UUID) -> bool:
        """Check if this user is a company user of company_id.

        Args:
            company_id: Company to check.

        Returns:
            bool: True if role is COMPANY_OWNER and company matches.
        """
        return self.role == UserRole.COMPANY_OWNER and self.company_id == company_id

    def to_principal(self) -> Principal:
        """Build the Principal this user authenticates as.

        Returns:
            Principal: Value object carrying id, role and company.
        """
        return Principal(id=self.id, role=self.role, company_id=self.company_id)
