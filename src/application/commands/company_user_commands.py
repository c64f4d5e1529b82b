"""Company user commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). None of the profile commands carries a role: the store
assigns COMPANY_OWNER itself, and only AssignUserRole changes roles.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole
from src.domain.value_objects import Principal


@dataclass(frozen=True, kw_only=True)
class CreateCompanyUser:
    """Create a user scoped to a company.

    Attributes:
        principal: Acting user.
        company_id: Owning company (from the URL path).
        name: Display name.
        email: Email address (validated and lowercased by the handler).
        password: Plaintext password (hashed by the handler, never stored or logged).

    Example:
        >>> command = CreateCompanyUser(
        ...     principal=admin,
        ...     company_id=acme_id,
        ...     name="Ada",
        ...     email="a@acme.com",
        ...     password="SecurePass123!",
        ... )
    """

    principal: Principal
    company_id: UUID
    name: str
    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class UpdateCompanyUser:
    """Partially update a company user's profile.

    Fields left as None keep their current value.

    Attributes:
        principal: Acting user.
        company_id: Owning company (from the URL path).
        user_id: User to update.
        name: New display name.
        email: New email address.
        password: New plaintext password.
    """

    principal: Principal
    company_id: UUID
    user_id: UUID
    name: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCompanyUser:
    """Delete a company user (hard delete).

    Attributes:
        principal: Acting user.
        company_id: Owning company (from the URL path).
        user_id: User to delete.
    """

    principal: Principal
    company_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class AssignUserRole:
    """Reassign a user's role and company affiliation.

    Administrator only. Nobody may reassign their own role.

    Attributes:
        principal: Acting user.
        user_id: User to reassign.
        role: New role.
        company_id: New company (required for COMPANY_OWNER, cleared otherwise).
    """

    principal: Principal
    user_id: UUID
    role: UserRole
    company_id: UUID | None = None
