"""CompanyUserRepository protocol: the company-scoped resource store.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

Scoping invariant:
    Every operation takes the owning company_id. A user that exists but is
    not a company user of that company is reported as NotFound, so the store
    rejects cross-company access even if the access gate were bypassed.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.value_objects import UserProfile


class CompanyUserRepository(Protocol):
    """Company-scoped user store (port).

    Failure values:
        NotFoundError: unknown company, or user outside the company scope
        DuplicateEmailError: email already used by a different user
        ValidationError: role/company combination violates an invariant
    """

    async def create(
        self, company_id: UUID, profile: UserProfile
    ) -> Result[UUID, DomainError]:
        """Create a company user.

        Role is always COMPANY_OWNER and company_id is always the given one.
        Callers cannot choose a role.

        Args:
            company_id: Owning company.
            profile: Name, email and password hash.

        Returns:
            Success(user_id), Failure(NotFoundError) for unknown company,
            Failure(DuplicateEmailError) if the email exists in any company.
            On failure no row is written.
        """
        ...

    async def find(self, company_id: UUID, user_id: UUID) -> Result[User, DomainError]:
        """Fetch one company user within company scope.

        Args:
            company_id: Owning company.
            user_id: User to fetch.

        Returns:
            Success(User) or Failure(NotFoundError).
        """
        ...

    async def update(
        self, company_id: UUID, user_id: UUID, profile: UserProfile
    ) -> Result[None, DomainError]:
        """Update a company user's profile.

        Args:
            company_id: Owning company.
            user_id: User to update.
            profile: New values. password_hash=None keeps the current hash.

        Returns:
            Success(None), Failure(NotFoundError) if user isn't in the company,
            Failure(DuplicateEmailError) if email belongs to another user.
        """
        ...

    async def delete(self, company_id: UUID, user_id: UUID) -> Result[None, DomainError]:
        """Delete a company user. Not idempotent.

        Args:
            company_id: Owning company.
            user_id: User to delete.

        Returns:
            Success(None), or Failure(NotFoundError) (including a repeat delete).
        """
        ...

    async def list_for_company(self, company_id: UUID) -> Result[list[User], DomainError]:
        """List a company's users (role COMPANY_OWNER) in insertion order.

        Args:
            company_id: Owning company.

        Returns:
            Success(list) (possibly empty), or Failure(NotFoundError) for an
            unknown company.
        """
        ...

    async def assign_role(
        self, user_id: UUID, role: UserRole, company_id: UUID | None
    ) -> Result[None, DomainError]:
        """Reassign a user's role and company affiliation.

        Args:
            user_id: User to reassign.
            role: New role.
            company_id: New company. Required when role is COMPANY_OWNER.

        Returns:
            Success(None), Failure(NotFoundError) for unknown user/company,
            Failure(ValidationError) for a company owner without company.
        """
        ...
