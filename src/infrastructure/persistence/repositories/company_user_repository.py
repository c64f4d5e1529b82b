"""CompanyUserRepository - SQLAlchemy implementation of the company-scoped store.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.

Every lookup is filtered by company_id AND role, so a user of another company
(or a customer/administrator row) is indistinguishable from a missing one.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import (
    DomainError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import User
from src.domain.enums import UserRole
from src.domain.value_objects import UserProfile
from src.infrastructure.persistence.models.company import Company as CompanyModel
from src.infrastructure.persistence.models.user import User as UserModel


class CompanyUserRepository:
    """SQLAlchemy implementation of CompanyUserRepository protocol.

    This class does NOT inherit from CompanyUserRepository protocol (Protocol
    uses structural typing).

    Email uniqueness is enforced by the users.email unique index. A violation
    surfaces as IntegrityError on commit; the session is rolled back and the
    caller receives DuplicateEmailError, never the raw storage error.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CompanyUserRepository(session)
        ...     result = await repo.list_for_company(acme_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(
        self, company_id: UUID, profile: UserProfile
    ) -> Result[UUID, DomainError]:
        """Create a company user with role COMPANY_OWNER.

        Args:
            company_id: Owning company.
            profile: Name, email and password hash.

        Returns:
            Success(user_id), Failure(NotFoundError) for unknown company,
            Failure(DuplicateEmailError) if the email is already taken.
        """
        if not await self._company_exists(company_id):
            return Failure(error=_company_not_found(company_id))

        if profile.password_hash is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Password hash is required to create a user",
                    field="password",
                )
            )

        user_model = UserModel(
            name=profile.name,
            email=profile.email.lower(),
            password_hash=profile.password_hash,
            role=UserRole.COMPANY_OWNER.value,
            company_id=company_id,
        )
        self.session.add(user_model)

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            if not await self._company_exists(company_id):
                return Failure(error=_company_not_found(company_id))
            return Failure(error=DuplicateEmailError())

        await self.session.refresh(user_model)
        return Success(value=user_model.id)

    async def find(self, company_id: UUID, user_id: UUID) -> Result[User, DomainError]:
        """Fetch one company user within company scope.

        Args:
            company_id: Owning company.
            user_id: User to fetch.

        Returns:
            Success(User) or Failure(NotFoundError).
        """
        user_model = await self._get_scoped_model(company_id, user_id)
        if user_model is None:
            return Failure(error=_user_not_found(user_id))

        return Success(value=self._to_domain(user_model))

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
        user_model = await self._get_scoped_model(company_id, user_id)
        if user_model is None:
            return Failure(error=_user_not_found(user_id))

        user_model.name = profile.name
        user_model.email = profile.email.lower()
        if profile.password_hash is not None:
            user_model.password_hash = profile.password_hash

        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(error=DuplicateEmailError())

        return Success(value=None)

    async def delete(self, company_id: UUID, user_id: UUID) -> Result[None, DomainError]:
        """Delete a company user (hard delete).

        Args:
            company_id: Owning company.
            user_id: User to delete.

        Returns:
            Success(None), or Failure(NotFoundError) (including a repeat delete).
        """
        user_model = await self._get_scoped_model(company_id, user_id)
        if user_model is None:
            return Failure(error=_user_not_found(user_id))

        await self.session.delete(user_model)
        await self.session.commit()

        return Success(value=None)

    async def list_for_company(self, company_id: UUID) -> Result[list[User], DomainError]:
        """List a company's users in insertion order.

        Args:
            company_id: Owning company.

        Returns:
            Success(list) (possibly empty), or Failure(NotFoundError) for an
            unknown company.
        """
        if not await self._company_exists(company_id):
            return Failure(error=_company_not_found(company_id))

        stmt = (
            select(UserModel)
            .where(
                UserModel.company_id == company_id,
                UserModel.role == UserRole.COMPANY_OWNER.value,
            )
            .order_by(UserModel.created_at, UserModel.id)
        )
        result = await self.session.execute(stmt)
        return Success(value=[self._to_domain(model) for model in result.scalars().all()])

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
        if role == UserRole.COMPANY_OWNER and company_id is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.COMPANY_REQUIRED_FOR_ROLE,
                    message="A company owner must belong to a company",
                    field="company_id",
                )
            )

        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        user_model = result.scalar_one_or_none()
        if user_model is None:
            return Failure(error=_user_not_found(user_id))

        if company_id is not None and not await self._company_exists(company_id):
            return Failure(error=_company_not_found(company_id))

        user_model.role = role.value
        user_model.company_id = company_id
        await self.session.commit()

        return Success(value=None)

    async def _company_exists(self, company_id: UUID) -> bool:
        stmt = select(CompanyModel.id).where(CompanyModel.id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def _get_scoped_model(
        self, company_id: UUID, user_id: UUID
    ) -> UserModel | None:
        stmt = select(UserModel).where(
            UserModel.id == user_id,
            UserModel.company_id == company_id,
            UserModel.role == UserRole.COMPANY_OWNER.value,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, user_model: UserModel) -> User:
        """Convert database model to domain entity.

        Args:
            user_model: SQLAlchemy UserModel instance.

        Returns:
            Domain User entity.
        """
        return User(
            id=user_model.id,
            name=user_model.name,
            email=user_model.email,
            password_hash=user_model.password_hash,
            role=UserRole(user_model.role),
            company_id=user_model.company_id,
            created_at=user_model.created_at,
            updated_at=user_model.updated_at,
        )


def _company_not_found(company_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.COMPANY_NOT_FOUND,
        message="Company not found",
        resource_type="Company",
        resource_id=str(company_id),
    )


def _user_not_found(user_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.USER_NOT_FOUND,
        message="User not found",
        resource_type="User",
        resource_id=str(user_id),
    )
