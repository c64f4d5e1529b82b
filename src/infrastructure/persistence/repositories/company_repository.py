"""CompanyRepository - SQLAlchemy implementation of CompanyRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Company entities and database CompanyModel.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities import Company
from src.infrastructure.persistence.models.company import Company as CompanyModel
from src.infrastructure.persistence.models.user import User as UserModel


class CompanyRepository:
    """SQLAlchemy implementation of CompanyRepository protocol.

    This class does NOT inherit from CompanyRepository protocol (Protocol uses
    structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = CompanyRepository(session)
        ...     result = await repo.create("Acme")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, name: str) -> Result[UUID, DomainError]:
        """Create a new company.

        Args:
            name: Company display name.

        Returns:
            Success(company_id).
        """
        company_model = CompanyModel(name=name)
        self.session.add(company_model)
        await self.session.commit()
        await self.session.refresh(company_model)

        return Success(value=company_model.id)

    async def find_by_id(self, company_id: UUID) -> Company | None:
        """Find company by ID.

        Args:
            company_id: Company's unique identifier.

        Returns:
            Domain Company entity if found, None otherwise.
        """
        company_model = await self._get_model(company_id)
        if company_model is None:
            return None

        return self._to_domain(company_model)

    async def list_all(self) -> list[Company]:
        """List every company in insertion order.

        Returns:
            List of domain Company entities (empty if none).
        """
        stmt = select(CompanyModel).order_by(CompanyModel.created_at, CompanyModel.id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def update(self, company_id: UUID, name: str) -> Result[None, DomainError]:
        """Rename a company.

        Args:
            company_id: Company to update.
            name: New display name.

        Returns:
            Success(None), or Failure(NotFoundError) if company doesn't exist.
        """
        company_model = await self._get_model(company_id)
        if company_model is None:
            return Failure(error=_company_not_found(company_id))

        company_model.name = name
        await self.session.commit()

        return Success(value=None)

    async def delete(self, company_id: UUID) -> Result[None, DomainError]:
        """Delete a company together with its users (hard delete).

        Users are removed explicitly before the company row so the result does
        not depend on the backend enforcing ON DELETE CASCADE.

        Args:
            company_id: Company to delete.

        Returns:
            Success(None), or Failure(NotFoundError) if company doesn't exist.
        """
        company_model = await self._get_model(company_id)
        if company_model is None:
            return Failure(error=_company_not_found(company_id))

        await self.session.execute(
            delete(UserModel).where(UserModel.company_id == company_id)
        )
        await self.session.delete(company_model)
        await self.session.commit()

        return Success(value=None)

    async def _get_model(self, company_id: UUID) -> CompanyModel | None:
        stmt = select(CompanyModel).where(CompanyModel.id == company_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_domain(self, company_model: CompanyModel) -> Company:
        """Convert database model to domain entity.

        Args:
            company_model: SQLAlchemy CompanyModel instance.

        Returns:
            Domain Company entity.
        """
        return Company(
            id=company_model.id,
            name=company_model.name,
            created_at=company_model.created_at,
            updated_at=company_model.updated_at,
        )


def _company_not_found(company_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.COMPANY_NOT_FOUND,
        message="Company not found",
        resource_type="Company",
        resource_id=str(company_id),
    )
