"""CompanyRepository protocol for company persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.entities import Company


class CompanyRepository(Protocol):
    """Company repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        create: Persist a new company
        find_by_id: Retrieve company by ID
        list_all: All companies in insertion order
        update: Rename a company
        delete: Delete a company and its users
    """

    async def create(self, name: str) -> Result[UUID, DomainError]:
        """Create a new company.

        Args:
            name: Company display name.

        Returns:
            Success(company_id).
        """
        ...

    async def find_by_id(self, company_id: UUID) -> Company | None:
        """Find company by ID.

        Args:
            company_id: Company's unique identifier.

        Returns:
            Company if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Company]:
        """List every company, oldest first.

        Returns:
            List of companies (empty if none).
        """
        ...

    async def update(self, company_id: UUID, name: str) -> Result[None, DomainError]:
        """Rename a company.

        Args:
            company_id: Company to update.
            name: New display name.

        Returns:
            Success(None), or Failure(NotFoundError) if company doesn't exist.
        """
        ...

    async def delete(self, company_id: UUID) -> Result[None, DomainError]:
        """Delete a company together with its users.

        Args:
            company_id: Company to delete.

        Returns:
            Success(None), or Failure(NotFoundError) if company doesn't exist.
        """
        ...
