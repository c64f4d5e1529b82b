"""Integration tests for CompanyRepository.

Tests cover:
- Create and retrieve company
- List in insertion order
- Rename
- Delete (including its users) and repeated delete

Architecture:
- Integration tests with a real database (in-memory SQLite via aiosqlite)
- Uses test_database fixture (fresh instance per test)
- Tests actual database operations, not mocked behavior
"""

from typing import cast
from uuid import UUID

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.value_objects import UserProfile
from src.infrastructure.persistence.models.user import User as UserModel
from src.infrastructure.persistence.repositories import (
    CompanyRepository,
    CompanyUserRepository,
)


@pytest_asyncio.fixture
async def company_repository(test_database):
    """Provide CompanyRepository with test database session."""
    async with test_database.get_session() as session:
        yield CompanyRepository(session=session)


@pytest.mark.integration
class TestCompanyRepositoryCreate:
    """Test CompanyRepository create and read operations."""

    async def test_create_and_find(self, company_repository: CompanyRepository) -> None:
        """Test a created company can be found by id."""
        result = await company_repository.create("Acme")

        assert isinstance(result, Success)
        company = await company_repository.find_by_id(result.value)
        assert company is not None
        assert company.name == "Acme"
        assert company.created_at is not None

    async def test_new_company_timestamps_match(
        self, company_repository: CompanyRepository
    ) -> None:
        """Test a new row starts with updated_at equal to created_at."""
        result = await company_repository.create("Acme")

        assert isinstance(result, Success)
        company = await company_repository.find_by_id(result.value)
        assert company is not None
        assert company.updated_at == company.created_at

    async def test_find_missing_returns_none(
        self, company_repository: CompanyRepository
    ) -> None:
        """Test unknown id returns None."""
        assert await company_repository.find_by_id(cast(UUID, uuid7())) is None

    async def test_list_in_insertion_order(
        self, company_repository: CompanyRepository
    ) -> None:
        """Test list_all returns oldest first."""
        for name in ["Acme", "Globex", "Initech"]:
            await company_repository.create(name)

        companies = await company_repository.list_all()

        assert [c.name for c in companies] == ["Acme", "Globex", "Initech"]

    async def test_list_empty(self, company_repository: CompanyRepository) -> None:
        """Test empty store lists nothing."""
        assert await company_repository.list_all() == []


@pytest.mark.integration
class TestCompanyRepositoryUpdate:
    """Test CompanyRepository rename."""

    async def test_rename(self, company_repository: CompanyRepository) -> None:
        """Test update changes the name."""
        created = await company_repository.create("Acme")
        assert isinstance(created, Success)

        result = await company_repository.update(created.value, "Acme Corp")

        assert result == Success(value=None)
        company = await company_repository.find_by_id(created.value)
        assert company is not None
        assert company.name == "Acme Corp"

    async def test_rename_missing(self, company_repository: CompanyRepository) -> None:
        """Test renaming an unknown company is NotFound."""
        result = await company_repository.update(cast(UUID, uuid7()), "Nope")

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.COMPANY_NOT_FOUND


@pytest.mark.integration
class TestCompanyRepositoryDelete:
    """Test CompanyRepository delete."""

    async def test_delete_twice(self, company_repository: CompanyRepository) -> None:
        """Test second delete of the same company is NotFound."""
        created = await company_repository.create("Acme")
        assert isinstance(created, Success)

        first = await company_repository.delete(created.value)
        second = await company_repository.delete(created.value)

        assert first == Success(value=None)
        assert isinstance(second, Failure)
        assert isinstance(second.error, NotFoundError)

    async def test_delete_removes_company_users(self, test_database) -> None:
        """Test deleting a company deletes its users but not others'."""
        async with test_database.get_session() as session:
            companies = CompanyRepository(session)
            users = CompanyUserRepository(session)
            acme = await companies.create("Acme")
            globex = await companies.create("Globex")
            assert isinstance(acme, Success) and isinstance(globex, Success)
            await users.create(
                acme.value,
                UserProfile(name="Ada", email="a@acme.com", password_hash="h"),
            )
            await users.create(
                globex.value,
                UserProfile(name="Gus", email="g@globex.com", password_hash="h"),
            )

            result = await companies.delete(acme.value)

            assert result == Success(value=None)
            remaining = await session.execute(select(UserModel.email))
            assert remaining.scalars().all() == ["g@globex.com"]
            count = await session.execute(select(func.count()).select_from(UserModel))
            assert count.scalar_one() == 1
