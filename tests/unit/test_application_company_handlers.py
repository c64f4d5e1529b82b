"""Unit tests for company command and query handlers.

Tests cover:
- Administrator success paths (create, update, delete, list, get)
- Gate short-circuit: denied requests never reach the repository
- Name validation
- NotFound mapping

Architecture:
- Unit tests for application layer handlers
- Mocked repository (AsyncMock) and logger (Mock)
- Real AccessGuard (the gate is pure)
"""

from datetime import UTC, datetime
from typing import cast
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateCompany, DeleteCompany, UpdateCompany
from src.application.commands.handlers.company_handlers import (
    CreateCompanyHandler,
    DeleteCompanyHandler,
    UpdateCompanyHandler,
    normalize_company_name,
)
from src.application.errors import ApplicationErrorCode
from src.application.queries import GetCompany, ListCompanies
from src.application.queries.handlers.company_query_handlers import (
    GetCompanyHandler,
    ListCompaniesHandler,
)
from src.application.services.access_guard import AccessGuard
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.entities import Company
from src.domain.enums import UserRole
from src.domain.value_objects import Principal


# =============================================================================
# Test Fixtures
# =============================================================================


def create_test_company(name: str = "Acme", company_id: UUID | None = None) -> Company:
    """Create a Company entity for testing."""
    now = datetime.now(UTC)
    return Company(
        id=company_id or cast(UUID, uuid7()),
        name=name,
        created_at=now,
        updated_at=now,
    )


def company_not_found(company_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.COMPANY_NOT_FOUND,
        message="Company not found",
        resource_type="Company",
        resource_id=str(company_id),
    )


@pytest.fixture
def mock_company_repo() -> AsyncMock:
    """Mock CompanyRepository."""
    return AsyncMock()


@pytest.fixture
def mock_logger() -> Mock:
    """Mock LoggerProtocol."""
    return Mock()


@pytest.fixture
def guard(mock_logger: Mock) -> AccessGuard:
    """Real access guard with mocked logger."""
    return AccessGuard(logger=mock_logger)


@pytest.fixture
def owner() -> Principal:
    """A company owner (never allowed on the company kind)."""
    return Principal(
        id=cast(UUID, uuid7()),
        role=UserRole.COMPANY_OWNER,
        company_id=cast(UUID, uuid7()),
    )


# =============================================================================
# Name validation
# =============================================================================


class TestNormalizeCompanyName:
    """Tests for normalize_company_name."""

    def test_strips_whitespace(self) -> None:
        """Test surrounding whitespace is removed."""
        assert normalize_company_name("  Acme  ") == Success(value="Acme")

    def test_blank_name_rejected(self) -> None:
        """Test whitespace-only names are rejected."""
        result = normalize_company_name("   ")

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"field": "name"}

    def test_too_long_name_rejected(self) -> None:
        """Test names over 255 characters are rejected."""
        assert isinstance(normalize_company_name("x" * 256), Failure)


# =============================================================================
# CreateCompanyHandler
# =============================================================================


class TestCreateCompanyHandler:
    """Tests for CreateCompanyHandler."""

    async def test_administrator_creates_company(
        self,
        admin: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test successful creation returns the stored company."""
        company = create_test_company("Acme")
        mock_company_repo.create.return_value = Success(value=company.id)
        mock_company_repo.find_by_id.return_value = company
        handler = CreateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(CreateCompany(principal=admin, name=" Acme "))

        assert isinstance(result, Success)
        assert result.value.id == company.id
        assert result.value.name == "Acme"
        mock_company_repo.create.assert_awaited_once_with("Acme")
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.args == ("company_created",)

    async def test_owner_is_forbidden_and_store_untouched(
        self,
        owner: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test denial happens before any repository call."""
        handler = CreateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(CreateCompany(principal=owner, name="Acme"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert result.error.details == {"reason": "insufficient_role"}
        mock_company_repo.create.assert_not_awaited()
        mock_company_repo.find_by_id.assert_not_awaited()

    async def test_gate_runs_before_validation(
        self,
        customer: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test an unauthorized caller with bad input gets FORBIDDEN, not 400."""
        handler = CreateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(CreateCompany(principal=customer, name="   "))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN

    async def test_blank_name_is_validation_error(
        self,
        admin: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test validation failure never reaches the store."""
        handler = CreateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(CreateCompany(principal=admin, name=""))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        mock_company_repo.create.assert_not_awaited()


# =============================================================================
# UpdateCompanyHandler
# =============================================================================


class TestUpdateCompanyHandler:
    """Tests for UpdateCompanyHandler."""

    async def test_rename(
        self,
        admin: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test rename returns the updated company."""
        company = create_test_company("Acme Corp")
        mock_company_repo.update.return_value = Success(value=None)
        mock_company_repo.find_by_id.return_value = company
        handler = UpdateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(
            UpdateCompany(principal=admin, company_id=company.id, name="Acme Corp")
        )

        assert isinstance(result, Success)
        assert result.value.name == "Acme Corp"
        mock_company_repo.update.assert_awaited_once_with(company.id, "Acme Corp")

    async def test_unknown_company(
        self,
        admin: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test NotFound from the store maps to NOT_FOUND."""
        company_id = cast(UUID, uuid7())
        mock_company_repo.update.return_value = Failure(
            error=company_not_found(company_id)
        )
        handler = UpdateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(
            UpdateCompany(principal=admin, company_id=company_id, name="New")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_owner_cannot_rename_own_company(
        self,
        owner: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test company kind stays administrator-only for owners."""
        handler = UpdateCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(
            UpdateCompany(
                principal=owner,
                company_id=cast(UUID, owner.company_id),
                name="Mine",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        mock_company_repo.update.assert_not_awaited()


# =============================================================================
# DeleteCompanyHandler
# =============================================================================


class TestDeleteCompanyHandler:
    """Tests for DeleteCompanyHandler."""

    async def test_delete(
        self,
        admin: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test successful delete."""
        company_id = cast(UUID, uuid7())
        mock_company_repo.delete.return_value = Success(value=None)
        handler = DeleteCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(DeleteCompany(principal=admin, company_id=company_id))

        assert result == Success(value=None)
        assert mock_logger.info.call_args.args == ("company_deleted",)

    async def test_delete_twice_is_not_found(
        self,
        admin: Principal,
        mock_company_repo: AsyncMock,
        guard: AccessGuard,
        mock_logger: Mock,
    ) -> None:
        """Test delete is not idempotent."""
        company_id = cast(UUID, uuid7())
        mock_company_repo.delete.return_value = Failure(
            error=company_not_found(company_id)
        )
        handler = DeleteCompanyHandler(mock_company_repo, guard, mock_logger)

        result = await handler.handle(DeleteCompany(principal=admin, company_id=company_id))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        mock_logger.info.assert_not_called()


# =============================================================================
# Query handlers
# =============================================================================


class TestCompanyQueryHandlers:
    """Tests for ListCompaniesHandler and GetCompanyHandler."""

    async def test_list_companies(
        self, admin: Principal, mock_company_repo: AsyncMock, guard: AccessGuard
    ) -> None:
        """Test list keeps repository order."""
        first, second = create_test_company("Acme"), create_test_company("Globex")
        mock_company_repo.list_all.return_value = [first, second]
        handler = ListCompaniesHandler(mock_company_repo, guard)

        result = await handler.handle(ListCompanies(principal=admin))

        assert isinstance(result, Success)
        assert [c.name for c in result.value.companies] == ["Acme", "Globex"]
        assert result.value.total_count == 2

    async def test_list_companies_forbidden_for_customer(
        self, customer: Principal, mock_company_repo: AsyncMock, guard: AccessGuard
    ) -> None:
        """Test customers cannot list companies."""
        handler = ListCompaniesHandler(mock_company_repo, guard)

        result = await handler.handle(ListCompanies(principal=customer))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        mock_company_repo.list_all.assert_not_awaited()

    async def test_get_company(
        self, admin: Principal, mock_company_repo: AsyncMock, guard: AccessGuard
    ) -> None:
        """Test get returns the company."""
        company = create_test_company()
        mock_company_repo.find_by_id.return_value = company
        handler = GetCompanyHandler(mock_company_repo, guard)

        result = await handler.handle(GetCompany(principal=admin, company_id=company.id))

        assert isinstance(result, Success)
        assert result.value.id == company.id

    async def test_get_missing_company(
        self, admin: Principal, mock_company_repo: AsyncMock, guard: AccessGuard
    ) -> None:
        """Test missing company maps to NOT_FOUND."""
        mock_company_repo.find_by_id.return_value = None
        handler = GetCompanyHandler(mock_company_repo, guard)

        result = await handler.handle(
            GetCompany(principal=admin, company_id=cast(UUID, uuid7()))
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
