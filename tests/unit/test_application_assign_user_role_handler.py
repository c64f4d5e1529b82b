"""Unit tests for AssignUserRoleHandler.

Tests cover:
- Administrator reassigns a user (company kept only for COMPANY_OWNER)
- Non-administrators are forbidden, including owners of the target company
- Self-reassignment is forbidden
- Store failures mapped to NOT_FOUND / COMMAND_VALIDATION_FAILED
"""

from typing import cast
from unittest.mock import AsyncMock, Mock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands import AssignUserRole
from src.application.commands.handlers.assign_user_role_handler import (
    AssignUserRoleHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.services.access_guard import AccessGuard
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.errors import AccessError
from src.domain.value_objects import Principal


@pytest.fixture
def mock_user_repo() -> AsyncMock:
    """Mock CompanyUserRepository."""
    repo = AsyncMock()
    repo.assign_role.return_value = Success(value=None)
    return repo


@pytest.fixture
def mock_logger() -> Mock:
    """Mock LoggerProtocol."""
    return Mock()


@pytest.fixture
def handler(mock_user_repo: AsyncMock, mock_logger: Mock) -> AssignUserRoleHandler:
    """AssignUserRoleHandler with mocked dependencies."""
    return AssignUserRoleHandler(mock_user_repo, AccessGuard(mock_logger), mock_logger)


class TestAssignUserRoleSuccess:
    """Administrator reassignments."""

    async def test_promote_to_company_owner(
        self,
        admin: Principal,
        company_a: UUID,
        handler: AssignUserRoleHandler,
        mock_user_repo: AsyncMock,
        mock_logger: Mock,
    ) -> None:
        """Test company is passed through for COMPANY_OWNER."""
        user_id = cast(UUID, uuid7())

        result = await handler.handle(
            AssignUserRole(
                principal=admin,
                user_id=user_id,
                role=UserRole.COMPANY_OWNER,
                company_id=company_a,
            )
        )

        assert result == Success(value=None)
        mock_user_repo.assign_role.assert_awaited_once_with(
            user_id, UserRole.COMPANY_OWNER, company_a
        )
        assert mock_logger.info.call_args.args == ("user_role_assigned",)

    async def test_company_dropped_for_customer(
        self,
        admin: Principal,
        company_a: UUID,
        handler: AssignUserRoleHandler,
        mock_user_repo: AsyncMock,
    ) -> None:
        """Test only company owners keep a company affiliation."""
        user_id = cast(UUID, uuid7())

        await handler.handle(
            AssignUserRole(
                principal=admin,
                user_id=user_id,
                role=UserRole.CUSTOMER,
                company_id=company_a,
            )
        )

        mock_user_repo.assign_role.assert_awaited_once_with(
            user_id, UserRole.CUSTOMER, None
        )


class TestAssignUserRoleDenied:
    """Forbidden reassignments."""

    async def test_owner_cannot_assign_roles(
        self,
        owner_of_a: Principal,
        company_a: UUID,
        handler: AssignUserRoleHandler,
        mock_user_repo: AsyncMock,
    ) -> None:
        """Test company owners cannot promote users, even in their company."""
        result = await handler.handle(
            AssignUserRole(
                principal=owner_of_a,
                user_id=cast(UUID, uuid7()),
                role=UserRole.COMPANY_OWNER,
                company_id=company_a,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        mock_user_repo.assign_role.assert_not_awaited()

    async def test_self_reassignment_forbidden(
        self,
        admin: Principal,
        handler: AssignUserRoleHandler,
        mock_user_repo: AsyncMock,
        mock_logger: Mock,
    ) -> None:
        """Test an administrator cannot change their own role."""
        result = await handler.handle(
            AssignUserRole(principal=admin, user_id=admin.id, role=UserRole.CUSTOMER)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.FORBIDDEN
        assert result.error.message == AccessError.SELF_ROLE_CHANGE
        assert result.error.details == {"reason": "self_role_change"}
        mock_user_repo.assign_role.assert_not_awaited()
        assert mock_logger.warning.call_args.args == ("access_denied",)


class TestAssignUserRoleStoreFailures:
    """Store failures are mapped, not raised."""

    async def test_unknown_user(
        self,
        admin: Principal,
        handler: AssignUserRoleHandler,
        mock_user_repo: AsyncMock,
    ) -> None:
        """Test NotFound maps to NOT_FOUND."""
        user_id = cast(UUID, uuid7())
        mock_user_repo.assign_role.return_value = Failure(
            error=NotFoundError(
                code=ErrorCode.USER_NOT_FOUND,
                message="User not found",
                resource_type="User",
                resource_id=str(user_id),
            )
        )

        result = await handler.handle(
            AssignUserRole(principal=admin, user_id=user_id, role=UserRole.CUSTOMER)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND

    async def test_owner_without_company(
        self,
        admin: Principal,
        handler: AssignUserRoleHandler,
        mock_user_repo: AsyncMock,
    ) -> None:
        """Test store validation failure maps to COMMAND_VALIDATION_FAILED."""
        mock_user_repo.assign_role.return_value = Failure(
            error=ValidationError(
                code=ErrorCode.COMPANY_REQUIRED_FOR_ROLE,
                message="A company owner must belong to a company",
                field="company_id",
            )
        )

        result = await handler.handle(
            AssignUserRole(
                principal=admin,
                user_id=cast(UUID, uuid7()),
                role=UserRole.COMPANY_OWNER,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.details == {"field": "company_id"}
