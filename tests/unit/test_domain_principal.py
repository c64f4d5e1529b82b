"""Unit tests for the Principal value object.

Reference:
    - src/domain/value_objects/principal.py
"""

from dataclasses import FrozenInstanceError
from typing import cast
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.enums import UserRole
from src.domain.value_objects import Principal


class TestPrincipalCreation:
    """Tests for Principal construction and validation."""

    def test_administrator_without_company(self) -> None:
        """Test administrators need no company."""
        principal = Principal(id=cast(UUID, uuid7()), role=UserRole.ADMINISTRATOR)

        assert principal.is_administrator
        assert principal.company_id is None

    def test_company_owner_with_company(self) -> None:
        """Test company owners carry their company."""
        company_id = cast(UUID, uuid7())

        principal = Principal(
            id=cast(UUID, uuid7()),
            role=UserRole.COMPANY_OWNER,
            company_id=company_id,
        )

        assert principal.company_id == company_id
        assert not principal.is_administrator

    def test_company_owner_without_company_raises(self) -> None:
        """Test a company owner must belong to a company."""
        with pytest.raises(ValueError, match="company"):
            Principal(id=cast(UUID, uuid7()), role=UserRole.COMPANY_OWNER)

    def test_string_role_is_coerced(self) -> None:
        """Test role strings from token claims are coerced to UserRole."""
        principal = Principal(id=cast(UUID, uuid7()), role="customer")  # type: ignore[arg-type]

        assert principal.role is UserRole.CUSTOMER

    def test_unknown_role_raises(self) -> None:
        """Test an unregistered role is rejected."""
        with pytest.raises(ValueError):
            Principal(id=cast(UUID, uuid7()), role="superuser")  # type: ignore[arg-type]

    def test_principal_is_immutable(self) -> None:
        """Test principal cannot be modified after creation."""
        principal = Principal(id=cast(UUID, uuid7()), role=UserRole.CUSTOMER)

        with pytest.raises(FrozenInstanceError):
            principal.role = UserRole.ADMINISTRATOR  # type: ignore[misc]


class TestPrincipalBelongsTo:
    """Tests for Principal.belongs_to."""

    def test_belongs_to_own_company(self) -> None:
        """Test matching company."""
        company_id = cast(UUID, uuid7())
        principal = Principal(
            id=cast(UUID, uuid7()), role=UserRole.COMPANY_OWNER, company_id=company_id
        )

        assert principal.belongs_to(company_id)

    def test_does_not_belong_to_other_company(self) -> None:
        """Test different company."""
        principal = Principal(
            id=cast(UUID, uuid7()),
            role=UserRole.COMPANY_OWNER,
            company_id=cast(UUID, uuid7()),
        )

        assert not principal.belongs_to(cast(UUID, uuid7()))

    def test_principal_without_company_belongs_nowhere(self) -> None:
        """Test None never matches, not even None."""
        principal = Principal(id=cast(UUID, uuid7()), role=UserRole.CUSTOMER)

        assert not principal.belongs_to(None)
