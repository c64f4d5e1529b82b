"""Company and company user request and response schemas.

Pydantic schemas for company API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods

No request schema accepts a role for company user create/update: the store
assigns the role itself. Roles change only through UserRoleUpdateRequest.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.application.dtos import (
    CompanyListResult,
    CompanyResult,
    CompanyUserListResult,
    CompanyUserResult,
)
from src.domain.enums import UserRole


# =============================================================================
# Company Schemas
# =============================================================================


class CompanyCreateRequest(BaseModel):
    """Request to create a company.

    Attributes:
        name: Company display name.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Company name")

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Acme"}})


class CompanyUpdateRequest(BaseModel):
    """Request to rename a company.

    Attributes:
        name: New display name.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Company name")


class CompanyResponse(BaseModel):
    """Single company response."""

    id: UUID = Field(..., description="Company unique identifier")
    name: str = Field(..., description="Company name", examples=["Acme"])
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: CompanyResult) -> "CompanyResponse":
        """Convert application DTO to response schema.

        Args:
            dto: CompanyResult from handler.

        Returns:
            CompanyResponse for API response.
        """
        return cls(
            id=dto.id,
            name=dto.name,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CompanyListResponse(BaseModel):
    """Company list response."""

    companies: list[CompanyResponse] = Field(..., description="Companies, oldest first")
    total_count: int = Field(..., description="Number of companies")

    @classmethod
    def from_dto(cls, dto: CompanyListResult) -> "CompanyListResponse":
        return cls(
            companies=[CompanyResponse.from_dto(company) for company in dto.companies],
            total_count=dto.total_count,
        )


# =============================================================================
# Company User Schemas
# =============================================================================


class CompanyUserCreateRequest(BaseModel):
    """Request to create a user in a company.

    Attributes:
        name: Display name.
        email: Email address (unique across all companies).
        password: Plaintext password (hashed before storage).
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=8, max_length=72, description="Password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada",
                "email": "a@acme.com",
                "password": "SecurePass123!",
            }
        }
    )


class CompanyUserUpdateRequest(BaseModel):
    """Partial update of a company user. Omitted fields are unchanged.

    Attributes:
        name: New display name.
        email: New email address.
        password: New plaintext password.
    """

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None)
    password: str | None = Field(None, min_length=8, max_length=72)


class CompanyUserResponse(BaseModel):
    """Single company user response (never includes the password hash)."""

    id: UUID = Field(..., description="User unique identifier")
    company_id: UUID | None = Field(..., description="Owning company")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address (lowercase)")
    role: str = Field(..., description="Role", examples=["company_owner"])
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: CompanyUserResult) -> "CompanyUserResponse":
        """Convert application DTO to response schema.

        Args:
            dto: CompanyUserResult from handler.

        Returns:
            CompanyUserResponse for API response.
        """
        return cls(
            id=dto.id,
            company_id=dto.company_id,
            name=dto.name,
            email=dto.email,
            role=dto.role,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class CompanyUserListResponse(BaseModel):
    """Company user list response."""

    users: list[CompanyUserResponse] = Field(..., description="Users, oldest first")
    total_count: int = Field(..., description="Number of users")

    @classmethod
    def from_dto(cls, dto: CompanyUserListResult) -> "CompanyUserListResponse":
        return cls(
            users=[CompanyUserResponse.from_dto(user) for user in dto.users],
            total_count=dto.total_count,
        )


# =============================================================================
# Role Schemas
# =============================================================================


class UserRoleUpdateRequest(BaseModel):
    """Request to reassign a user's role (administrators only).

    Attributes:
        role: New role.
        company_id: Owning company, required when role is company_owner.
    """

    role: UserRole = Field(..., description="New role")
    company_id: UUID | None = Field(None, description="Company for company_owner")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "role": "company_owner",
                "company_id": "01920000-0000-7000-8000-000000000000",
            }
        }
    )
