"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import CompanyCreateRequest, CompanyUserResponse
"""

from src.schemas.company_schemas import (
    CompanyCreateRequest,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdateRequest,
    CompanyUserCreateRequest,
    CompanyUserListResponse,
    CompanyUserResponse,
    CompanyUserUpdateRequest,
    UserRoleUpdateRequest,
)

__all__ = [
    "CompanyCreateRequest",
    "CompanyListResponse",
    "CompanyResponse",
    "CompanyUpdateRequest",
    "CompanyUserCreateRequest",
    "CompanyUserListResponse",
    "CompanyUserResponse",
    "CompanyUserUpdateRequest",
    "UserRoleUpdateRequest",
]
