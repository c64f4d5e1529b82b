"""Company and company user DTOs.

Returned by handlers instead of domain entities so the presentation layer
never sees password hashes.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities import Company, User


@dataclass
class CompanyResult:
    """Single company result DTO.

    Attributes:
        id: Company unique identifier.
        name: Display name.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyResult":
        return cls(
            id=company.id,
            name=company.name,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )


@dataclass
class CompanyListResult:
    """Company list result DTO.

    Attributes:
        companies: Companies in insertion order.
        total_count: Number of companies.
    """

    companies: list[CompanyResult]
    total_count: int


@dataclass
class CompanyUserResult:
    """Single company user result DTO (no password hash).

    Attributes:
        id: User unique identifier.
        company_id: Owning company.
        name: Display name.
        email: Email address (lowercase).
        role: Role value.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    company_id: UUID | None
    name: str
    email: str
    role: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "CompanyUserResult":
        return cls(
            id=user.id,
            company_id=user.company_id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass
class CompanyUserListResult:
    """Company user list result DTO.

    Attributes:
        users: Company users in insertion order.
        total_count: Number of users.
    """

    users: list[CompanyUserResult]
    total_count: int
