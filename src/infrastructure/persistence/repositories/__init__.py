"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.company_repository import (
    CompanyRepository,
)
from src.infrastructure.persistence.repositories.company_user_repository import (
    CompanyUserRepository,
)

__all__ = [
    "CompanyRepository",
    "CompanyUserRepository",
]
