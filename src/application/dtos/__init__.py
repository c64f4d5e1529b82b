"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Usage:
    from src.application.dtos import CompanyResult, CompanyUserResult

Note:
    DTOs are NOT the same as:
    - Domain entities (may carry secrets such as password hashes)
    - API schemas (Pydantic models in src/schemas)
"""

from src.application.dtos.company_dtos import (
    CompanyListResult,
    CompanyResult,
    CompanyUserListResult,
    CompanyUserResult,
)

__all__ = [
    "CompanyListResult",
    "CompanyResult",
    "CompanyUserListResult",
    "CompanyUserResult",
]
