"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetCompany, ListCompanyUsers).

Each query has a corresponding handler that checks access and then fetches
the requested data. Queries NEVER change state.
"""

from src.application.queries.company_queries import (
    GetCompany,
    GetCompanyUser,
    ListCompanies,
    ListCompanyUsers,
)

__all__ = [
    "GetCompany",
    "GetCompanyUser",
    "ListCompanies",
    "ListCompanyUsers",
]
