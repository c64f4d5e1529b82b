"""Company and company user queries (CQRS read operations).

Queries represent requests for data. They are immutable dataclasses that
never change state. Like commands, every query carries the acting principal.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import Principal


@dataclass(frozen=True, kw_only=True)
class ListCompanies:
    """List every company (administrator only).

    Attributes:
        principal: Acting user.
    """

    principal: Principal


@dataclass(frozen=True, kw_only=True)
class GetCompany:
    """Retrieve a single company (administrator only).

    Attributes:
        principal: Acting user.
        company_id: Company to fetch.
    """

    principal: Principal
    company_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListCompanyUsers:
    """List the users of a company in insertion order.

    Attributes:
        principal: Acting user.
        company_id: Owning company.

    Example:
        >>> query = ListCompanyUsers(principal=admin, company_id=acme_id)
        >>> result = await handler.handle(query)
    """

    principal: Principal
    company_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetCompanyUser:
    """Retrieve a single company user.

    Attributes:
        principal: Acting user.
        company_id: Owning company.
        user_id: User to fetch.
    """

    principal: Principal
    company_id: UUID
    user_id: UUID
