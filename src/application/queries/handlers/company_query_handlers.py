"""Company query handlers.

Handles ListCompanies and GetCompany. Both are administrator-only (COMPANY
kind). Returns DTOs, not domain entities.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, ApplicationError] (explicit error handling)
- Side-effect free apart from access_denied logging
"""

from src.application.dtos import CompanyListResult, CompanyResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries.company_queries import GetCompany, ListCompanies
from src.application.services.access_guard import AccessGuard
from src.core.result import Failure, Result, Success
from src.domain.enums import Action
from src.domain.protocols import CompanyRepository
from src.domain.value_objects import ResourceDescriptor


class ListCompaniesHandler:
    """Handler for ListCompanies query."""

    def __init__(self, company_repo: CompanyRepository, guard: AccessGuard) -> None:
        self._company_repo = company_repo
        self._guard = guard

    async def handle(
        self, query: ListCompanies
    ) -> Result[CompanyListResult, ApplicationError]:
        """Handle ListCompanies query.

        Returns:
            Success(CompanyListResult) in insertion order, or
            Failure(ApplicationError(FORBIDDEN)).
        """
        check = self._guard.check(query.principal, Action.LIST, ResourceDescriptor.company())
        if isinstance(check, Failure):
            return check

        companies = await self._company_repo.list_all()
        results = [CompanyResult.from_entity(company) for company in companies]
        return Success(value=CompanyListResult(companies=results, total_count=len(results)))


class GetCompanyHandler:
    """Handler for GetCompany query."""

    def __init__(self, company_repo: CompanyRepository, guard: AccessGuard) -> None:
        self._company_repo = company_repo
        self._guard = guard

    async def handle(self, query: GetCompany) -> Result[CompanyResult, ApplicationError]:
        """Handle GetCompany query.

        Returns:
            Success(CompanyResult), or Failure(ApplicationError) with FORBIDDEN
            or NOT_FOUND.
        """
        check = self._guard.check(
            query.principal, Action.READ, ResourceDescriptor.company(query.company_id)
        )
        if isinstance(check, Failure):
            return check

        company = await self._company_repo.find_by_id(query.company_id)
        if company is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message="Company not found",
                    details={"company_id": str(query.company_id)},
                )
            )

        return Success(value=CompanyResult.from_entity(company))
