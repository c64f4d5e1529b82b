"""Company user query handlers.

Handles ListCompanyUsers and GetCompanyUser (COMPANY_USER kind: administrators
everywhere, company owners in their own company only).
"""

from src.application.dtos import CompanyUserListResult, CompanyUserResult
from src.application.errors import ApplicationError, from_domain_error
from src.application.queries.company_queries import GetCompanyUser, ListCompanyUsers
from src.application.services.access_guard import AccessGuard
from src.core.result import Failure, Result, Success
from src.domain.enums import Action
from src.domain.protocols import CompanyUserRepository
from src.domain.value_objects import ResourceDescriptor


class ListCompanyUsersHandler:
    """Handler for ListCompanyUsers query."""

    def __init__(
        self, company_user_repo: CompanyUserRepository, guard: AccessGuard
    ) -> None:
        self._company_user_repo = company_user_repo
        self._guard = guard

    async def handle(
        self, query: ListCompanyUsers
    ) -> Result[CompanyUserListResult, ApplicationError]:
        """Handle ListCompanyUsers query.

        Returns:
            Success(CompanyUserListResult) in insertion order (possibly empty),
            or Failure(ApplicationError) with FORBIDDEN or NOT_FOUND (unknown
            company).
        """
        check = self._guard.check(
            query.principal,
            Action.LIST,
            ResourceDescriptor.company_user(query.company_id),
        )
        if isinstance(check, Failure):
            return check

        list_result = await self._company_user_repo.list_for_company(query.company_id)
        if isinstance(list_result, Failure):
            return Failure(error=from_domain_error(list_result.error))

        users = [CompanyUserResult.from_entity(user) for user in list_result.value]
        return Success(value=CompanyUserListResult(users=users, total_count=len(users)))


class GetCompanyUserHandler:
    """Handler for GetCompanyUser query."""

    def __init__(
        self, company_user_repo: CompanyUserRepository, guard: AccessGuard
    ) -> None:
        self._company_user_repo = company_user_repo
        self._guard = guard

    async def handle(
        self, query: GetCompanyUser
    ) -> Result[CompanyUserResult, ApplicationError]:
        """Handle GetCompanyUser query.

        Returns:
            Success(CompanyUserResult), or Failure(ApplicationError) with
            FORBIDDEN or NOT_FOUND (including a user of another company).
        """
        check = self._guard.check(
            query.principal,
            Action.READ,
            ResourceDescriptor.company_user(query.company_id),
        )
        if isinstance(check, Failure):
            return check

        find_result = await self._company_user_repo.find(query.company_id, query.user_id)
        if isinstance(find_result, Failure):
            return Failure(error=from_domain_error(find_result.error))

        return Success(value=CompanyUserResult.from_entity(find_result.value))
