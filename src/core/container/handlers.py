"""Handler dependency factories.

Request-scoped handler instances for company and company user operations:
- Company commands/queries (create, update, delete, list, get)
- Company user commands/queries (create, update, delete, list, get)
- Role reassignment

Every handler receives the app-scoped AccessGuard, so no handler can reach
the store without asking the access gate first.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import (
    get_db_session,
    get_logger,
    get_password_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.assign_user_role_handler import (
        AssignUserRoleHandler,
    )
    from src.application.commands.handlers.company_handlers import (
        CreateCompanyHandler,
        DeleteCompanyHandler,
        UpdateCompanyHandler,
    )
    from src.application.commands.handlers.company_user_handlers import (
        CreateCompanyUserHandler,
        DeleteCompanyUserHandler,
        UpdateCompanyUserHandler,
    )
    from src.application.queries.handlers.company_query_handlers import (
        GetCompanyHandler,
        ListCompaniesHandler,
    )
    from src.application.queries.handlers.company_user_query_handlers import (
        GetCompanyUserHandler,
        ListCompanyUsersHandler,
    )
    from src.application.services.access_guard import AccessGuard


@lru_cache()
def get_access_guard() -> "AccessGuard":
    """Get access guard singleton (app-scoped, stateless).

    Returns:
        AccessGuard wired to the application logger.
    """
    from src.application.services.access_guard import AccessGuard

    return AccessGuard(logger=get_logger())


# ============================================================================
# Company Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateCompanyHandler":
    """Get CreateCompany command handler (request-scoped).

    Returns:
        CreateCompanyHandler instance.
    """
    from src.application.commands.handlers.company_handlers import (
        CreateCompanyHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyRepository

    return CreateCompanyHandler(
        company_repo=CompanyRepository(session=session),
        guard=get_access_guard(),
        logger=get_logger(),
    )


async def get_update_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateCompanyHandler":
    from src.application.commands.handlers.company_handlers import (
        UpdateCompanyHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyRepository

    return UpdateCompanyHandler(
        company_repo=CompanyRepository(session=session),
        guard=get_access_guard(),
        logger=get_logger(),
    )


async def get_delete_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteCompanyHandler":
    from src.application.commands.handlers.company_handlers import (
        DeleteCompanyHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyRepository

    return DeleteCompanyHandler(
        company_repo=CompanyRepository(session=session),
        guard=get_access_guard(),
        logger=get_logger(),
    )


async def get_list_companies_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListCompaniesHandler":
    from src.application.queries.handlers.company_query_handlers import (
        ListCompaniesHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyRepository

    return ListCompaniesHandler(
        company_repo=CompanyRepository(session=session),
        guard=get_access_guard(),
    )


async def get_get_company_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCompanyHandler":
    from src.application.queries.handlers.company_query_handlers import (
        GetCompanyHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyRepository

    return GetCompanyHandler(
        company_repo=CompanyRepository(session=session),
        guard=get_access_guard(),
    )


# ============================================================================
# Company User Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_company_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateCompanyUserHandler":
    """Get CreateCompanyUser command handler (request-scoped).

    Creates handler with:
    - CompanyUserRepository (request-scoped)
    - BcryptPasswordService (app-scoped)

    Returns:
        CreateCompanyUserHandler instance.
    """
    from src.application.commands.handlers.company_user_handlers import (
        CreateCompanyUserHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return CreateCompanyUserHandler(
        company_user_repo=CompanyUserRepository(session=session),
        password_service=get_password_service(),
        guard=get_access_guard(),
        logger=get_logger(),
    )


async def get_update_company_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateCompanyUserHandler":
    from src.application.commands.handlers.company_user_handlers import (
        UpdateCompanyUserHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return UpdateCompanyUserHandler(
        company_user_repo=CompanyUserRepository(session=session),
        password_service=get_password_service(),
        guard=get_access_guard(),
        logger=get_logger(),
    )


async def get_delete_company_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteCompanyUserHandler":
    from src.application.commands.handlers.company_user_handlers import (
        DeleteCompanyUserHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return DeleteCompanyUserHandler(
        company_user_repo=CompanyUserRepository(session=session),
        guard=get_access_guard(),
        logger=get_logger(),
    )


async def get_list_company_users_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListCompanyUsersHandler":
    from src.application.queries.handlers.company_user_query_handlers import (
        ListCompanyUsersHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return ListCompanyUsersHandler(
        company_user_repo=CompanyUserRepository(session=session),
        guard=get_access_guard(),
    )


async def get_get_company_user_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetCompanyUserHandler":
    from src.application.queries.handlers.company_user_query_handlers import (
        GetCompanyUserHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return GetCompanyUserHandler(
        company_user_repo=CompanyUserRepository(session=session),
        guard=get_access_guard(),
    )


async def get_assign_user_role_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "AssignUserRoleHandler":
    from src.application.commands.handlers.assign_user_role_handler import (
        AssignUserRoleHandler,
    )
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return AssignUserRoleHandler(
        company_user_repo=CompanyUserRepository(session=session),
        guard=get_access_guard(),
        logger=get_logger(),
    )
