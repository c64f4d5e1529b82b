"""Repository dependency factories.

Request-scoped repository instances for domain entity persistence.
Each request gets fresh repository instances with shared session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        CompanyRepository,
        CompanyUserRepository,
    )


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_company_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CompanyRepository":
    """Get company repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        CompanyRepository instance.
    """
    from src.infrastructure.persistence.repositories import CompanyRepository

    return CompanyRepository(session=session)


async def get_company_user_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "CompanyUserRepository":
    """Get company user repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        CompanyUserRepository instance.
    """
    from src.infrastructure.persistence.repositories import CompanyUserRepository

    return CompanyUserRepository(session=session)
