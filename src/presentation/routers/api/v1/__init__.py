"""API v1 routers.

RESTful resource-based endpoints following strict REST compliance.
All endpoints use resource nouns, not action verbs.

Resources:
    /api/v1/companies                          - Company management
    /api/v1/companies/{company_id}/users       - Company user management
    /api/v1/users/{user_id}/role               - Role reassignment
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.companies import router as companies_router
from src.presentation.routers.api.v1.company_users import (
    router as company_users_router,
)
from src.presentation.routers.api.v1.users import router as users_router

# Create combined v1 router
v1_router = APIRouter(prefix=settings.api_v1_prefix)

# Include all resource routers
v1_router.include_router(companies_router)
v1_router.include_router(company_users_router)
v1_router.include_router(users_router)

__all__ = [
    "v1_router",
]
