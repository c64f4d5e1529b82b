"""System router for non-versioned application endpoints.

Provides root and health endpoints that are not part of the versioned API
contract. They require no authentication and never touch the access gate.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Application name, status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health(database: Database = Depends(get_database)) -> JSONResponse:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 {"status": "healthy"} when the database answers,
            503 {"status": "unhealthy"} otherwise.
    """
    if await database.check_connection():
        return JSONResponse(status_code=200, content={"status": "healthy"})
    return JSONResponse(status_code=503, content={"status": "unhealthy"})
