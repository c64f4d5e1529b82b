"""External-facing routers (non-versioned endpoints).

Routes that are not part of the versioned API contract: root and health.
The versioned API lives in api/v1/.
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
