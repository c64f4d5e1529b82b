"""Users resource router.

Endpoints:
    PUT /api/v1/users/{user_id}/role - Reassign role and company (administrators only)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import AssignUserRole
from src.application.commands.handlers.assign_user_role_handler import (
    AssignUserRoleHandler,
)
from src.core.container import get_assign_user_role_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.company_schemas import UserRoleUpdateRequest

router = APIRouter(prefix="/users", tags=["Users"])


@router.put(
    "/{user_id}/role",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    response_model=None,
    responses={
        400: {"description": "Company owner without company", "model": ProblemDetails},
        401: {"description": "Missing or invalid token", "model": ProblemDetails},
        403: {"description": "Not an administrator, or own role", "model": ProblemDetails},
        404: {"description": "User or company not found", "model": ProblemDetails},
    },
    summary="Assign user role",
)
async def assign_user_role(
    request: Request,
    user_id: UUID,
    data: UserRoleUpdateRequest,
    principal: CurrentPrincipal,
    handler: AssignUserRoleHandler = Depends(get_assign_user_role_handler),
) -> Response | JSONResponse:
    """Reassign a user's role and company affiliation.

    PUT /api/v1/users/{user_id}/role → 204 No Content
    """
    command = AssignUserRole(
        principal=principal,
        user_id=user_id,
        role=data.role,
        company_id=data.company_id,
    )
    result = await handler.handle(command)

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
