"""Company users resource router.

RESTful endpoints for users scoped to a company. Administrators may act on
any company; company owners only on their own (enforced by the access gate
inside each handler, which answers 403 before the store is touched).

Endpoints:
    GET    /api/v1/companies/{company_id}/users             - List company users
    POST   /api/v1/companies/{company_id}/users             - Create company user
    GET    /api/v1/companies/{company_id}/users/{user_id}   - Get company user
    PATCH  /api/v1/companies/{company_id}/users/{user_id}   - Update company user
    DELETE /api/v1/companies/{company_id}/users/{user_id}   - Delete company user
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import (
    CreateCompanyUser,
    DeleteCompanyUser,
    UpdateCompanyUser,
)
from src.application.commands.handlers.company_user_handlers import (
    CreateCompanyUserHandler,
    DeleteCompanyUserHandler,
    UpdateCompanyUserHandler,
)
from src.application.queries import GetCompanyUser, ListCompanyUsers
from src.application.queries.handlers.company_user_query_handlers import (
    GetCompanyUserHandler,
    ListCompanyUsersHandler,
)
from src.core.container import (
    get_create_company_user_handler,
    get_delete_company_user_handler,
    get_get_company_user_handler,
    get_list_company_users_handler,
    get_update_company_user_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.company_schemas import (
    CompanyUserCreateRequest,
    CompanyUserListResponse,
    CompanyUserResponse,
    CompanyUserUpdateRequest,
)

router = APIRouter(prefix="/companies/{company_id}/users", tags=["Company Users"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Missing or invalid token", "model": ProblemDetails},
    403: {"description": "Role or company does not permit this action", "model": ProblemDetails},
    404: {"description": "Company or user not found", "model": ProblemDetails},
}


@router.get(
    "",
    response_model=CompanyUserListResponse,
    responses=_ERROR_RESPONSES,
    summary="List company users",
)
async def list_company_users(
    request: Request,
    company_id: UUID,
    principal: CurrentPrincipal,
    handler: ListCompanyUsersHandler = Depends(get_list_company_users_handler),
) -> CompanyUserListResponse | JSONResponse:
    """List a company's users in insertion order.

    GET /api/v1/companies/{company_id}/users → 200 OK
    """
    query = ListCompanyUsers(principal=principal, company_id=company_id)
    result = await handler.handle(query)

    match result:
        case Success(value=users):
            return CompanyUserListResponse.from_dto(users)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyUserResponse,
    responses={
        **_ERROR_RESPONSES,
        409: {"description": "Email already in use", "model": ProblemDetails},
    },
    summary="Create company user",
)
async def create_company_user(
    request: Request,
    company_id: UUID,
    data: CompanyUserCreateRequest,
    principal: CurrentPrincipal,
    handler: CreateCompanyUserHandler = Depends(get_create_company_user_handler),
) -> CompanyUserResponse | JSONResponse:
    """Create a user in a company.

    POST /api/v1/companies/{company_id}/users → 201 Created

    The new user always gets role company_owner in this company.

    Args:
        request: FastAPI request object.
        company_id: Owning company (path).
        data: Name, email and password.
        principal: Authenticated principal (injected).
        handler: CreateCompanyUser handler (injected).

    Returns:
        CompanyUserResponse on success (201 Created).
        JSONResponse with error on failure (400/403/404/409).
    """
    command = CreateCompanyUser(
        principal=principal,
        company_id=company_id,
        name=data.name,
        email=str(data.email),
        password=data.password,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=user):
            return CompanyUserResponse.from_dto(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get(
    "/{user_id}",
    response_model=CompanyUserResponse,
    responses=_ERROR_RESPONSES,
    summary="Get company user",
)
async def get_company_user(
    request: Request,
    company_id: UUID,
    user_id: UUID,
    principal: CurrentPrincipal,
    handler: GetCompanyUserHandler = Depends(get_get_company_user_handler),
) -> CompanyUserResponse | JSONResponse:
    """Get a single company user.

    GET /api/v1/companies/{company_id}/users/{user_id} → 200 OK
    """
    query = GetCompanyUser(principal=principal, company_id=company_id, user_id=user_id)
    result = await handler.handle(query)

    match result:
        case Success(value=user):
            return CompanyUserResponse.from_dto(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.patch(
    "/{user_id}",
    response_model=CompanyUserResponse,
    responses={
        **_ERROR_RESPONSES,
        409: {"description": "Email already in use", "model": ProblemDetails},
    },
    summary="Update company user",
)
async def update_company_user(
    request: Request,
    company_id: UUID,
    user_id: UUID,
    data: CompanyUserUpdateRequest,
    principal: CurrentPrincipal,
    handler: UpdateCompanyUserHandler = Depends(get_update_company_user_handler),
) -> CompanyUserResponse | JSONResponse:
    """Partially update a company user.

    PATCH /api/v1/companies/{company_id}/users/{user_id} → 200 OK
    """
    command = UpdateCompanyUser(
        principal=principal,
        company_id=company_id,
        user_id=user_id,
        name=data.name,
        email=str(data.email) if data.email is not None else None,
        password=data.password,
    )
    result = await handler.handle(command)

    match result:
        case Success(value=user):
            return CompanyUserResponse.from_dto(user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    response_model=None,
    responses=_ERROR_RESPONSES,
    summary="Delete company user",
)
async def delete_company_user(
    request: Request,
    company_id: UUID,
    user_id: UUID,
    principal: CurrentPrincipal,
    handler: DeleteCompanyUserHandler = Depends(get_delete_company_user_handler),
) -> Response:
    """Delete a company user.

    DELETE /api/v1/companies/{company_id}/users/{user_id} → 204 No Content
    """
    command = DeleteCompanyUser(principal=principal, company_id=company_id, user_id=user_id)
    result = await handler.handle(command)

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
