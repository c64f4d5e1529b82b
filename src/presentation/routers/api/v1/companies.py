"""Companies resource router.

RESTful endpoints for company management (administrators only; the access
gate enforces this inside every handler).

Endpoints:
    GET    /api/v1/companies                - List companies
    POST   /api/v1/companies                - Create company
    GET    /api/v1/companies/{company_id}   - Get company
    PATCH  /api/v1/companies/{company_id}   - Rename company
    DELETE /api/v1/companies/{company_id}   - Delete company and its users
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from src.application.commands import CreateCompany, DeleteCompany, UpdateCompany
from src.application.commands.handlers.company_handlers import (
    CreateCompanyHandler,
    DeleteCompanyHandler,
    UpdateCompanyHandler,
)
from src.application.queries import GetCompany, ListCompanies
from src.application.queries.handlers.company_query_handlers import (
    GetCompanyHandler,
    ListCompaniesHandler,
)
from src.core.container import (
    get_create_company_handler,
    get_delete_company_handler,
    get_get_company_handler,
    get_list_companies_handler,
    get_update_company_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from src.schemas.company_schemas import (
    CompanyCreateRequest,
    CompanyListResponse,
    CompanyResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    401: {"description": "Missing or invalid token", "model": ProblemDetails},
    403: {"description": "Role does not permit this action", "model": ProblemDetails},
}


@router.get(
    "",
    response_model=CompanyListResponse,
    responses=_ERROR_RESPONSES,
    summary="List companies",
)
async def list_companies(
    request: Request,
    principal: CurrentPrincipal,
    handler: ListCompaniesHandler = Depends(get_list_companies_handler),
) -> CompanyListResponse | JSONResponse:
    """List every company, oldest first.

    GET /api/v1/companies → 200 OK
    """
    result = await handler.handle(ListCompanies(principal=principal))

    match result:
        case Success(value=companies):
            return CompanyListResponse.from_dto(companies)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CompanyResponse,
    responses=_ERROR_RESPONSES,
    summary="Create company",
)
async def create_company(
    request: Request,
    data: CompanyCreateRequest,
    principal: CurrentPrincipal,
    handler: CreateCompanyHandler = Depends(get_create_company_handler),
) -> CompanyResponse | JSONResponse:
    """Create a company.

    POST /api/v1/companies → 201 Created

    Args:
        request: FastAPI request object.
        data: Company creation request (name).
        principal: Authenticated principal (injected).
        handler: CreateCompany handler (injected).

    Returns:
        CompanyResponse on success (201 Created).
        JSONResponse with error on failure (400/403).
    """
    result = await handler.handle(CreateCompany(principal=principal, name=data.name))

    match result:
        case Success(value=company):
            return CompanyResponse.from_dto(company)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.get(
    "/{company_id}",
    response_model=CompanyResponse,
    responses={**_ERROR_RESPONSES, 404: {"model": ProblemDetails}},
    summary="Get company",
)
async def get_company(
    request: Request,
    company_id: UUID,
    principal: CurrentPrincipal,
    handler: GetCompanyHandler = Depends(get_get_company_handler),
) -> CompanyResponse | JSONResponse:
    """Get a single company.

    GET /api/v1/companies/{company_id} → 200 OK
    """
    result = await handler.handle(GetCompany(principal=principal, company_id=company_id))

    match result:
        case Success(value=company):
            return CompanyResponse.from_dto(company)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.patch(
    "/{company_id}",
    response_model=CompanyResponse,
    responses={**_ERROR_RESPONSES, 404: {"model": ProblemDetails}},
    summary="Rename company",
)
async def update_company(
    request: Request,
    company_id: UUID,
    data: CompanyUpdateRequest,
    principal: CurrentPrincipal,
    handler: UpdateCompanyHandler = Depends(get_update_company_handler),
) -> CompanyResponse | JSONResponse:
    """Rename a company.

    PATCH /api/v1/companies/{company_id} → 200 OK
    """
    command = UpdateCompany(principal=principal, company_id=company_id, name=data.name)
    result = await handler.handle(command)

    match result:
        case Success(value=company):
            return CompanyResponse.from_dto(company)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    response_model=None,
    responses={**_ERROR_RESPONSES, 404: {"model": ProblemDetails}},
    summary="Delete company",
)
async def delete_company(
    request: Request,
    company_id: UUID,
    principal: CurrentPrincipal,
    handler: DeleteCompanyHandler = Depends(get_delete_company_handler),
) -> Response:
    """Delete a company and all of its users.

    DELETE /api/v1/companies/{company_id} → 204 No Content
    """
    result = await handler.handle(DeleteCompany(principal=principal, company_id=company_id))

    match result:
        case Success():
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        case Failure(error=error):
            return ErrorResponseBuilder.from_application_error(
                error=error, request=request, trace_id=get_trace_id() or ""
            )
