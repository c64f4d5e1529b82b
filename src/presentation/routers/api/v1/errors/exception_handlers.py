"""Global exception handlers for FastAPI application.

This module provides exception handlers that catch exceptions escaping route
handlers and dependencies and convert them to RFC 9457 Problem Details.

Handlers:
    http_exception_handler: Converts HTTPException (401 from auth) to RFC 9457
    validation_exception_handler: Converts RequestValidationError to RFC 9457 (422)
    generic_exception_handler: Catches all unhandled exceptions (500, logged)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

HTTP_422_UNPROCESSABLE = 422

# HTTP status code to (title, slug) mapping for RFC 9457
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    401: ("Authentication Required", "unauthorized"),
    403: ("Access Denied", "forbidden"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    422: ("Validation Failed", "validation-failed"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _get_status_title(status_code: int) -> str:
    """Get human-readable title for HTTP status code."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[0]


def _get_error_slug(status_code: int) -> str:
    """Get kebab-case error slug for RFC 9457 type URL."""
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))[1]


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to RFC 9457 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by handler or dependency.

    Returns:
        JSONResponse with RFC 9457 ProblemDetails. Headers from the exception
        (WWW-Authenticate) are preserved.
    """
    # Type narrowing: FastAPI registers this handler only for HTTPException
    assert isinstance(exc, HTTPException)

    trace_id = getattr(request.state, "trace_id", None)

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{_get_error_slug(exc.status_code)}",
        title=_get_status_title(exc.status_code),
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to RFC 9457 Problem Details response.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse (422) with one ErrorDetail per invalid field.
    """
    # Type narrowing: FastAPI registers this handler only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    trace_id = getattr(request.state, "trace_id", None)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "email"] -> "email"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "unknown"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=HTTP_422_UNPROCESSABLE,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors if field_errors else None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and returns a 500 Problem Details response that does
    not leak internal details to API consumers.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with RFC 9457 ProblemDetails (500 Internal Server Error)
    """
    trace_id = getattr(request.state, "trace_id", None)

    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please contact support with the trace ID.",
        instance=str(request.url.path),
        errors=None,
        trace_id=trace_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
