"""Error response builder for RFC 9457 Problem Details.

This module provides utilities to build RFC 9457 compliant error responses
from application layer errors.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Converts application layer errors into standardized RFC 9457 JSON responses
    with appropriate HTTP status codes and structured error information.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="Your role does not permit this action",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder._get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder._get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=ErrorResponseBuilder._get_field_errors(error),
            trace_id=trace_id or None,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def _get_field_errors(error: ApplicationError) -> list[ErrorDetail] | None:
        """Build field-level errors from the error's "field" detail.

        Args:
            error: Application layer error

        Returns:
            Single-item list when a field is known, None otherwise.
        """
        field = (error.details or {}).get("field")
        if not field:
            return None

        code = error.domain_error.code.value if error.domain_error else error.code.value
        return [ErrorDetail(field=field, code=code, message=error.message)]

    @staticmethod
    def _get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder._get_status_code(ApplicationErrorCode.FORBIDDEN)
            403
        """
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
            ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
            ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
            ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
            ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
        }
        return mapping.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def _get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        mapping = {
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
            ApplicationErrorCode.QUERY_FAILED: "Query Failed",
            ApplicationErrorCode.UNAUTHORIZED: "Authentication Required",
            ApplicationErrorCode.FORBIDDEN: "Access Denied",
            ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
            ApplicationErrorCode.CONFLICT: "Resource Conflict",
        }
        return mapping.get(code, "Internal Server Error")
