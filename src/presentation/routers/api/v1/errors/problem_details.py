"""RFC 9457 Problem Details for HTTP APIs.

This module implements RFC 9457 (Problem Details for HTTP APIs) using Pydantic
models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="email_already_exists",
        ...     message="Email address is already in use",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors
        trace_id: Optional request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="You can only manage users of your own company",
        ...     instance="/api/v1/companies/0190.../users",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/forbidden"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Access Denied"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[403],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Your role does not permit this action"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/companies"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
