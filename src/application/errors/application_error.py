"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context (CQRS command/query execution failures, gate
denials).

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    from_domain_error: Translate a store failure into an ApplicationError
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import ConflictError, NotFoundError, ValidationError
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query
    handlers). The presentation layer maps each one to an HTTP status.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="Your role does not permit this action",
        ...     details={"reason": "insufficient_role"},
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from the store)
        details: Additional context as key-value pairs ("field", "reason")
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def from_domain_error(error: DomainError) -> ApplicationError:
    """Translate a store failure into an ApplicationError.

    Mapping:
        NotFoundError -> NOT_FOUND
        ConflictError (incl. DuplicateEmailError) -> CONFLICT, field detail
        ValidationError -> COMMAND_VALIDATION_FAILED, field detail
        anything else -> COMMAND_EXECUTION_FAILED

    Args:
        error: Domain error returned inside a Failure.

    Returns:
        ApplicationError wrapping the original error.
    """
    match error:
        case NotFoundError():
            return ApplicationError(
                code=ApplicationErrorCode.NOT_FOUND,
                message=error.message,
                domain_error=error,
            )
        case ConflictError(conflicting_field=field):
            return ApplicationError(
                code=ApplicationErrorCode.CONFLICT,
                message=error.message,
                domain_error=error,
                details={"field": field} if field else None,
            )
        case ValidationError(field=field):
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message=error.message,
                domain_error=error,
                details={"field": field} if field else None,
            )
        case _:
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                message=error.message,
                domain_error=error,
            )


def validation_failed(message: str, field: str) -> ApplicationError:
    """Build a COMMAND_VALIDATION_FAILED error for a single field.

    Args:
        message: Human-readable message.
        field: Offending input field.

    Returns:
        ApplicationError with a field detail.
    """
    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        message=message,
        details={"field": field},
    )
