"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found (or not visible in the requested scope)
- ConflictError: Resource conflicts (duplicates, state conflicts)
- DuplicateEmailError: Email already used by another user
- AuthorizationError: Authorization failures (no permission)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.COMPANY_NOT_FOUND,
        message="Company not found",
        resource_type="Company",
        resource_id=str(company_id),
    ))
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Also returned when a row exists but belongs to a different company, so
    cross-company probing cannot distinguish the two cases.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource (Company, User).
        resource_id: ID of the resource that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate, state conflict).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, ...).
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DuplicateEmailError(ConflictError):
    """Email address is already registered to another user.

    Raised from the unique constraint on users.email, never from a
    read-then-write check alone.
    """

    code: ErrorCode = ErrorCode.EMAIL_ALREADY_EXISTS
    message: str = "Email address is already in use"
    resource_type: str = "User"
    conflicting_field: str | None = "email"


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (no permission).

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        reason: Machine-readable deny reason from the access gate.
        details: Additional context.
    """

    reason: str | None = None
