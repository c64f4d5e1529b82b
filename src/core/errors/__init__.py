"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from src.core.errors import DomainError, NotFoundError, DuplicateEmailError
"""

from src.core.errors.common_errors import (
    AuthorizationError,
    ConflictError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "DuplicateEmailError",
    "AuthorizationError",
]
