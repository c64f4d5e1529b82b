"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Settings and the dependency container

The core module has NO dependencies on the domain or application layers.
"""

from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "DuplicateEmailError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
