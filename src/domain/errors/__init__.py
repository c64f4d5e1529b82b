"""Domain errors package.

Usage:
    from src.domain.errors import AccessError, AuthenticationError
"""

from src.domain.errors.access_error import AccessError
from src.domain.errors.authentication_error import AuthenticationError

__all__ = [
    "AccessError",
    "AuthenticationError",
]
