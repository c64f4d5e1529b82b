"""Authentication domain errors.

Error value constants for bearer token validation. Never raised as
exceptions; returned inside Failure.

Usage:
    from src.domain.errors import AuthenticationError

    match token_service.validate_access_token(token):
        case Failure(error=AuthenticationError.INVALID_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants."""

    INVALID_TOKEN = "Invalid or expired access token"
    """Signature, expiry or format check failed."""

    INVALID_CLAIMS = "Access token claims are invalid"
    """Token verified but sub/role/company_id cannot form a Principal."""
