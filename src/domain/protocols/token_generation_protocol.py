"""Token generation protocol for domain layer.

This protocol defines the interface for JWT access token generation and
validation. Tokens are how an externally authenticated principal reaches
this service: the claims carry exactly what the access gate needs.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
    - No framework dependencies in domain

Claims:
    - sub: principal id
    - role: UserRole value
    - company_id: owning company id (absent for roles without a company)
"""

from typing import Protocol

from src.core.result import Result
from src.domain.value_objects import Principal


class TokenGenerationProtocol(Protocol):
    """JWT access token generation and validation interface.

    Implementations:
        - JWTService: HMAC-SHA256 (production)

    Usage:
        token = token_service.generate_access_token(principal)

        match token_service.validate_access_token(token):
            case Success(value=principal):
                ...
            case Failure(error=error):
                # Invalid, expired, or carries an unknown role
                ...
    """

    def generate_access_token(self, principal: Principal) -> str:
        """Generate a signed access token for principal.

        Args:
            principal: Authenticated actor to encode.

        Returns:
            JWT access token string (header.payload.signature).
        """
        ...

    def validate_access_token(self, token: str) -> Result[Principal, str]:
        """Validate an access token and rebuild the principal from its claims.

        Args:
            token: JWT access token string.

        Returns:
            Success(Principal) if signature, expiry and claims are valid.
            Failure(error_message) otherwise.
        """
        ...
