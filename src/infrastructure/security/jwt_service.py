"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with HMAC-SHA256.
A token carries exactly the principal the access gate consults: id, role and
company affiliation.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Short-lived tokens (settings.access_token_expire_minutes)
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.errors import AuthenticationError
from src.domain.value_objects import Principal

REQUIRED_CLAIMS = ["sub", "role", "exp", "iat"]


class JWTService:
    """JWT access token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(principal)

        match token_service.validate_access_token(token):
            case Success(value=principal):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 15) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing (at least 32 bytes).
            expiration_minutes: Token expiration in minutes (default: 15).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"

    def generate_access_token(self, principal: Principal) -> str:
        """Generate a signed access token for principal.

        Args:
            principal: Authenticated actor to encode.

        Returns:
            JWT access token string (header.payload.signature).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     Principal(id=uuid7(), role=UserRole.ADMINISTRATOR)
            ... )
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload: dict[str, Any] = {
            "sub": str(principal.id),
            "role": principal.role.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        if principal.company_id is not None:
            payload["company_id"] = str(principal.company_id)

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_access_token(self, token: str) -> Result[Principal, str]:
        """Validate an access token and rebuild the principal from its claims.

        Args:
            token: JWT access token string.

        Returns:
            Success(Principal) if signature, expiry and claims are valid.
            Failure(AuthenticationError.INVALID_TOKEN) for bad signature,
            expiry or malformed token.
            Failure(AuthenticationError.INVALID_CLAIMS) for an unknown role,
            non-UUID ids, or a company owner without company_id.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        try:
            company_id = payload.get("company_id")
            principal = Principal(
                id=UUID(str(payload["sub"])),
                role=payload["role"],
                company_id=UUID(str(company_id)) if company_id else None,
            )
        except (ValueError, TypeError):
            return Failure(error=AuthenticationError.INVALID_CLAIMS)

        return Success(value=principal)
