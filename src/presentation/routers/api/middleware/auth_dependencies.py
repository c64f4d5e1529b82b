"""JWT authentication dependencies.

FastAPI dependencies that turn the bearer token into a Principal. The
principal is then passed explicitly into every command and query; nothing
downstream reads "the current user" from ambient state.

Usage:
    @router.get("/companies")
    async def list_companies(
        principal: Principal = Depends(get_current_principal),
    ):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.value_objects import Principal

# auto_error=False so a missing header yields our own 401 problem response
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> Principal:
    """Get the authenticated principal from the JWT access token.

    Args:
        credentials: Bearer token from Authorization header (None if absent).
        token_service: JWT token service (injected).

    Returns:
        Principal built from the token's sub, role and company_id claims.

    Raises:
        HTTPException 401: If token is missing, invalid, expired, or its
            claims do not form a valid Principal.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=principal):
            return principal
        case Failure(error=error):
            raise _unauthorized(error)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]
