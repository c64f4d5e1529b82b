"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Password hashing (bcrypt)
- JWT access token generation/validation (principal claims)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService

__all__ = [
    "BcryptPasswordService",
    "JWTService",
]
