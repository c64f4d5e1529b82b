"""Password hashing protocol for domain layer.

This protocol defines the interface for password hashing and verification.
Infrastructure layer provides the concrete implementation (bcrypt).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt (production)

    Usage:
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash, False otherwise.
        """
        ...
