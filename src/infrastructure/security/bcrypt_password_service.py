"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol. Company users get their password hashed
here before the store ever sees it; plaintext never reaches the database or
the logs.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Injected via dependency container (cost factor from settings.bcrypt_rounds)
"""

import bcrypt

# bcrypt only considers the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        password_service.verify_password("SecurePass123!", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor, logarithmic (12 = ~250ms per hash).

        Raises:
            ValueError: If cost factor is outside 10..20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$..., 60 characters).
            Each call uses a fresh random salt.

        Raises:
            ValueError: If the UTF-8 encoded password exceeds 72 bytes.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            msg = f"Password must not exceed {MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)

        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from database.

        Returns:
            True if password matches hash. False on mismatch, on a malformed
            hash and on an over-long password (never raises).
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            # Invalid hash format
            return False
