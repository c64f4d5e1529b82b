"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL in production, SQLite in tests)
- Password hashing (bcrypt)
- Token generation (JWT)
- Logging (structlog console)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with cost factor from settings.bcrypt_rounds.

    Returns:
        Password hashing service implementing PasswordHashingProtocol.
    """
    from src.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService with HMAC-SHA256 and the configured expiration.

    Returns:
        Token generation service implementing TokenGenerationProtocol.
    """
    from src.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Container owns factory logic - decides renderer based on ENVIRONMENT:
        - development: ConsoleAdapter (human-readable)
        - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        Logger implementing LoggerProtocol.

    Usage:
        logger = get_logger()
        logger.info("company_created", company_id=str(company_id))
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
