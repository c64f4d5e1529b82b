"""Pytest configuration shared by all test layers.

Environment variables are set before anything under src/ is imported, because
src.core.config builds the Settings singleton at import time.

Provides:
1. Test settings (in-memory SQLite, testing environment)
2. A fresh database per test (test_database)
3. Principal and token helpers
4. Markers: unit, integration, api
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-characters")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid import UUID  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.enums import UserRole  # noqa: E402
from src.domain.value_objects import Principal  # noqa: E402
from src.infrastructure.persistence.database import Database  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created.

    Each test gets its own engine, so no state leaks between tests.
    """
    database = Database(database_url=TEST_DATABASE_URL)
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide a session bound to the test database."""
    async with test_database.get_session() as session:
        yield session


# =============================================================================
# Principals
# =============================================================================


def make_principal(
    role: UserRole,
    company_id: UUID | None = None,
    principal_id: UUID | None = None,
) -> Principal:
    """Helper to create a Principal for testing.

    Args:
        role: Role of the principal.
        company_id: Owning company (required for COMPANY_OWNER).
        principal_id: Explicit id (default: fresh uuid7).

    Returns:
        Principal instance.
    """
    return Principal(id=principal_id or uuid7(), role=role, company_id=company_id)


@pytest.fixture
def admin() -> Principal:
    """An administrator principal."""
    return make_principal(UserRole.ADMINISTRATOR)


@pytest.fixture
def customer() -> Principal:
    """A customer principal."""
    return make_principal(UserRole.CUSTOMER)


@pytest.fixture
def company_a() -> UUID:
    """Identifier of company A."""
    return uuid7()


@pytest.fixture
def company_b() -> UUID:
    """Identifier of company B."""
    return uuid7()


@pytest.fixture
def owner_of_a(company_a: UUID) -> Principal:
    """A company owner scoped to company A."""
    return make_principal(UserRole.COMPANY_OWNER, company_id=company_a)


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP API tests with stub handlers")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)
