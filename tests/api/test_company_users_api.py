"""API tests for company user endpoints.

Tests the complete HTTP request/response cycle for company users:
- GET    /api/v1/companies/{company_id}/users
- POST   /api/v1/companies/{company_id}/users
- GET    /api/v1/companies/{company_id}/users/{user_id}
- PATCH  /api/v1/companies/{company_id}/users/{user_id}
- DELETE /api/v1/companies/{company_id}/users/{user_id}

Architecture:
- Uses FastAPI TestClient with real app + dependency overrides
- Stub handlers to test HTTP layer behavior
"""

from datetime import UTC, datetime
from typing import Any, cast
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.application.dtos import CompanyUserListResult, CompanyUserResult
from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.container import (
    get_create_company_user_handler,
    get_delete_company_user_handler,
    get_get_company_user_handler,
    get_list_company_users_handler,
    get_update_company_user_handler,
)
from src.core.enums import ErrorCode
from src.core.errors import DuplicateEmailError
from src.core.result import Failure, Success
from src.domain.enums import UserRole
from src.domain.value_objects import Principal
from src.infrastructure.security import JWTService
from src.main import app


class StubHandler:
    """Handler double returning a preset result and recording its input."""

    def __init__(self, result: Success[Any] | Failure[ApplicationError]) -> None:
        self._result = result
        self.received: Any = None

    async def handle(self, message: Any) -> Success[Any] | Failure[ApplicationError]:
        self.received = message
        return self._result


def make_user(company_id: UUID, name: str = "Ada", email: str = "a@acme.com") -> CompanyUserResult:
    now = datetime.now(UTC)
    return CompanyUserResult(
        id=cast(UUID, uuid7()),
        company_id=company_id,
        name=name,
        email=email,
        role="company_owner",
        created_at=now,
        updated_at=now,
    )


def bearer(role: UserRole, company_id: UUID | None = None) -> dict[str, str]:
    """Authorization header for a freshly minted principal."""
    principal = Principal(id=cast(UUID, uuid7()), role=role, company_id=company_id)
    token = JWTService(secret_key=settings.secret_key).generate_access_token(principal)
    return {"Authorization": f"Bearer {token}"}


HANDLER_FACTORIES = [
    get_list_company_users_handler,
    get_create_company_user_handler,
    get_get_company_user_handler,
    get_update_company_user_handler,
    get_delete_company_user_handler,
]

UNEXPECTED = Failure(
    error=ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message="Handler not configured for this test",
    )
)


@pytest.fixture(autouse=True)
def default_handlers():
    """Stub every handler factory so no test opens a database session.

    Individual tests replace the stub they exercise. Overrides are cleared
    after each test.
    """
    for factory in HANDLER_FACTORIES:
        app.dependency_overrides[factory] = lambda: StubHandler(UNEXPECTED)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    """Test client without lifespan (no database)."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def acme_id() -> UUID:
    return cast(UUID, uuid7())


@pytest.mark.api
class TestListCompanyUsers:
    """GET /api/v1/companies/{company_id}/users."""

    def test_owner_lists_own_company(self, client: TestClient, acme_id: UUID) -> None:
        """Test principal from the token reaches the handler."""
        users = [make_user(acme_id, "U1", "u1@acme.com"), make_user(acme_id, "U2", "u2@acme.com")]
        stub = StubHandler(Success(value=CompanyUserListResult(users=users, total_count=2)))
        app.dependency_overrides[get_list_company_users_handler] = lambda: stub

        response = client.get(
            f"/api/v1/companies/{acme_id}/users",
            headers=bearer(UserRole.COMPANY_OWNER, acme_id),
        )

        assert response.status_code == 200
        assert [u["name"] for u in response.json()["users"]] == ["U1", "U2"]
        assert stub.received.company_id == acme_id
        assert stub.received.principal.company_id == acme_id

    def test_other_company_is_403(self, client: TestClient, acme_id: UUID) -> None:
        """Test COMPANY_MISMATCH denial becomes 403."""
        app.dependency_overrides[get_list_company_users_handler] = lambda: StubHandler(
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="You can only manage users of your own company",
                    details={"reason": "company_mismatch"},
                )
            )
        )

        response = client.get(
            f"/api/v1/companies/{acme_id}/users",
            headers=bearer(UserRole.COMPANY_OWNER, cast(UUID, uuid7())),
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "You can only manage users of your own company"


@pytest.mark.api
class TestCreateCompanyUser:
    """POST /api/v1/companies/{company_id}/users."""

    def test_create_user(self, client: TestClient, acme_id: UUID) -> None:
        """Test 201 with no password or hash in the body."""
        user = make_user(acme_id)
        stub = StubHandler(Success(value=user))
        app.dependency_overrides[get_create_company_user_handler] = lambda: stub

        response = client.post(
            f"/api/v1/companies/{acme_id}/users",
            json={"name": "Ada", "email": "a@acme.com", "password": "SecurePass123!"},
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["role"] == "company_owner"
        assert body["company_id"] == str(acme_id)
        assert "password" not in body
        assert "password_hash" not in body
        assert stub.received.password == "SecurePass123!"

    def test_role_in_body_is_ignored(self, client: TestClient, acme_id: UUID) -> None:
        """Test callers cannot choose a role on create."""
        stub = StubHandler(Success(value=make_user(acme_id)))
        app.dependency_overrides[get_create_company_user_handler] = lambda: stub

        response = client.post(
            f"/api/v1/companies/{acme_id}/users",
            json={
                "name": "Ada",
                "email": "a@acme.com",
                "password": "SecurePass123!",
                "role": "administrator",
            },
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 201
        assert not hasattr(stub.received, "role")

    def test_duplicate_email_is_409(self, client: TestClient, acme_id: UUID) -> None:
        """Test CONFLICT becomes 409 with an email field error."""
        app.dependency_overrides[get_create_company_user_handler] = lambda: StubHandler(
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message="Email address is already in use",
                    domain_error=DuplicateEmailError(),
                    details={"field": "email"},
                )
            )
        )

        response = client.post(
            f"/api/v1/companies/{acme_id}/users",
            json={"name": "Ada", "email": "a@acme.com", "password": "SecurePass123!"},
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 409
        body = response.json()
        assert body["title"] == "Resource Conflict"
        assert body["errors"] == [
            {
                "field": "email",
                "code": ErrorCode.EMAIL_ALREADY_EXISTS.value,
                "message": "Email address is already in use",
            }
        ]

    def test_short_password_is_422(self, client: TestClient, acme_id: UUID) -> None:
        """Test schema validation rejects short passwords."""
        response = client.post(
            f"/api/v1/companies/{acme_id}/users",
            json={"name": "Ada", "email": "a@acme.com", "password": "short"},
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "password"

    def test_invalid_email_is_422(self, client: TestClient, acme_id: UUID) -> None:
        """Test schema validation rejects malformed email."""
        response = client.post(
            f"/api/v1/companies/{acme_id}/users",
            json={"name": "Ada", "email": "nope", "password": "SecurePass123!"},
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 422


@pytest.mark.api
class TestCompanyUserItem:
    """GET/PATCH/DELETE /api/v1/companies/{company_id}/users/{user_id}."""

    def test_get_user(self, client: TestClient, acme_id: UUID) -> None:
        """Test get passes both path ids."""
        user = make_user(acme_id)
        stub = StubHandler(Success(value=user))
        app.dependency_overrides[get_get_company_user_handler] = lambda: stub

        response = client.get(
            f"/api/v1/companies/{acme_id}/users/{user.id}",
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 200
        assert stub.received.company_id == acme_id
        assert stub.received.user_id == user.id

    def test_get_user_of_other_company_is_404(
        self, client: TestClient, acme_id: UUID
    ) -> None:
        """Test NOT_FOUND becomes 404."""
        app.dependency_overrides[get_get_company_user_handler] = lambda: StubHandler(
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND, message="User not found"
                )
            )
        )

        response = client.get(
            f"/api/v1/companies/{acme_id}/users/{uuid7()}",
            headers=bearer(UserRole.ADMINISTRATOR),
        )

        assert response.status_code == 404

    def test_partial_update(self, client: TestClient, acme_id: UUID) -> None:
        """Test omitted fields reach the handler as None."""
        user = make_user(acme_id, name="Ada L.")
        stub = StubHandler(Success(value=user))
        app.dependency_overrides[get_update_company_user_handler] = lambda: stub

        response = client.patch(
            f"/api/v1/companies/{acme_id}/users/{user.id}",
            json={"name": "Ada L."},
            headers=bearer(UserRole.COMPANY_OWNER, acme_id),
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Ada L."
        assert stub.received.name == "Ada L."
        assert stub.received.email is None
        assert stub.received.password is None

    def test_delete_user(self, client: TestClient, acme_id: UUID) -> None:
        """Test DELETE returns 204."""
        app.dependency_overrides[get_delete_company_user_handler] = lambda: StubHandler(
            Success(value=None)
        )

        response = client.delete(
            f"/api/v1/companies/{acme_id}/users/{uuid7()}",
            headers=bearer(UserRole.COMPANY_OWNER, acme_id),
        )

        assert response.status_code == 204

    def test_customer_is_403(self, client: TestClient, acme_id: UUID) -> None:
        """Test customer denial becomes 403."""
        app.dependency_overrides[get_delete_company_user_handler] = lambda: StubHandler(
            Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message="Your role does not permit this action",
                    details={"reason": "insufficient_role"},
                )
            )
        )

        response = client.delete(
            f"/api/v1/companies/{acme_id}/users/{uuid7()}",
            headers=bearer(UserRole.CUSTOMER),
        )

        assert response.status_code == 403
