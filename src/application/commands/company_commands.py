"""Company commands (CQRS write operations).

Commands represent user intent to change company state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Every command carries the acting principal explicitly
- Handlers execute the gate check and the store call (return Result types)
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import Principal


@dataclass(frozen=True, kw_only=True)
class CreateCompany:
    """Create a new company.

    Attributes:
        principal: Acting user (must be an administrator).
        name: Company display name.

    Example:
        >>> command = CreateCompany(principal=admin, name="Acme")
        >>> result = await handler.handle(command)
    """

    principal: Principal
    name: str


@dataclass(frozen=True, kw_only=True)
class UpdateCompany:
    """Rename a company.

    Attributes:
        principal: Acting user (must be an administrator).
        company_id: Company to update.
        name: New display name.
    """

    principal: Principal
    company_id: UUID
    name: str


@dataclass(frozen=True, kw_only=True)
class DeleteCompany:
    """Delete a company together with its users.

    Attributes:
        principal: Acting user (must be an administrator).
        company_id: Company to delete.
    """

    principal: Principal
    company_id: UUID
