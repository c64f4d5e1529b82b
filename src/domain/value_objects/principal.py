"""Principal value object representing the authenticated actor.

Immutable (frozen dataclass). Built by the HTTP boundary from validated JWT
claims and passed explicitly into every handler and gate call; nothing reads
"the current user" from ambient state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import UserRole


@dataclass(frozen=True, slots=True, kw_only=True)
class Principal:
    """Authenticated actor making a request.

    Role and company affiliation together determine every permission
    decision. No other principal state is consulted by the access gate.

    Attributes:
        id: Identifier of the authenticated user.
        role: Assigned role. Plain strings are coerced through UserRole.
        company_id: Owning company. Required for COMPANY_OWNER, ignored for
            authorization of other roles.

    Raises:
        ValueError: If role is not a known UserRole, or a company owner has
            no company.

    Example:
        >>> owner = Principal(
        ...     id=uuid4(),
        ...     role=UserRole.COMPANY_OWNER,
        ...     company_id=acme_id,
        ... )
        >>> Principal(id=uuid4(), role="superuser")
        Traceback (most recent call last):
        ...
        ValueError: 'superuser' is not a valid UserRole
    """

    id: UUID
    role: UserRole
    company_id: UUID | None = None

    def __post_init__(self) -> None:
        """Validate role and company affiliation.

        Raises:
            ValueError: On unknown role or company owner without company.
        """
        if not isinstance(self.role, UserRole):
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "role", UserRole(self.role))

        if self.role == UserRole.COMPANY_OWNER and self.company_id is None:
            raise ValueError("A company owner must belong to a company")

    @property
    def is_administrator(self) -> bool:
        """Check if principal has the administrator role."""
        return self.role == UserRole.ADMINISTRATOR

    def belongs_to(self, company_id: UUID | None) -> bool:
        """Check if principal is affiliated with the given company.

        Args:
            company_id: Company to compare against.

        Returns:
            bool: True only when both ids are set and equal.
        """
        return self.company_id is not None and self.company_id == company_id
