"""User roles for RBAC authorization.

This enum is the role registry: it enumerates the valid roles and defines
their privilege order.

Role Hierarchy:
    administrator > company_owner > customer

    - administrator: Unrestricted; manages companies and every company's users
    - company_owner: Scoped to exactly one company
    - customer: No access to company management

Usage:
    from src.domain.enums import UserRole

    if principal.role.is_at_least(UserRole.COMPANY_OWNER):
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for RBAC authorization.

    String Enum:
        Inherits from str for easy serialization (JWT claims, database column).
        Ordering must go through privilege/is_at_least, never through ``<`` on
        the enum itself (that would compare the string values).
    """

    CUSTOMER = "customer"
    """End customer. Cannot manage companies or company users."""

    COMPANY_OWNER = "company_owner"
    """Belongs to exactly one company. Self-service scoped to that company."""

    ADMINISTRATOR = "administrator"
    """Administrator role with full access."""

    @property
    def privilege(self) -> int:
        """Rank of this role in the privilege order (higher is stronger).

        Returns:
            int: 0 for customer, 1 for company owner, 2 for administrator.
        """
        return _PRIVILEGE[self]

    def is_at_least(self, threshold: "UserRole") -> bool:
        """Check whether this role is at least as privileged as threshold.

        Args:
            threshold: Minimum role required.

        Returns:
            bool: True if this role ranks at or above threshold.
        """
        return self.privilege >= threshold.privilege

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()


_PRIVILEGE: dict[UserRole, int] = {
    UserRole.CUSTOMER: 0,
    UserRole.COMPANY_OWNER: 1,
    UserRole.ADMINISTRATOR: 2,
}


def is_at_least(role: UserRole, threshold: UserRole) -> bool:
    """Check whether role ranks at or above threshold.

    Pure function form of UserRole.is_at_least.

    Args:
        role: Role being checked.
        threshold: Minimum role required.

    Returns:
        bool: True if role >= threshold in privilege order.

    Example:
        >>> is_at_least(UserRole.ADMINISTRATOR, UserRole.COMPANY_OWNER)
        True
        >>> is_at_least(UserRole.CUSTOMER, UserRole.COMPANY_OWNER)
        False
    """
    return role.is_at_least(threshold)
