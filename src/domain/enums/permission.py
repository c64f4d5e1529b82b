"""Permission components for RBAC authorization.

This module defines ResourceKind and Action enums used by the access gate.
A permission check is always (principal, action, resource descriptor).

Usage:
    from src.domain.enums import Action, ResourceKind

    decision = authorize(
        principal,
        Action.CREATE,
        ResourceDescriptor.company_user(company_id),
    )
"""

from enum import Enum


class ResourceKind(str, Enum):
    """Kinds of resources that can be protected by authorization.

    String Enum:
        Inherits from str for easy serialization in logs and error details.
    """

    COMPANY = "company"
    """A company (administrators only)."""

    COMPANY_USER = "company_user"
    """A user scoped to a company. Always carries the owning company."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all resource kind values as strings.

        Returns:
            list[str]: List of resource kind values.
        """
        return [kind.value for kind in cls]


class Action(str, Enum):
    """Actions that can be performed on resources.

    Action Semantics:
        LIST: Enumerate resources in a scope
        CREATE: Add a new resource
        READ: View a single resource
        UPDATE: Modify an existing resource
        DELETE: Remove a resource
    """

    LIST = "list"
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]
