"""Domain enums for business logic.

Available Enums:
    - UserRole: RBAC roles (customer, company_owner, administrator)
    - ResourceKind: Protected resource kinds (company, company_user)
    - Action: Actions on resources (list, create, read, update, delete)
    - DenyReason: Why the access gate refused a request
"""

from src.domain.enums.deny_reason import DenyReason
from src.domain.enums.permission import Action, ResourceKind
from src.domain.enums.user_role import UserRole, is_at_least

__all__ = [
    "Action",
    "DenyReason",
    "ResourceKind",
    "UserRole",
    "is_at_least",
]
