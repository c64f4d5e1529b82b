"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS)
- Authorization errors (ACCESS_*, PERMISSION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_COMPANY_NAME = "invalid_company_name"
    COMPANY_REQUIRED_FOR_ROLE = "company_required_for_role"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    COMPANY_NOT_FOUND = "company_not_found"
    USER_NOT_FOUND = "user_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    SELF_ROLE_CHANGE_FORBIDDEN = "self_role_change_forbidden"
