"""Reasons the access gate can deny a request.

All of them map to 403 Forbidden at the HTTP boundary; the reason is kept for
logging and for the problem detail body.
"""

from enum import Enum


class DenyReason(str, Enum):
    """Machine-readable deny reasons."""

    INSUFFICIENT_ROLE = "insufficient_role"
    """Principal's role can never perform this action on this kind."""

    COMPANY_MISMATCH = "company_mismatch"
    """Principal is scoped to a different company than the resource."""

    UNKNOWN_RESOURCE = "unknown_resource"
    """Resource kind not recognized or descriptor malformed (fail closed)."""
