"""Access control error messages.

Human-readable messages for each DenyReason, used when a gate denial is
turned into an ApplicationError for the HTTP boundary.
"""

from src.domain.enums import DenyReason


class AccessError:
    """Access control error constants."""

    INSUFFICIENT_ROLE = "Your role does not permit this action"
    COMPANY_MISMATCH = "You can only manage users of your own company"
    UNKNOWN_RESOURCE = "Requested resource is not recognized"
    SELF_ROLE_CHANGE = "You cannot change your own role"

    @classmethod
    def for_reason(cls, reason: DenyReason) -> str:
        """Message for a deny reason.

        Args:
            reason: Reason returned by the access gate.

        Returns:
            str: Message safe to show to the caller.
        """
        messages = {
            DenyReason.INSUFFICIENT_ROLE: cls.INSUFFICIENT_ROLE,
            DenyReason.COMPANY_MISMATCH: cls.COMPANY_MISMATCH,
            DenyReason.UNKNOWN_RESOURCE: cls.UNKNOWN_RESOURCE,
        }
        return messages.get(reason, cls.UNKNOWN_RESOURCE)
