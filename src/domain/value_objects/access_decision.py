"""Access gate decision types.

A decision is either Allow() or Deny(reason). Consumers pattern-match:

    match authorize(principal, action, resource):
        case Allow():
            ...
        case Deny(reason=reason):
            ...
"""

from dataclasses import dataclass

from src.domain.enums import DenyReason


@dataclass(frozen=True, slots=True)
class Allow:
    """The principal may perform the action."""

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Deny:
    """The principal may not perform the action.

    Attributes:
        reason: Why access was refused.
    """

    reason: DenyReason

    @property
    def allowed(self) -> bool:
        return False


type AccessDecision = Allow | Deny
