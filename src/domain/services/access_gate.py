"""Access gate: the pure authorization decision function.

Given a principal, an action and a resource descriptor, returns Allow() or
Deny(reason). No I/O, no logging, no ambient state, never raises for
well-formed inputs. Safe to call from any number of concurrent requests.

Policy (first match wins):
    1. COMPANY: administrators only, otherwise INSUFFICIENT_ROLE.
    2. COMPANY_USER:
       - missing owning company: UNKNOWN_RESOURCE
       - ADMINISTRATOR: allowed for every action
       - COMPANY_OWNER: allowed only inside own company, otherwise
         COMPANY_MISMATCH
       - CUSTOMER: INSUFFICIENT_ROLE
    3. Anything else: UNKNOWN_RESOURCE (fail closed).

Usage:
    from src.domain.services import authorize

    decision = authorize(principal, Action.DELETE, ResourceDescriptor.company(cid))
    if not decision.allowed:
        ...
"""

from src.domain.enums import Action, DenyReason, ResourceKind, UserRole
from src.domain.value_objects import (
    AccessDecision,
    Allow,
    Deny,
    Principal,
    ResourceDescriptor,
)


def authorize(
    principal: Principal,
    action: Action,
    resource: ResourceDescriptor,
) -> AccessDecision:
    """Decide whether principal may perform action on resource.

    Args:
        principal: Authenticated actor.
        action: Requested action.
        resource: Target resource descriptor.

    Returns:
        AccessDecision: Allow() or Deny(reason).
    """
    if not isinstance(action, Action):
        return Deny(DenyReason.UNKNOWN_RESOURCE)

    if resource.kind == ResourceKind.COMPANY:
        return _authorize_company(principal)

    if resource.kind == ResourceKind.COMPANY_USER:
        return _authorize_company_user(principal, resource)

    return Deny(DenyReason.UNKNOWN_RESOURCE)


def _authorize_company(principal: Principal) -> AccessDecision:
    if principal.role == UserRole.ADMINISTRATOR:
        return Allow()
    return Deny(DenyReason.INSUFFICIENT_ROLE)


def _authorize_company_user(
    principal: Principal,
    resource: ResourceDescriptor,
) -> AccessDecision:
    if resource.owning_company_id is None:
        return Deny(DenyReason.UNKNOWN_RESOURCE)

    match principal.role:
        case UserRole.ADMINISTRATOR:
            return Allow()
        case UserRole.COMPANY_OWNER:
            # Self-service extension point: scoped to own company, nothing more
            if principal.belongs_to(resource.owning_company_id):
                return Allow()
            return Deny(DenyReason.COMPANY_MISMATCH)
        case _:
            return Deny(DenyReason.INSUFFICIENT_ROLE)
