"""Access guard service.

Wraps the pure access gate for use by command and query handlers. The gate
decides; the guard logs denials and turns them into ApplicationError values,
so every handler fails the same way before it touches the store.

Architecture:
    - Application service (the gate itself stays in the domain, free of I/O)
    - Called as the first step of every handler
    - Returns Result, never raises

Usage:
    guard = AccessGuard(logger=logger)

    check = guard.check(
        cmd.principal, Action.CREATE, ResourceDescriptor.company_user(cmd.company_id)
    )
    if isinstance(check, Failure):
        return check
"""

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import Action
from src.domain.errors import AccessError
from src.domain.protocols import LoggerProtocol
from src.domain.services import authorize
from src.domain.value_objects import Allow, Deny, Principal, ResourceDescriptor


class AccessGuard:
    """Gate enforcement for handlers.

    Dependencies (injected via constructor):
        - LoggerProtocol: For access_denied audit lines
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize guard with dependencies.

        Args:
            logger: Structured logger.
        """
        self._logger = logger

    def check(
        self,
        principal: Principal,
        action: Action,
        resource: ResourceDescriptor,
    ) -> Result[None, ApplicationError]:
        """Ask the gate and translate a denial.

        Args:
            principal: Authenticated actor.
            action: Requested action.
            resource: Target resource.

        Returns:
            Success(None) when allowed.
            Failure(ApplicationError(FORBIDDEN)) with the deny reason in
            details when denied.
        """
        match authorize(principal, action, resource):
            case Allow():
                return Success(value=None)
            case Deny(reason=reason):
                self._logger.warning(
                    "access_denied",
                    principal_id=str(principal.id),
                    role=principal.role.value,
                    action=getattr(action, "value", str(action)),
                    resource_kind=getattr(resource.kind, "value", str(resource.kind)),
                    owning_company_id=(
                        str(resource.owning_company_id)
                        if resource.owning_company_id
                        else None
                    ),
                    reason=reason.value,
                )
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.FORBIDDEN,
                        message=AccessError.for_reason(reason),
                        details={"reason": reason.value},
                    )
                )
