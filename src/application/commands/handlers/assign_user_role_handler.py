"""AssignUserRole command handler.

Role and company reassignment is the only way a principal's role changes.

Flow:
1. Gate check on the COMPANY kind (only administrators pass)
2. Refuse self-reassignment (an administrator cannot demote themselves)
3. CompanyUserRepository.assign_role
4. Log user_role_assigned
"""

from src.application.commands.company_user_commands import AssignUserRole
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
)
from src.application.services.access_guard import AccessGuard
from src.core.result import Failure, Result, Success
from src.domain.enums import Action, UserRole
from src.domain.errors import AccessError
from src.domain.protocols import CompanyUserRepository, LoggerProtocol
from src.domain.value_objects import ResourceDescriptor


class AssignUserRoleHandler:
    """Handler for AssignUserRole command."""

    def __init__(
        self,
        company_user_repo: CompanyUserRepository,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            company_user_repo: User store (assign_role operation).
            guard: Access gate enforcement.
            logger: Structured logger.
        """
        self._company_user_repo = company_user_repo
        self._guard = guard
        self._logger = logger

    async def handle(self, cmd: AssignUserRole) -> Result[None, ApplicationError]:
        """Handle AssignUserRole command.

        A company_id supplied with a role other than COMPANY_OWNER is
        discarded; only company owners are affiliated with a company.

        Args:
            cmd: AssignUserRole command.

        Returns:
            Success(None) on reassignment.
            Failure(ApplicationError) with FORBIDDEN (not an administrator, or
            self-reassignment), NOT_FOUND or COMMAND_VALIDATION_FAILED.
        """
        check = self._guard.check(
            cmd.principal, Action.UPDATE, ResourceDescriptor.company(cmd.company_id)
        )
        if isinstance(check, Failure):
            return check

        if cmd.user_id == cmd.principal.id:
            self._logger.warning(
                "access_denied",
                principal_id=str(cmd.principal.id),
                role=cmd.principal.role.value,
                action=Action.UPDATE.value,
                resource_kind="user_role",
                reason="self_role_change",
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.FORBIDDEN,
                    message=AccessError.SELF_ROLE_CHANGE,
                    details={"reason": "self_role_change"},
                )
            )

        company_id = cmd.company_id if cmd.role == UserRole.COMPANY_OWNER else None
        assign_result = await self._company_user_repo.assign_role(
            cmd.user_id, cmd.role, company_id
        )
        if isinstance(assign_result, Failure):
            return Failure(error=from_domain_error(assign_result.error))

        self._logger.info(
            "user_role_assigned",
            user_id=str(cmd.user_id),
            role=cmd.role.value,
            company_id=str(company_id) if company_id else None,
            principal_id=str(cmd.principal.id),
        )
        return Success(value=None)
