"""Company command handlers.

Handles CreateCompany, UpdateCompany and DeleteCompany.

Flow (every handler):
1. Ask the access gate via AccessGuard (COMPANY kind, administrators only)
2. Validate input
3. Call CompanyRepository
4. Map store failures to ApplicationError

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from uuid import UUID

from src.application.commands.company_commands import (
    CreateCompany,
    DeleteCompany,
    UpdateCompany,
)
from src.application.dtos import CompanyResult
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    validation_failed,
)
from src.application.services.access_guard import AccessGuard
from src.core.result import Failure, Result, Success
from src.domain.enums import Action
from src.domain.protocols import CompanyRepository, LoggerProtocol
from src.domain.value_objects import ResourceDescriptor

MAX_COMPANY_NAME_LENGTH = 255


def normalize_company_name(name: str) -> Result[str, ApplicationError]:
    """Strip and validate a company name.

    Args:
        name: Raw name from the request.

    Returns:
        Success(stripped name) or Failure(COMMAND_VALIDATION_FAILED).
    """
    stripped = name.strip()
    if not stripped:
        return Failure(error=validation_failed("Company name cannot be empty", "name"))
    if len(stripped) > MAX_COMPANY_NAME_LENGTH:
        return Failure(
            error=validation_failed(
                f"Company name cannot exceed {MAX_COMPANY_NAME_LENGTH} characters",
                "name",
            )
        )
    return Success(value=stripped)


class CreateCompanyHandler:
    """Handler for CreateCompany command."""

    def __init__(
        self,
        company_repo: CompanyRepository,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            company_repo: Company repository for persistence.
            guard: Access gate enforcement.
            logger: Structured logger.
        """
        self._company_repo = company_repo
        self._guard = guard
        self._logger = logger

    async def handle(self, cmd: CreateCompany) -> Result[CompanyResult, ApplicationError]:
        """Handle CreateCompany command.

        Args:
            cmd: CreateCompany command.

        Returns:
            Success(CompanyResult) on creation.
            Failure(ApplicationError) with FORBIDDEN or COMMAND_VALIDATION_FAILED.
        """
        check = self._guard.check(
            cmd.principal, Action.CREATE, ResourceDescriptor.company()
        )
        if isinstance(check, Failure):
            return check

        name_result = normalize_company_name(cmd.name)
        if isinstance(name_result, Failure):
            return name_result

        create_result = await self._company_repo.create(name_result.value)
        if isinstance(create_result, Failure):
            return Failure(error=from_domain_error(create_result.error))

        company_id = create_result.value
        company = await self._company_repo.find_by_id(company_id)
        if company is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
                    message="Company was not persisted",
                )
            )

        self._logger.info(
            "company_created",
            company_id=str(company_id),
            principal_id=str(cmd.principal.id),
        )
        return Success(value=CompanyResult.from_entity(company))


class UpdateCompanyHandler:
    """Handler for UpdateCompany command."""

    def __init__(
        self,
        company_repo: CompanyRepository,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        self._company_repo = company_repo
        self._guard = guard
        self._logger = logger

    async def handle(self, cmd: UpdateCompany) -> Result[CompanyResult, ApplicationError]:
        """Handle UpdateCompany command.

        Returns:
            Success(CompanyResult) with the new name.
            Failure(ApplicationError) with FORBIDDEN, COMMAND_VALIDATION_FAILED
            or NOT_FOUND.
        """
        check = self._guard.check(
            cmd.principal, Action.UPDATE, ResourceDescriptor.company(cmd.company_id)
        )
        if isinstance(check, Failure):
            return check

        name_result = normalize_company_name(cmd.name)
        if isinstance(name_result, Failure):
            return name_result

        update_result = await self._company_repo.update(cmd.company_id, name_result.value)
        if isinstance(update_result, Failure):
            return Failure(error=from_domain_error(update_result.error))

        company = await self._company_repo.find_by_id(cmd.company_id)
        if company is None:
            return Failure(error=_company_not_found(cmd.company_id))

        self._logger.info(
            "company_updated",
            company_id=str(cmd.company_id),
            principal_id=str(cmd.principal.id),
        )
        return Success(value=CompanyResult.from_entity(company))


class DeleteCompanyHandler:
    """Handler for DeleteCompany command.

    Deleting a company deletes its users.
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        self._company_repo = company_repo
        self._guard = guard
        self._logger = logger

    async def handle(self, cmd: DeleteCompany) -> Result[None, ApplicationError]:
        """Handle DeleteCompany command.

        Returns:
            Success(None), or Failure(ApplicationError) with FORBIDDEN or NOT_FOUND.
        """
        check = self._guard.check(
            cmd.principal, Action.DELETE, ResourceDescriptor.company(cmd.company_id)
        )
        if isinstance(check, Failure):
            return check

        delete_result = await self._company_repo.delete(cmd.company_id)
        if isinstance(delete_result, Failure):
            return Failure(error=from_domain_error(delete_result.error))

        self._logger.info(
            "company_deleted",
            company_id=str(cmd.company_id),
            principal_id=str(cmd.principal.id),
        )
        return Success(value=None)


def _company_not_found(company_id: UUID) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message="Company not found",
        details={"company_id": str(company_id)},
    )
