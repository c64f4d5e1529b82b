"""Company user command handlers.

Handles CreateCompanyUser, UpdateCompanyUser and DeleteCompanyUser.

Flow (every handler):
1. Build ResourceDescriptor.company_user(company_id) from the path
2. Ask the access gate via AccessGuard; on deny the store is never touched
3. Validate and normalize input (email lowercased, password hashed)
4. Call CompanyUserRepository (company-scoped, NotFound across companies)
5. Map store failures to ApplicationError

Security:
- Plaintext passwords are hashed here and never logged
- Duplicate emails are detected by the store's unique constraint
"""

from src.application.commands.company_user_commands import (
    CreateCompanyUser,
    DeleteCompanyUser,
    UpdateCompanyUser,
)
from src.application.dtos import CompanyUserResult
from src.application.errors import ApplicationError, from_domain_error, validation_failed
from src.application.services.access_guard import AccessGuard
from src.core.errors import DomainError, DuplicateEmailError
from src.core.result import Failure, Result, Success
from src.domain.enums import Action
from src.domain.protocols import (
    CompanyUserRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
)
from src.domain.value_objects import Email, ResourceDescriptor, UserProfile

MAX_USER_NAME_LENGTH = 255


def normalize_user_name(name: str) -> Result[str, ApplicationError]:
    """Strip and validate a display name.

    Args:
        name: Raw name from the request.

    Returns:
        Success(stripped name) or Failure(COMMAND_VALIDATION_FAILED).
    """
    stripped = name.strip()
    if not stripped:
        return Failure(error=validation_failed("Name cannot be empty", "name"))
    if len(stripped) > MAX_USER_NAME_LENGTH:
        return Failure(
            error=validation_failed(
                f"Name cannot exceed {MAX_USER_NAME_LENGTH} characters", "name"
            )
        )
    return Success(value=stripped)


def normalize_email(email: str) -> Result[str, ApplicationError]:
    """Validate an email address and return its lowercase form.

    Args:
        email: Raw email from the request.

    Returns:
        Success(normalized email) or Failure(COMMAND_VALIDATION_FAILED).
    """
    try:
        return Success(value=Email(email).value)
    except ValueError as e:
        return Failure(error=validation_failed(str(e), "email"))


def hash_password(
    password_service: PasswordHashingProtocol, password: str
) -> Result[str, ApplicationError]:
    """Hash a plaintext password, turning rejection into a validation error.

    Args:
        password_service: Password hashing service.
        password: Plaintext password.

    Returns:
        Success(password_hash) or Failure(COMMAND_VALIDATION_FAILED).
    """
    try:
        return Success(value=password_service.hash_password(password))
    except ValueError as e:
        return Failure(error=validation_failed(str(e), "password"))


class CreateCompanyUserHandler:
    """Handler for CreateCompanyUser command.

    The created user always gets role COMPANY_OWNER in the path's company;
    the caller cannot choose a role.
    """

    def __init__(
        self,
        company_user_repo: CompanyUserRepository,
        password_service: PasswordHashingProtocol,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            company_user_repo: Company-scoped user store.
            password_service: Password hashing service.
            guard: Access gate enforcement.
            logger: Structured logger.
        """
        self._company_user_repo = company_user_repo
        self._password_service = password_service
        self._guard = guard
        self._logger = logger

    async def handle(
        self, cmd: CreateCompanyUser
    ) -> Result[CompanyUserResult, ApplicationError]:
        """Handle CreateCompanyUser command.

        Args:
            cmd: CreateCompanyUser command.

        Returns:
            Success(CompanyUserResult) on creation.
            Failure(ApplicationError) with FORBIDDEN, COMMAND_VALIDATION_FAILED,
            NOT_FOUND (unknown company) or CONFLICT (email taken).
        """
        check = self._guard.check(
            cmd.principal,
            Action.CREATE,
            ResourceDescriptor.company_user(cmd.company_id),
        )
        if isinstance(check, Failure):
            return check

        name_result = normalize_user_name(cmd.name)
        if isinstance(name_result, Failure):
            return name_result

        email_result = normalize_email(cmd.email)
        if isinstance(email_result, Failure):
            return email_result

        hash_result = hash_password(self._password_service, cmd.password)
        if isinstance(hash_result, Failure):
            return hash_result

        profile = UserProfile(
            name=name_result.value,
            email=email_result.value,
            password_hash=hash_result.value,
        )
        create_result = await self._company_user_repo.create(cmd.company_id, profile)
        if isinstance(create_result, Failure):
            return Failure(error=self._store_failure(create_result.error, cmd))

        user_id = create_result.value
        find_result = await self._company_user_repo.find(cmd.company_id, user_id)
        if isinstance(find_result, Failure):
            return Failure(error=from_domain_error(find_result.error))

        self._logger.info(
            "company_user_created",
            company_id=str(cmd.company_id),
            user_id=str(user_id),
            principal_id=str(cmd.principal.id),
        )
        return Success(value=CompanyUserResult.from_entity(find_result.value))

    def _store_failure(
        self, error: DomainError, cmd: CreateCompanyUser
    ) -> ApplicationError:
        if isinstance(error, DuplicateEmailError):
            self._logger.info(
                "duplicate_email_rejected",
                company_id=str(cmd.company_id),
                principal_id=str(cmd.principal.id),
            )
        return from_domain_error(error)


class UpdateCompanyUserHandler:
    """Handler for UpdateCompanyUser command (partial update)."""

    def __init__(
        self,
        company_user_repo: CompanyUserRepository,
        password_service: PasswordHashingProtocol,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        self._company_user_repo = company_user_repo
        self._password_service = password_service
        self._guard = guard
        self._logger = logger

    async def handle(
        self, cmd: UpdateCompanyUser
    ) -> Result[CompanyUserResult, ApplicationError]:
        """Handle UpdateCompanyUser command.

        Fields not provided keep their current values; a missing password
        keeps the current hash.

        Returns:
            Success(CompanyUserResult) with the updated profile.
            Failure(ApplicationError) with FORBIDDEN, COMMAND_VALIDATION_FAILED,
            NOT_FOUND (user not in company) or CONFLICT (email taken).
        """
        check = self._guard.check(
            cmd.principal,
            Action.UPDATE,
            ResourceDescriptor.company_user(cmd.company_id),
        )
        if isinstance(check, Failure):
            return check

        current_result = await self._company_user_repo.find(cmd.company_id, cmd.user_id)
        if isinstance(current_result, Failure):
            return Failure(error=from_domain_error(current_result.error))
        current = current_result.value

        name = current.name
        if cmd.name is not None:
            name_result = normalize_user_name(cmd.name)
            if isinstance(name_result, Failure):
                return name_result
            name = name_result.value

        email = current.email
        if cmd.email is not None:
            email_result = normalize_email(cmd.email)
            if isinstance(email_result, Failure):
                return email_result
            email = email_result.value

        password_hash: str | None = None
        if cmd.password is not None:
            hash_result = hash_password(self._password_service, cmd.password)
            if isinstance(hash_result, Failure):
                return hash_result
            password_hash = hash_result.value

        profile = UserProfile(name=name, email=email, password_hash=password_hash)
        update_result = await self._company_user_repo.update(
            cmd.company_id, cmd.user_id, profile
        )
        if isinstance(update_result, Failure):
            if isinstance(update_result.error, DuplicateEmailError):
                self._logger.info(
                    "duplicate_email_rejected",
                    company_id=str(cmd.company_id),
                    user_id=str(cmd.user_id),
                    principal_id=str(cmd.principal.id),
                )
            return Failure(error=from_domain_error(update_result.error))

        updated_result = await self._company_user_repo.find(cmd.company_id, cmd.user_id)
        if isinstance(updated_result, Failure):
            return Failure(error=from_domain_error(updated_result.error))

        self._logger.info(
            "company_user_updated",
            company_id=str(cmd.company_id),
            user_id=str(cmd.user_id),
            principal_id=str(cmd.principal.id),
            password_changed=password_hash is not None,
        )
        return Success(value=CompanyUserResult.from_entity(updated_result.value))


class DeleteCompanyUserHandler:
    """Handler for DeleteCompanyUser command (not idempotent)."""

    def __init__(
        self,
        company_user_repo: CompanyUserRepository,
        guard: AccessGuard,
        logger: LoggerProtocol,
    ) -> None:
        self._company_user_repo = company_user_repo
        self._guard = guard
        self._logger = logger

    async def handle(self, cmd: DeleteCompanyUser) -> Result[None, ApplicationError]:
        """Handle DeleteCompanyUser command.

        Returns:
            Success(None), or Failure(ApplicationError) with FORBIDDEN or
            NOT_FOUND (also on a repeated delete).
        """
        check = self._guard.check(
            cmd.principal,
            Action.DELETE,
            ResourceDescriptor.company_user(cmd.company_id),
        )
        if isinstance(check, Failure):
            return check

        delete_result = await self._company_user_repo.delete(cmd.company_id, cmd.user_id)
        if isinstance(delete_result, Failure):
            return Failure(error=from_domain_error(delete_result.error))

        self._logger.info(
            "company_user_deleted",
            company_id=str(cmd.company_id),
            user_id=str(cmd.user_id),
            principal_id=str(cmd.principal.id),
        )
        return Success(value=None)
