"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateCompany, AssignUserRole).

Each command has a corresponding handler that checks access and then
executes the command against the store.
"""

from src.application.commands.company_commands import (
    CreateCompany,
    DeleteCompany,
    UpdateCompany,
)
from src.application.commands.company_user_commands import (
    AssignUserRole,
    CreateCompanyUser,
    DeleteCompanyUser,
    UpdateCompanyUser,
)

__all__ = [
    # Company commands
    "CreateCompany",
    "DeleteCompany",
    "UpdateCompany",
    # Company user commands
    "AssignUserRole",
    "CreateCompanyUser",
    "DeleteCompanyUser",
    "UpdateCompanyUser",
]
