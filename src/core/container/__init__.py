"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_company_handler, ...

The container is organized into modules by concern:
- infrastructure: Core services (db, logging, password hashing, tokens)
- repositories: Repository factories
- handlers: Command/query handler factories and the access guard
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_company_repository,
    get_company_user_repository,
)

# Handlers
from src.core.container.handlers import (
    get_access_guard,
    get_assign_user_role_handler,
    get_create_company_handler,
    get_create_company_user_handler,
    get_delete_company_handler,
    get_delete_company_user_handler,
    get_get_company_handler,
    get_get_company_user_handler,
    get_list_companies_handler,
    get_list_company_users_handler,
    get_update_company_handler,
    get_update_company_user_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_company_repository",
    "get_company_user_repository",
    # Handlers
    "get_access_guard",
    "get_assign_user_role_handler",
    "get_create_company_handler",
    "get_create_company_user_handler",
    "get_delete_company_handler",
    "get_delete_company_user_handler",
    "get_get_company_handler",
    "get_get_company_user_handler",
    "get_list_companies_handler",
    "get_list_company_users_handler",
    "get_update_company_handler",
    "get_update_company_user_handler",
]
