"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import CompanyUserRepository, PasswordHashingProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.company_repository import CompanyRepository
from src.domain.protocols.company_user_repository import CompanyUserRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "CompanyRepository",
    "CompanyUserRepository",
]
