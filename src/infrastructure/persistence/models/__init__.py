"""Database models for persistence layer.

These are infrastructure concerns and should not be imported by the domain
layer. Domain entities live in src/domain/entities/ and are mapped by the
repositories.

Models:
    - company.py: Company model
    - user.py: User model
"""

from src.infrastructure.persistence.models.company import Company
from src.infrastructure.persistence.models.user import User

__all__ = [
    "Company",
    "User",
]
