"""UserProfile value object: the data a caller may set on a company user.

Deliberately has no role field. The store assigns the role itself.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class UserProfile:
    """Profile fields for creating or updating a company user.

    Attributes:
        name: Display name.
        email: Normalized email address (see Email value object).
        password_hash: Bcrypt hash. None on update means keep the current one.
    """

    name: str
    email: str
    password_hash: str | None = None
