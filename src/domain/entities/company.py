"""Company domain entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Company:
    """A company that owns zero or more company users.

    Attributes:
        id: Unique company identifier.
        name: Display name.
        created_at: Timestamp when company was created.
        updated_at: Timestamp when company was last updated.
    """

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
