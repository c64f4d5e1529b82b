"""ResourceDescriptor value object: what a request is asking for."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import ResourceKind


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceDescriptor:
    """Abstract description of the target of an action.

    Built by the application layer from path parameters. Not validated on
    construction: a malformed descriptor (company user without owning
    company) is a deny decision in the gate, not a crash.

    Attributes:
        kind: Resource kind.
        owning_company_id: Company that owns the resource, when scoped.
    """

    kind: ResourceKind
    owning_company_id: UUID | None = None

    @classmethod
    def company(cls, company_id: UUID | None = None) -> "ResourceDescriptor":
        """Descriptor for a company (or the company collection when None)."""
        return cls(kind=ResourceKind.COMPANY, owning_company_id=company_id)

    @classmethod
    def company_user(cls, company_id: UUID | None) -> "ResourceDescriptor":
        """Descriptor for users scoped to company_id."""
        return cls(kind=ResourceKind.COMPANY_USER, owning_company_id=company_id)
