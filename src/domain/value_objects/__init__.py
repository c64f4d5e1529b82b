"""Domain value objects (immutable, compared by value)."""

from src.domain.value_objects.access_decision import AccessDecision, Allow, Deny
from src.domain.value_objects.email import Email
from src.domain.value_objects.principal import Principal
from src.domain.value_objects.resource_descriptor import ResourceDescriptor
from src.domain.value_objects.user_profile import UserProfile

__all__ = [
    "AccessDecision",
    "Allow",
    "Deny",
    "Email",
    "Principal",
    "ResourceDescriptor",
    "UserProfile",
]
