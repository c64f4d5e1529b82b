"""Domain services (pure functions over domain types)."""

from src.domain.services.access_gate import authorize

__all__ = ["authorize"]
