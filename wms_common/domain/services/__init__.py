"""Domain services package."""

from .entity_service import EntityService

__all__ = ["EntityService"]
