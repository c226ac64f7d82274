"""TransportUnitType repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from wms_common.domain.models.transport import TransportUnitType

from .base import Repository


class TransportUnitTypeRepository(Repository[TransportUnitType, UUID]):
    """Read/write interface for TransportUnitType reference entities.

    The business key is the type name.
    """

    @abstractmethod
    async def find_by_unique_id(self, key: str) -> TransportUnitType | None:
        """Return the type with the given name, or None."""
