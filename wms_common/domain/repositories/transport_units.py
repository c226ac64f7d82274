"""TransportUnit repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from wms_common.domain.models.transport import TransportUnit

from .base import Repository


class TransportUnitRepository(Repository[TransportUnit, UUID]):
    """Read/write interface for the TransportUnit aggregate.

    The business key is the formatted barcode string.  UnitError records are
    written and removed together with their unit; there is no separate
    repository for them.
    """

    @abstractmethod
    async def find_by_unique_id(self, key: str) -> TransportUnit | None:
        """Return the unit with the given barcode, or None."""

    @abstractmethod
    async def find_by_location(self, location_id: UUID) -> list[TransportUnit]:
        """Return the units whose actual location is the given location."""

    @abstractmethod
    async def count_errors(self, unit_id: UUID | None = None) -> int:
        """Count stored UnitError records, optionally only those owned by one unit."""
