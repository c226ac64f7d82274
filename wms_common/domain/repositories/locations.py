"""Location repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from wms_common.domain.models.locations import Location, LocationPK

from .base import Repository


class LocationRepository(Repository[Location, UUID]):
    """Read/write interface for Location entities, keyed by LocationPK."""

    @abstractmethod
    async def find_by_unique_id(self, key: LocationPK) -> Location | None:
        """Return the location with the given composite key, or None."""
