"""Concrete SQLAlchemy repository implementations.

Exports the SqlRepository base, the per-entity repositories and the
get_repositories() factory used by the unit of work.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from wms_common.domain.repositories.base import Repository

from .base import SqlRepository
from .locations import SqlLocationRepository
from .transport_unit_types import SqlTransportUnitTypeRepository
from .transport_units import SqlTransportUnitRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    transport_unit_types: SqlTransportUnitTypeRepository
    locations: SqlLocationRepository
    transport_units: SqlTransportUnitRepository

    def all(self) -> list[Repository]:
        return [self.transport_unit_types, self.locations, self.transport_units]


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

        async with UnitOfWork() as uow:
            tu = await uow.repositories.transport_units.find_by_unique_id(barcode)
    """
    return Repositories(
        transport_unit_types=SqlTransportUnitTypeRepository(session),
        locations=SqlLocationRepository(session),
        transport_units=SqlTransportUnitRepository(session),
    )


__all__ = [
    "SqlRepository",
    "SqlTransportUnitTypeRepository",
    "SqlLocationRepository",
    "SqlTransportUnitRepository",
    "Repositories",
    "get_repositories",
]
