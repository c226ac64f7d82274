"""SQLAlchemy implementation of LocationRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from wms_common.domain.models.locations import Location as DomainLocation
from wms_common.domain.models.locations import LocationPK
from wms_common.domain.repositories.locations import LocationRepository
from wms_common.infrastructure.persistence.models.reference import Location as OrmLocation

from .base import SqlRepository


class SqlLocationRepository(SqlRepository[DomainLocation, OrmLocation, UUID], LocationRepository):
    entity_type = DomainLocation
    model = OrmLocation
    find_all_query = "Location.findAll"
    find_by_unique_id_query = "Location.findByLocationPK"

    @staticmethod
    def _to_domain(row: OrmLocation) -> DomainLocation:
        return DomainLocation(
            location_id=row.location_id,
            location_pk=LocationPK(area=row.area, aisle=row.aisle, x=row.x, y=row.y, z=row.z),
            description=row.description,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_orm(entity: DomainLocation) -> OrmLocation:
        pk = entity.location_pk
        return OrmLocation(
            location_id=entity.location_id,
            area=pk.area,
            aisle=pk.aisle,
            x=pk.x,
            y=pk.y,
            z=pk.z,
            description=entity.description,
            created_at=entity.created_at,
        )

    @staticmethod
    def _identity(entity: DomainLocation) -> UUID:
        return entity.location_id

    def _unique_id_params(self, key: LocationPK) -> dict[str, Any]:
        return key.model_dump()
