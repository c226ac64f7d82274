"""SQLAlchemy implementation of TransportUnitTypeRepository."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from wms_common.domain.models.transport import TransportUnitType as DomainTransportUnitType
from wms_common.domain.repositories.transport_unit_types import TransportUnitTypeRepository
from wms_common.infrastructure.persistence.models.reference import (
    TransportUnitType as OrmTransportUnitType,
)

from .base import SqlRepository


class SqlTransportUnitTypeRepository(
    SqlRepository[DomainTransportUnitType, OrmTransportUnitType, UUID],
    TransportUnitTypeRepository,
):
    entity_type = DomainTransportUnitType
    model = OrmTransportUnitType
    find_all_query = "TransportUnitType.findAll"
    find_by_unique_id_query = "TransportUnitType.findByUniqueId"

    @staticmethod
    def _to_domain(row: OrmTransportUnitType) -> DomainTransportUnitType:
        return DomainTransportUnitType(
            type_id=row.type_id,
            type=row.type,
            description=row.description,
            created_at=row.created_at,
        )

    @staticmethod
    def _to_orm(entity: DomainTransportUnitType) -> OrmTransportUnitType:
        return OrmTransportUnitType(
            type_id=entity.type_id,
            type=entity.type,
            description=entity.description,
            created_at=entity.created_at,
        )

    @staticmethod
    def _identity(entity: DomainTransportUnitType) -> UUID:
        return entity.type_id

    def _unique_id_params(self, key: str) -> dict[str, Any]:
        return {"type": key}
