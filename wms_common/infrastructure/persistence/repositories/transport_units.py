"""SQLAlchemy implementation of TransportUnitRepository."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from sqlalchemy import func, select

from wms_common.domain.models.barcode import Barcode
from wms_common.domain.models.transport import TransportUnit as DomainTransportUnit
from wms_common.domain.models.transport import UnitError as DomainUnitError
from wms_common.domain.repositories.transport_units import TransportUnitRepository
from wms_common.infrastructure.persistence.errors import translate_errors
from wms_common.infrastructure.persistence.models.transport import (
    TransportUnit as OrmTransportUnit,
)
from wms_common.infrastructure.persistence.models.transport import UnitError as OrmUnitError
from wms_common.infrastructure.persistence.queries import transport_unit_load_options

from .base import SqlRepository
from .locations import SqlLocationRepository
from .transport_unit_types import SqlTransportUnitTypeRepository


def _error_to_domain(row: OrmUnitError) -> DomainUnitError:
    return DomainUnitError(
        error_id=row.error_id,
        error_no=row.error_no,
        error_text=row.error_text,
        created_at=row.created_at,
    )


def _error_to_orm(error: DomainUnitError, position: int) -> OrmUnitError:
    return OrmUnitError(
        error_id=error.error_id,
        position=position,
        error_no=error.error_no,
        error_text=error.error_text,
        created_at=error.created_at,
    )


class SqlTransportUnitRepository(
    SqlRepository[DomainTransportUnit, OrmTransportUnit, UUID],
    TransportUnitRepository,
):
    entity_type = DomainTransportUnit
    model = OrmTransportUnit
    find_all_query = "TransportUnit.findAll"
    find_by_unique_id_query = "TransportUnit.findByBarcode"

    @staticmethod
    def _to_domain(row: OrmTransportUnit) -> DomainTransportUnit:
        return DomainTransportUnit(
            unit_id=row.unit_id,
            barcode=Barcode(value=row.barcode),
            transport_unit_type=SqlTransportUnitTypeRepository._to_domain(row.transport_unit_type),
            actual_location=(
                SqlLocationRepository._to_domain(row.actual_location)
                if row.actual_location is not None
                else None
            ),
            target_location=(
                SqlLocationRepository._to_domain(row.target_location)
                if row.target_location is not None
                else None
            ),
            errors=[_error_to_domain(e) for e in row.errors],
            created_at=row.created_at,
        )

    @staticmethod
    def _to_orm(entity: DomainTransportUnit) -> OrmTransportUnit:
        # Only FK columns are set; the referenced rows must already exist.
        tut = entity.transport_unit_type
        actual = entity.actual_location
        target = entity.target_location
        return OrmTransportUnit(
            unit_id=entity.unit_id,
            barcode=entity.barcode.value,
            transport_unit_type_id=tut.type_id if tut is not None else None,
            actual_location_id=actual.location_id if actual is not None else None,
            target_location_id=target.location_id if target is not None else None,
            created_at=entity.created_at,
            errors=[_error_to_orm(e, i) for i, e in enumerate(entity.errors)],
        )

    @staticmethod
    def _identity(entity: DomainTransportUnit) -> UUID:
        return entity.unit_id

    def _unique_id_params(self, key: str | Barcode) -> dict[str, Any]:
        return {"barcode": str(key)}

    def _load_options(self) -> Sequence[Any]:
        return transport_unit_load_options()

    async def find_by_location(self, location_id: UUID) -> list[DomainTransportUnit]:
        return await self.find_by_query(
            "TransportUnit.findByActualLocation", {"location_id": location_id}
        )

    async def count_errors(self, unit_id: UUID | None = None) -> int:
        stmt = select(func.count()).select_from(OrmUnitError)
        if unit_id is not None:
            stmt = stmt.where(OrmUnitError.unit_id == unit_id)
        with translate_errors(self._entity_name, "count_errors"):
            result = await self._session.execute(stmt)
            return result.scalar_one()
