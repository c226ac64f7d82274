"""Named-query catalog.

Queries are registered under a string name ("<Entity>.<query>") and built on
demand from named parameters.  Repositories refer to queries by name only, so
the statement text for an entity lives in one place.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.orm import selectinload

from wms_common.domain.exceptions import QueryError
from wms_common.infrastructure.persistence.models.reference import Location as OrmLocation
from wms_common.infrastructure.persistence.models.reference import (
    TransportUnitType as OrmTransportUnitType,
)
from wms_common.infrastructure.persistence.models.transport import (
    TransportUnit as OrmTransportUnit,
)

QueryBuilder = Callable[..., Select[Any]]


class QueryCatalog:
    """Registry of named, parameterized SELECT builders."""

    def __init__(self) -> None:
        self._builders: dict[str, QueryBuilder] = {}

    def register(self, name: str) -> Callable[[QueryBuilder], QueryBuilder]:
        """Decorator form of add()."""

        def decorator(builder: QueryBuilder) -> QueryBuilder:
            self.add(name, builder)
            return builder

        return decorator

    def add(self, name: str, builder: QueryBuilder) -> None:
        if name in self._builders:
            raise ValueError(f"Named query {name!r} is already registered")
        self._builders[name] = builder

    def names(self) -> list[str]:
        return sorted(self._builders)

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def build(self, name: str, params: Mapping[str, Any] | None = None) -> Select[Any]:
        """Return the statement for name bound to params.

        Raises QueryError for an unknown name or parameters the builder
        does not accept.
        """
        try:
            builder = self._builders[name]
        except KeyError:
            raise QueryError(f"Unknown named query {name!r}", entity_name=name, operation="build") from None
        try:
            return builder(**dict(params or {}))
        except TypeError as exc:
            raise QueryError(str(exc), entity_name=name, operation="build") from exc


def transport_unit_load_options() -> tuple[Any, ...]:
    """Eager-load everything TransportUnit._to_domain touches."""
    return (
        selectinload(OrmTransportUnit.transport_unit_type),
        selectinload(OrmTransportUnit.actual_location),
        selectinload(OrmTransportUnit.target_location),
        selectinload(OrmTransportUnit.errors),
    )


named_queries = QueryCatalog()


# --- TransportUnitType ---

@named_queries.register("TransportUnitType.findAll")
def _transport_unit_types_find_all() -> Select[Any]:
    return select(OrmTransportUnitType).order_by(OrmTransportUnitType.type)


@named_queries.register("TransportUnitType.findByUniqueId")
def _transport_unit_types_find_by_unique_id(type: str) -> Select[Any]:
    return select(OrmTransportUnitType).where(OrmTransportUnitType.type == type)


# --- Location ---

@named_queries.register("Location.findAll")
def _locations_find_all() -> Select[Any]:
    return select(OrmLocation).order_by(
        OrmLocation.area, OrmLocation.aisle, OrmLocation.x, OrmLocation.y, OrmLocation.z
    )


@named_queries.register("Location.findByLocationPK")
def _locations_find_by_location_pk(area: str, aisle: str, x: str, y: str, z: str) -> Select[Any]:
    return select(OrmLocation).where(
        OrmLocation.area == area,
        OrmLocation.aisle == aisle,
        OrmLocation.x == x,
        OrmLocation.y == y,
        OrmLocation.z == z,
    )


# --- TransportUnit ---

@named_queries.register("TransportUnit.findAll")
def _transport_units_find_all() -> Select[Any]:
    return (
        select(OrmTransportUnit)
        .options(*transport_unit_load_options())
        .order_by(OrmTransportUnit.barcode)
    )


@named_queries.register("TransportUnit.findByBarcode")
def _transport_units_find_by_barcode(barcode: str) -> Select[Any]:
    return (
        select(OrmTransportUnit)
        .options(*transport_unit_load_options())
        .where(OrmTransportUnit.barcode == barcode)
    )


@named_queries.register("TransportUnit.findByActualLocation")
def _transport_units_find_by_actual_location(location_id: UUID) -> Select[Any]:
    return (
        select(OrmTransportUnit)
        .options(*transport_unit_load_options())
        .where(OrmTransportUnit.actual_location_id == location_id)
        .order_by(OrmTransportUnit.barcode)
    )
