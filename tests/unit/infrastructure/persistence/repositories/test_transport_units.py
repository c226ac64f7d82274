"""Tests for SqlTransportUnitRepository: mapping and aggregate queries."""

from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from wms_common.domain.models.barcode import Barcode
from wms_common.domain.models.locations import Location, LocationPK
from wms_common.domain.models.transport import TransportUnit, TransportUnitType, UnitError
from wms_common.infrastructure.persistence.repositories.transport_units import (
    SqlTransportUnitRepository,
)


def _now():
    return datetime.now(timezone.utc)


def _orm_location(**overrides):
    defaults = {
        "location_id": uuid4(),
        "area": "KNOWN",
        "aisle": "KNOWN",
        "x": "KNOWN",
        "y": "KNOWN",
        "z": "KNOWN",
        "description": None,
        "created_at": _now(),
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _orm_unit(**overrides):
    defaults = {
        "unit_id": uuid4(),
        "barcode": "0000000000000TEST_TU",
        "transport_unit_type": SimpleNamespace(
            type_id=uuid4(), type="KNOWN_TUT", description=None, created_at=_now()
        ),
        "actual_location": _orm_location(),
        "target_location": None,
        "errors": [],
        "created_at": _now(),
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


# --- _to_domain mapping ---

def test_to_domain_maps_barcode():
    assert SqlTransportUnitRepository._to_domain(_orm_unit()).barcode.value == "0000000000000TEST_TU"


def test_to_domain_maps_type():
    assert SqlTransportUnitRepository._to_domain(_orm_unit()).transport_unit_type.type == "KNOWN_TUT"


def test_to_domain_maps_actual_location_key():
    result = SqlTransportUnitRepository._to_domain(_orm_unit())
    assert result.actual_location.location_pk == LocationPK.of("KNOWN", "KNOWN", "KNOWN", "KNOWN", "KNOWN")


def test_to_domain_preserves_missing_target_location():
    assert SqlTransportUnitRepository._to_domain(_orm_unit()).target_location is None


def test_to_domain_maps_errors_in_order():
    errors = [
        SimpleNamespace(error_id=uuid4(), error_no=str(i), error_text=None, created_at=_now())
        for i in range(3)
    ]
    result = SqlTransportUnitRepository._to_domain(_orm_unit(errors=errors))
    assert [e.error_no for e in result.errors] == ["0", "1", "2"]


# --- _to_orm mapping ---

def test_to_orm_sets_reference_foreign_keys_only():
    tut = TransportUnitType(type="KNOWN_TUT")
    location = Location(location_pk=LocationPK.of("K", "K", "K", "K", "K"))
    tu = TransportUnit.create("TEST_TU", tut, actual_location=location)
    row = SqlTransportUnitRepository._to_orm(tu)
    assert row.transport_unit_type_id == tut.type_id
    assert row.actual_location_id == location.location_id
    assert row.target_location_id is None


def test_to_orm_without_type_leaves_foreign_key_empty():
    row = SqlTransportUnitRepository._to_orm(TransportUnit.create("TEST_TU"))
    assert row.transport_unit_type_id is None


def test_to_orm_carries_errors():
    tu = TransportUnit.create("TEST_TU")
    tu.add_error(UnitError(error_no="E1"))
    tu.add_error(UnitError(error_no="E2"))
    row = SqlTransportUnitRepository._to_orm(tu)
    assert [e.error_no for e in row.errors] == ["E1", "E2"]


# --- queries ---

def _mock_session(rows=(), scalar=0):
    session = AsyncMock()
    session.execute.return_value = MagicMock(
        scalars=MagicMock(return_value=MagicMock(all=MagicMock(return_value=list(rows)))),
        scalar_one=MagicMock(return_value=scalar),
    )
    return session


async def test_find_by_unique_id_accepts_barcode_objects():
    repo = SqlTransportUnitRepository(_mock_session(rows=[_orm_unit()]))
    result = await repo.find_by_unique_id(Barcode(value="0000000000000TEST_TU"))
    assert result.barcode.value == "0000000000000TEST_TU"


async def test_find_by_location_maps_rows():
    location = _orm_location()
    rows = [_orm_unit(actual_location=location), _orm_unit(actual_location=location)]
    repo = SqlTransportUnitRepository(_mock_session(rows=rows))
    result = await repo.find_by_location(location.location_id)
    assert len(result) == 2


async def test_count_errors_returns_scalar():
    repo = SqlTransportUnitRepository(_mock_session(scalar=2))
    assert await repo.count_errors() == 2


async def test_count_errors_filters_by_unit_when_given():
    session = _mock_session(scalar=0)
    unit_id = uuid4()
    await SqlTransportUnitRepository(session).count_errors(unit_id)
    stmt = session.execute.call_args.args[0]
    assert unit_id in stmt.compile().params.values()


def test_to_orm_numbers_errors_in_list_order():
    tu = TransportUnit.create("TEST_TU")
    for no in ("C", "A", "B"):
        tu.add_error(UnitError(error_no=no))
    row = SqlTransportUnitRepository._to_orm(tu)
    assert [(e.position, e.error_no) for e in row.errors] == [(0, "C"), (1, "A"), (2, "B")]
