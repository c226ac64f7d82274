"""Referential integrity and cascade rules of the TransportUnit aggregate.

Runs against SQLite with foreign keys switched on, so every rejection below
comes from the database itself.
"""

import pytest

from wms_common.domain.exceptions import IntegrityViolationError
from wms_common.domain.models.locations import Location, LocationPK
from wms_common.domain.models.transport import TransportUnit, TransportUnitType, UnitError


async def _store_type(unit_of_work, name):
    tut = TransportUnitType(type=name)
    async with unit_of_work() as uow:
        await uow.repositories.transport_unit_types.persist(tut)
    return tut


async def _store_location(unit_of_work, key):
    location = Location(location_pk=LocationPK.of(*key))
    async with unit_of_work() as uow:
        await uow.repositories.locations.persist(location)
    return location


async def _count_errors(unit_of_work, unit_id=None):
    async with unit_of_work() as uow:
        return await uow.repositories.transport_units.count_errors(unit_id)


KNOWN = ("KNOWN", "KNOWN", "KNOWN", "KNOWN", "KNOWN")
UNKNOWN = ("UNKNOWN", "UNKNOWN", "UNKNOWN", "UNKNOWN", "UNKNOWN")


async def test_persist_without_transport_unit_type_fails(unit_of_work):
    tu = TransportUnit.create("TEST_TU")
    with pytest.raises(IntegrityViolationError):
        async with unit_of_work() as uow:
            await uow.repositories.transport_units.persist(tu)


async def test_persist_with_unknown_transport_unit_type_fails(unit_of_work):
    tu = TransportUnit.create("TEST_TU", TransportUnitType(type="UNKNOWN_TUT"))
    with pytest.raises(IntegrityViolationError):
        async with unit_of_work() as uow:
            await uow.repositories.transport_units.persist(tu)


async def test_persist_with_unknown_location_fails(unit_of_work):
    tut = await _store_type(unit_of_work, "WELL_KNOWN_TUT")
    unknown = Location(location_pk=LocationPK.of(*UNKNOWN))
    tu = TransportUnit.create("TEST_TU", tut, actual_location=unknown)
    with pytest.raises(IntegrityViolationError):
        async with unit_of_work() as uow:
            await uow.repositories.transport_units.persist(tu)

    async with unit_of_work() as uow:
        assert await uow.repositories.transport_units.find_all() == []


async def test_persist_with_unknown_target_location_fails(unit_of_work):
    tut = await _store_type(unit_of_work, "WELL_KNOWN_TUT")
    known = await _store_location(unit_of_work, KNOWN)
    unknown = Location(location_pk=LocationPK.of(*UNKNOWN))
    tu = TransportUnit.create("TEST_TU", tut, actual_location=known, target_location=unknown)
    with pytest.raises(IntegrityViolationError):
        async with unit_of_work() as uow:
            await uow.repositories.transport_units.persist(tu)


async def test_save_with_known_location_and_no_target_succeeds(unit_of_work):
    tut = await _store_type(unit_of_work, "KNOWN_TUT")
    location = await _store_location(unit_of_work, KNOWN)
    tu = TransportUnit.create("TEST_TU", tut, actual_location=location)

    async with unit_of_work() as uow:
        stored = await uow.repositories.transport_units.save(tu)

    assert stored is not tu
    assert stored.unit_id == tu.unit_id
    assert stored.transport_unit_type.type == "KNOWN_TUT"
    assert stored.actual_location.location_pk == location.location_pk
    assert stored.target_location is None


async def test_persist_with_known_actual_and_target_location_succeeds(unit_of_work):
    tut = await _store_type(unit_of_work, "KNOWN_TUT")
    location = await _store_location(unit_of_work, KNOWN)
    tu = TransportUnit.create("TEST_TU", tut, actual_location=location, target_location=location)

    async with unit_of_work() as uow:
        await uow.repositories.transport_units.persist(tu)

    async with unit_of_work() as uow:
        found = await uow.repositories.transport_units.find_by_id(tu.unit_id)

    assert found.barcode == tu.barcode
    assert found.transport_unit_type.type_id == tut.type_id
    assert found.actual_location.location_id == location.location_id
    assert found.target_location.location_id == location.location_id


async def test_errors_are_persisted_and_removed_with_their_unit(unit_of_work):
    tut = await _store_type(unit_of_work, "KNOWN_TUT")
    location = await _store_location(unit_of_work, KNOWN)
    tu = TransportUnit.create("TEST_TU", tut, actual_location=location, target_location=location)
    tu.add_error(UnitError(error_no="1"))
    tu.add_error(UnitError(error_no="2"))

    async with unit_of_work() as uow:
        await uow.repositories.transport_units.persist(tu)

    assert await _count_errors(unit_of_work) == 2
    assert await _count_errors(unit_of_work, tu.unit_id) == 2

    async with unit_of_work() as uow:
        await uow.repositories.transport_units.remove(tu)

    assert await _count_errors(unit_of_work, tu.unit_id) == 0
    assert await _count_errors(unit_of_work) == 0


async def test_error_count_is_sum_over_units(unit_of_work):
    tut = await _store_type(unit_of_work, "KNOWN_TUT")
    first = TransportUnit.create("TU_1", tut)
    first.add_error(UnitError())
    second = TransportUnit.create("TU_2", tut)
    second.add_error(UnitError())
    second.add_error(UnitError())
    second.add_error(UnitError())

    async with unit_of_work() as uow:
        await uow.repositories.transport_units.persist(first)
        await uow.repositories.transport_units.persist(second)

    assert await _count_errors(unit_of_work) == 4

    async with unit_of_work() as uow:
        await uow.repositories.transport_units.remove(second)

    assert await _count_errors(unit_of_work) == 1
    assert await _count_errors(unit_of_work, first.unit_id) == 1


async def test_failed_persist_leaves_no_errors_behind(unit_of_work):
    tu = TransportUnit.create("TEST_TU", TransportUnitType(type="UNKNOWN_TUT"))
    tu.add_error(UnitError())
    with pytest.raises(IntegrityViolationError):
        async with unit_of_work() as uow:
            await uow.repositories.transport_units.persist(tu)

    assert await _count_errors(unit_of_work) == 0


async def test_errors_with_equal_timestamps_reload_in_insertion_order(unit_of_work):
    tut = await _store_type(unit_of_work, "KNOWN_TUT")
    tu = TransportUnit.create("TEST_TU", tut)
    first = UnitError(error_no="2")
    tu.add_error(first)
    tu.add_error(UnitError(error_no="1", created_at=first.created_at))
    tu.add_error(UnitError(error_no="3", created_at=first.created_at))

    async with unit_of_work() as uow:
        await uow.repositories.transport_units.persist(tu)

    async with unit_of_work() as uow:
        found = await uow.repositories.transport_units.find_by_id(tu.unit_id)

    assert [e.error_no for e in found.errors] == ["2", "1", "3"]
