"""TransportUnit aggregate and its reference entities.

TransportUnit is the aggregate root.  It references exactly one
TransportUnitType and optionally an actual and a target Location; none of
those are owned by the unit and all of them must already be stored before
the unit is written.  UnitError records are owned by the unit: they are
written and deleted together with it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .barcode import Barcode, BarcodeFormat
from .locations import Location


class TransportUnitType(BaseModel):
    """Reference entity identified by its type name (business key)."""

    model_config = ConfigDict(frozen=True)

    type_id: UUID = Field(default_factory=uuid4)
    type: str = Field(min_length=1)
    description: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class UnitError(BaseModel):
    """An error record attached to a transport unit."""

    model_config = ConfigDict(frozen=True)

    error_id: UUID = Field(default_factory=uuid4)
    error_no: str | None = None
    error_text: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TransportUnit(BaseModel):
    """A unit of logistics (pallet, box, container).

    transport_unit_type is typed as optional so that an incomplete unit can
    be built and handed to a repository; the database rejects it on write.
    errors keeps insertion order; it is stored as each error's position.
    """

    unit_id: UUID = Field(default_factory=uuid4)
    barcode: Barcode
    transport_unit_type: TransportUnitType | None = None
    actual_location: Location | None = None
    target_location: Location | None = None
    errors: list[UnitError] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        barcode: str,
        transport_unit_type: TransportUnitType | None = None,
        actual_location: Location | None = None,
        target_location: Location | None = None,
        barcode_format: BarcodeFormat | None = None,
    ) -> TransportUnit:
        """Named constructor that formats the raw barcode value."""
        return cls(
            barcode=Barcode.create(barcode, barcode_format),
            transport_unit_type=transport_unit_type,
            actual_location=actual_location,
            target_location=target_location,
        )

    def add_error(self, error: UnitError) -> UnitError:
        # Rebind rather than append: model_copy() shares the list.
        self.errors = [*self.errors, error]
        return error
