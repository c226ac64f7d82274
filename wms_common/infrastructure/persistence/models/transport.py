"""Transport layer ORM models: transport_units, unit_errors."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from wms_common.infrastructure.database import Base


class TransportUnit(Base):
    """Transport unit row.

    transport_unit_type_id is mandatory; both location references are
    optional.  All three are plain foreign keys, so a reference to a row that
    does not exist is rejected by the database.  The reference relationships
    are only used for eager loading; writes set the FK columns directly.
    """

    __tablename__ = "transport_units"
    __table_args__ = (UniqueConstraint("barcode", name="uq_transport_units_barcode"),)

    unit_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    barcode: Mapped[str] = mapped_column(Text, nullable=False)
    transport_unit_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("transport_unit_types.type_id"), nullable=False
    )
    actual_location_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("locations.location_id"), nullable=True
    )
    target_location_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("locations.location_id"), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    transport_unit_type: Mapped["TransportUnitType"] = relationship(
        "TransportUnitType", foreign_keys=[transport_unit_type_id]
    )
    # Two FK paths to locations; disambiguated with foreign_keys.
    actual_location: Mapped[Optional["Location"]] = relationship(
        "Location", foreign_keys=[actual_location_id]
    )
    target_location: Mapped[Optional["Location"]] = relationship(
        "Location", foreign_keys=[target_location_id]
    )
    errors: Mapped[list["UnitError"]] = relationship(
        back_populates="transport_unit",
        cascade="all, delete-orphan",
        order_by="UnitError.position",
    )


class UnitError(Base):
    """Error record owned by exactly one transport unit; deleted with it.

    position is the index in the owning unit's error list and fixes the
    load order, since created_at values can tie.
    """

    __tablename__ = "unit_errors"

    error_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    unit_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("transport_units.unit_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    error_no: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    error_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    transport_unit: Mapped["TransportUnit"] = relationship(back_populates="errors")
