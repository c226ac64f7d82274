"""Reference layer ORM models: transport_unit_types, locations."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from wms_common.infrastructure.database import Base


class TransportUnitType(Base):
    """Kind of transport unit (pallet, box, ...), keyed by its type name.

    Must be stored before any transport unit can reference it.
    """

    __tablename__ = "transport_unit_types"
    __table_args__ = (UniqueConstraint("type", name="uq_transport_unit_types_type"),)

    type_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    type: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Location(Base):
    """Storage location addressed by the five-part business key (area/aisle/x/y/z)."""

    __tablename__ = "locations"
    __table_args__ = (
        UniqueConstraint("area", "aisle", "x", "y", "z", name="uq_locations_location_pk"),
    )

    location_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    area: Mapped[str] = mapped_column(Text, nullable=False)
    aisle: Mapped[str] = mapped_column(Text, nullable=False)
    x: Mapped[str] = mapped_column(Text, nullable=False)
    y: Mapped[str] = mapped_column(Text, nullable=False)
    z: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
