"""Location domain models.

A Location is addressed by a five-part business key (LocationPK).  The
system-assigned location_id is what other records reference.
"""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class LocationPK(BaseModel):
    """Composite business key of a storage location."""

    model_config = ConfigDict(frozen=True)

    area: str = Field(min_length=1)
    aisle: str = Field(min_length=1)
    x: str = Field(min_length=1)
    y: str = Field(min_length=1)
    z: str = Field(min_length=1)

    @classmethod
    def of(cls, area: str, aisle: str, x: str, y: str, z: str) -> LocationPK:
        return cls(area=area, aisle=aisle, x=x, y=y, z=z)

    def __str__(self) -> str:
        return "/".join((self.area, self.aisle, self.x, self.y, self.z))


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_id: UUID = Field(default_factory=uuid4)
    location_pk: LocationPK
    description: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
