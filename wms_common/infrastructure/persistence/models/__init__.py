"""ORM model registry: imports every layer module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.

Import order follows the dependency graph (referenced tables first).
"""

from wms_common.infrastructure.persistence.models.reference import (
    Location,
    TransportUnitType,
)
from wms_common.infrastructure.persistence.models.transport import (
    TransportUnit,
    UnitError,
)

__all__ = [
    # Reference
    "Location",
    "TransportUnitType",
    # Transport
    "TransportUnit",
    "UnitError",
]
