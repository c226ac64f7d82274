"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in wms_common/infrastructure/persistence/ and
are bound to a session by the unit of work.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .base import Repository
from .locations import LocationRepository
from .transport_unit_types import TransportUnitTypeRepository
from .transport_units import TransportUnitRepository

__all__ = [
    "Repository",
    "LocationRepository",
    "TransportUnitTypeRepository",
    "TransportUnitRepository",
]
