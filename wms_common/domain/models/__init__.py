"""Domain model package.

All domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.  Import from this package to avoid coupling application code
to individual module paths.
"""

from .barcode import Barcode, BarcodeFormat, BarcodeSettings
from .enums import BarcodeAlignment
from .locations import Location, LocationPK
from .transport import TransportUnit, TransportUnitType, UnitError

__all__ = [
    # enums
    "BarcodeAlignment",
    # barcode
    "Barcode",
    "BarcodeFormat",
    "BarcodeSettings",
    # locations
    "Location",
    "LocationPK",
    # transport
    "TransportUnit",
    "TransportUnitType",
    "UnitError",
]
