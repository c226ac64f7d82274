"""Domain enumerations for the warehouse persistence layer.

String-valued enums use the str mixin so they compare equal to plain
strings and load cleanly from environment variables.
"""

from enum import Enum


class BarcodeAlignment(str, Enum):
    """Which side of the padded field the barcode value sits on."""

    LEFT = "left"
    RIGHT = "right"
