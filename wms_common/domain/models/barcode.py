"""Barcode value object.

A barcode is the human-readable identifier printed on a transport unit.
How the raw value is padded is decided by a BarcodeFormat; when none is
given, the format is read from BARCODE_* environment settings.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import BarcodeAlignment


class BarcodeFormat(BaseModel):
    """Formatting rules applied when a barcode is created.

    With alignment=RIGHT the value is right-justified, i.e. the padder is
    prepended; LEFT appends it.  When padded is False the value is kept as
    given and only the maximum length is checked.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=20, gt=0)
    padder: str = "0"
    alignment: BarcodeAlignment = BarcodeAlignment.RIGHT
    padded: bool = True

    @field_validator("padder")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"padder must be a single character, got {value!r}")
        return value


class BarcodeSettings(BaseSettings):
    """Default barcode format, read from BARCODE_LENGTH, BARCODE_PADDER, etc."""

    model_config = SettingsConfigDict(env_prefix="BARCODE_", env_file=".env", extra="ignore")

    length: int = 20
    padder: str = "0"
    alignment: BarcodeAlignment = BarcodeAlignment.RIGHT
    padded: bool = True

    def to_format(self) -> BarcodeFormat:
        return BarcodeFormat(
            length=self.length,
            padder=self.padder,
            alignment=self.alignment,
            padded=self.padded,
        )


class Barcode(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(min_length=1)

    @classmethod
    def create(cls, raw: str, fmt: BarcodeFormat | None = None) -> Barcode:
        """Build a barcode from a raw value, applying fmt (or the configured format).

        Raises ValueError if the raw value is empty or longer than fmt.length.
        """
        fmt = fmt or BarcodeSettings().to_format()
        if not raw:
            raise ValueError("Barcode value must not be empty")
        if len(raw) > fmt.length:
            raise ValueError(
                f"Barcode {raw!r} exceeds the configured length of {fmt.length}"
            )
        if not fmt.padded:
            return cls(value=raw)
        if fmt.alignment is BarcodeAlignment.RIGHT:
            return cls(value=raw.rjust(fmt.length, fmt.padder))
        return cls(value=raw.ljust(fmt.length, fmt.padder))

    def __str__(self) -> str:
        return self.value
