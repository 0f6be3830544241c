"""Spool chip messages and results."""

from __future__ import annotations

from dataclasses import dataclass

from spooltag.core.base import Message, Result


@dataclass
class ProbeMessage(Message):
    """Check for a reader and a card without authenticating."""


@dataclass
class ProbeResult(Result):
    connected: bool
    reader_name: str | None
    card_present: bool
    error: str | None = None
    detail: str | None = None


@dataclass
class ReadChipMessage(Message):
    """Read the spool data block."""


@dataclass
class ChipData(Result):
    material_code: int
    color_code: int
    manufacturer_code: int
    uid: str | None = None


@dataclass
class WriteChipMessage(Message):
    """Write the spool data block. Manufacturer defaults to 1."""

    material_code: int
    color_code: int
    manufacturer_code: int | None = None


@dataclass
class WriteChipResult(Result):
    material_code: int
    color_code: int
    manufacturer_code: int

    @property
    def confirmation(self) -> str:
        return (
            f"material={self.material_code} color={self.color_code} "
            f"manufacturer={self.manufacturer_code}"
        )
