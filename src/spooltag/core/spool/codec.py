"""Spool data block layout.

    offset 0   material code
    offset 1   color code
    offset 2   manufacturer code
    offset 3+  reserved, zero on write
"""

from __future__ import annotations

from spooltag.core.errors import ValidationError

BLOCK_SIZE = 16

MATERIAL_CODES = range(1, 51)
COLOR_CODES = range(1, 25)
DEFAULT_MANUFACTURER = 1


def encode(material_code: int, color_code: int, manufacturer_code: int) -> bytes:
    """Build the 16-byte data block."""
    return bytes([material_code, color_code, manufacturer_code]) + bytes(BLOCK_SIZE - 3)


def decode(block: bytes) -> tuple[int, int, int]:
    """Return (material_code, color_code, manufacturer_code) from a data block."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"data block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block[0], block[1], block[2]


def validate(
    material_code: int, color_code: int, manufacturer_code: int | None = None,
) -> int:
    """Check write inputs; return the manufacturer code to write."""
    if material_code not in MATERIAL_CODES:
        raise ValidationError("invalid material code")
    if color_code not in COLOR_CODES:
        raise ValidationError("invalid color code")
    if manufacturer_code is None:
        return DEFAULT_MANUFACTURER
    if not 0 <= manufacturer_code <= 0xFF:
        raise ValidationError("invalid manufacturer code")
    return manufacturer_code
