"""Chip configuration: sector key, key type and data block address."""

from __future__ import annotations

from dataclasses import dataclass, field

KEY_LENGTH = 6
DEFAULT_KEY = bytes.fromhex("FFFFFFFFFFFF")

KEY_TYPE_A = 0x60
KEY_TYPE_B = 0x61

SECTORS = 16
BLOCKS_PER_SECTOR = 4
# The last block of every sector is the trailer (keys and access bits).
TRAILER_BLOCK = BLOCKS_PER_SECTOR - 1


@dataclass(frozen=True)
class AuthKey:
    """Six-byte MIFARE Classic sector key."""

    value: bytes = DEFAULT_KEY

    def __post_init__(self) -> None:
        if len(self.value) != KEY_LENGTH:
            raise ValueError(f"key must be {KEY_LENGTH} bytes, got {len(self.value)}")

    @classmethod
    def from_hex(cls, text: str) -> AuthKey:
        return cls(bytes.fromhex(text.replace(":", "").replace(" ", "")))

    def __repr__(self) -> str:
        return "AuthKey(default)" if self.value == DEFAULT_KEY else "AuthKey(***)"


@dataclass(frozen=True)
class SectorAddress:
    sector: int = 1
    block: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.sector < SECTORS:
            raise ValueError(f"sector must be 0..{SECTORS - 1}, got {self.sector}")
        if not 0 <= self.block < TRAILER_BLOCK:
            raise ValueError(f"block must be 0..{TRAILER_BLOCK - 1}, got {self.block}")

    @property
    def absolute(self) -> int:
        return self.sector * BLOCKS_PER_SECTOR + self.block


@dataclass(frozen=True)
class ChipConfig:
    key: AuthKey = field(default_factory=AuthKey)
    address: SectorAddress = field(default_factory=SectorAddress)
    key_type: int = KEY_TYPE_A

    def __post_init__(self) -> None:
        if self.key_type not in (KEY_TYPE_A, KEY_TYPE_B):
            raise ValueError(f"key type must be 60 (A) or 61 (B), got {self.key_type:02X}")
