from spooltag.core.spool.config import AuthKey, ChipConfig, SectorAddress
from spooltag.core.spool.messages import (
    ChipData,
    ProbeMessage,
    ProbeResult,
    ReadChipMessage,
    WriteChipMessage,
    WriteChipResult,
)
from spooltag.core.spool.protocol import MifareClassic
from spooltag.core.spool.terminal import SpoolTerminal

__all__ = [
    "AuthKey",
    "ChipConfig",
    "ChipData",
    "MifareClassic",
    "ProbeMessage",
    "ProbeResult",
    "ReadChipMessage",
    "SectorAddress",
    "SpoolTerminal",
    "WriteChipMessage",
    "WriteChipResult",
]
