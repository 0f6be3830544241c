"""MIFARE Classic operations through PC/SC pseudo-APDUs (CLA FF).

The reader firmware translates these into the chip's native commands:
a key is first loaded into the reader's volatile key slot, then used to
authenticate one sector, after which blocks of that sector can be read
or written 16 bytes at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from spooltag.core.smartcard import APDU, PROTOCOL, Response

lg = logging.getLogger(__name__)

PCSC_CLA = 0xFF
AUTH_VERSION = 0x01

_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


class MifareClassic:
    """Command builder for a MIFARE Classic chip behind a PC/SC reader."""

    def __init__(self, transmit: Callable[[APDU], Response]) -> None:
        self._transmit = transmit

    def _send(self, label: str, apdu: APDU) -> Response:
        resp = self._transmit(apdu)
        color = _GREEN if resp.success else _RED
        lg.log(PROTOCOL, "%s %s%04X%s", label, color, resp.sw, _RESET)
        return resp

    # -- commands --

    def send_load_key(self, key: bytes, slot: int = 0x00) -> Response:
        """LOAD KEYS (FF 82) into a volatile reader slot."""
        apdu = APDU(cla=PCSC_CLA, ins=0x82, p1=0x00, p2=slot, data=key)
        return self._send(f"LOAD KEY slot={slot:02X}", apdu)

    def send_authenticate(self, block: int, key_type: int, slot: int = 0x00) -> Response:
        """GENERAL AUTHENTICATE (FF 86) the sector holding *block*."""
        data = bytes([AUTH_VERSION, 0x00, block, key_type, slot])
        apdu = APDU(cla=PCSC_CLA, ins=0x86, p1=0x00, p2=0x00, data=data)
        return self._send(f"AUTHENTICATE block={block:02X} type={key_type:02X}", apdu)

    def send_read_binary(self, block: int, length: int = 16) -> Response:
        """READ BINARY (FF B0) one block."""
        apdu = APDU(cla=PCSC_CLA, ins=0xB0, p1=0x00, p2=block, le=length)
        return self._send(f"READ BINARY block={block:02X} le={length:02X}", apdu)

    def send_update_binary(self, block: int, data: bytes) -> Response:
        """UPDATE BINARY (FF D6) one block."""
        apdu = APDU(cla=PCSC_CLA, ins=0xD6, p1=0x00, p2=block, data=data)
        return self._send(f"UPDATE BINARY block={block:02X} len={len(data):02X}", apdu)
