"""Spool chip terminal.

Every handler runs one complete transaction on a fresh connection:

    probe   connect to the first reader, report what was found
    read    connect, UID, load key, authenticate, read block
    write   validate, connect, load key, authenticate, write block

Each step is a hard gate; the first failure raises and nothing after it is
sent to the chip.
"""

from __future__ import annotations

import logging

from spooltag.core.base import Agent, Terminal, handles
from spooltag.core.errors import (
    AuthenticationFailed,
    ChipError,
    ConnectionFailed,
    KeyLoadFailed,
    ReadLengthError,
    WriteFailed,
)
from spooltag.core.smartcard.status import check, presence
from spooltag.core.smartcard.types import SW_LENGTH
from spooltag.core.spool import codec
from spooltag.core.spool.config import ChipConfig
from spooltag.core.spool.messages import (
    ChipData,
    ProbeMessage,
    ProbeResult,
    ReadChipMessage,
    WriteChipMessage,
    WriteChipResult,
)
from spooltag.core.spool.protocol import MifareClassic

lg = logging.getLogger(__name__)


class SpoolTerminal(Terminal):
    """Terminal for spool chips: status probe, block read and block write."""

    def __init__(self, agent: Agent, config: ChipConfig | None = None) -> None:
        super().__init__(agent)
        self._config = config or ChipConfig()
        self._proto = MifareClassic(agent.transmit)

    @property
    def block(self) -> int:
        return self._config.address.absolute

    def _authenticate(self) -> None:
        try:
            resp = self._proto.send_load_key(self._config.key.value)
        except ConnectionFailed as exc:
            raise KeyLoadFailed(exc.detail) from exc
        check(resp, KeyLoadFailed)

        try:
            resp = self._proto.send_authenticate(self.block, self._config.key_type)
        except ConnectionFailed as exc:
            raise AuthenticationFailed(exc.detail) from exc
        check(resp, AuthenticationFailed)

    @handles(ProbeMessage)
    def _probe(self, message: ProbeMessage) -> ProbeResult:
        error: ChipError | None = None
        try:
            self._agent.connect()
        except ChipError as exc:
            lg.debug("probe: %s", exc)
            error = exc
        connected, card_present, tag = presence(error)
        return ProbeResult(
            connected=connected,
            reader_name=self._agent.reader_name,
            card_present=card_present,
            error=tag,
            detail=str(error) if tag is not None else None,
        )

    @handles(ReadChipMessage)
    def _read(self, message: ReadChipMessage) -> ChipData:
        self._agent.connect()
        uid = self._agent.get_uid()
        self._authenticate()

        resp = self._proto.send_read_binary(self.block, codec.BLOCK_SIZE)
        if resp.length < codec.BLOCK_SIZE + SW_LENGTH:
            raise ReadLengthError(f"{resp.length} bytes, SW={resp.sw:04X}")

        material, color, manufacturer = codec.decode(resp.data[: codec.BLOCK_SIZE])
        lg.info(
            "read block %d: material=%d color=%d manufacturer=%d",
            self.block, material, color, manufacturer,
        )
        return ChipData(
            material_code=material,
            color_code=color,
            manufacturer_code=manufacturer,
            uid=uid,
        )

    @handles(WriteChipMessage)
    def _write(self, message: WriteChipMessage) -> WriteChipResult:
        manufacturer = codec.validate(
            message.material_code, message.color_code, message.manufacturer_code,
        )
        data = codec.encode(message.material_code, message.color_code, manufacturer)

        self._agent.connect()
        self._authenticate()

        try:
            resp = self._proto.send_update_binary(self.block, data)
        except ConnectionFailed as exc:
            raise WriteFailed(exc.detail) from exc
        check(resp, WriteFailed)

        lg.info("wrote block %d: %s", self.block, data.hex(" ").upper())
        return WriteChipResult(
            material_code=message.material_code,
            color_code=message.color_code,
            manufacturer_code=manufacturer,
        )
