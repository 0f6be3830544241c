"""Chip operations for the command layer.

Each call builds its own stack (ReaderSession -> Agent -> SpoolTerminal),
runs one transaction and tears the connection down again. A process-wide
lock keeps a single transaction in flight against the reader.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from spooltag.core.base import Agent, Message, Result
from spooltag.core.smartcard import ReaderSession
from spooltag.core.spool import (
    ChipConfig,
    ChipData,
    ProbeMessage,
    ProbeResult,
    ReadChipMessage,
    SpoolTerminal,
    WriteChipMessage,
    WriteChipResult,
)

lg = logging.getLogger(__name__)

_reader_lock = threading.Lock()


class ChipService:
    """Per-call probe, read and write against the first attached reader."""

    def __init__(
        self,
        config: ChipConfig | None = None,
        session_factory: Callable[[], ReaderSession] = ReaderSession,
    ) -> None:
        self.config = config or ChipConfig()
        self._session_factory = session_factory

    def _run(self, message: Message) -> Result:
        with _reader_lock:
            terminal = SpoolTerminal(Agent(self._session_factory()), self.config)
            try:
                return terminal.send(message)
            finally:
                terminal.disconnect()

    def probe_status(self) -> ProbeResult:
        return self._run(ProbeMessage())

    def read_chip(self) -> ChipData:
        return self._run(ReadChipMessage())

    def write_chip(
        self,
        material_code: int,
        color_code: int,
        manufacturer_code: int | None = None,
    ) -> WriteChipResult:
        lg.debug(
            "write: material=%s color=%s manufacturer=%s",
            material_code, color_code, manufacturer_code,
        )
        return self._run(WriteChipMessage(material_code, color_code, manufacturer_code))
