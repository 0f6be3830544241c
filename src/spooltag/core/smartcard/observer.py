from __future__ import annotations

import logging

from smartcard.CardConnectionObserver import CardConnectionObserver

from spooltag.core.smartcard.logging import PROTOCOL, TRACE

lg = logging.getLogger(__name__)


LINE_BYTES = 16

# LOAD KEY carries the sector key in its data field.
_SECRET_INS = {0x82}

_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


def mask_command(command: bytes) -> bytes:
    """Return the command with any key material replaced by 0x00 bytes."""
    if len(command) > 5 and command[0] == 0xFF and command[1] in _SECRET_INS:
        return command[:5] + bytes(len(command) - 5)
    return command


class LoggingCardObserver(CardConnectionObserver):
    """Logs reader traffic: session events at PROTOCOL, APDU bytes at TRACE."""

    def _log_hex(self, prefix: str, data: bytes) -> None:
        pad = " " * len(prefix)
        for i in range(0, len(data), LINE_BYTES):
            chunk = data[i : i + LINE_BYTES].hex(" ").upper()
            lg.log(TRACE, "%s%s", prefix if i == 0 else pad, chunk)

    def update(self, observable, event):
        if event.type in ("connect", "reconnect", "disconnect"):
            lg.log(PROTOCOL, event.type)

        elif event.type == "command":
            self._log_hex(">> ", mask_command(bytes(event.args[0])))

        elif event.type == "response":
            data, sw1, sw2 = event.args[0], event.args[1], event.args[2]
            color = _GREEN if (sw1, sw2) == (0x90, 0x00) else _RED
            if data:
                self._log_hex("<< ", bytes(data))
            lg.log(TRACE, "<< %s%02X %02X%s", color, sw1, sw2, _RESET)
