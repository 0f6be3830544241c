from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from smartcard.Exceptions import CardConnectionException
from smartcard.pcsc.PCSCReader import PCSCReader
from smartcard.scard import (
    SCARD_E_NO_READERS_AVAILABLE,
    SCARD_S_SUCCESS,
    SCARD_SCOPE_USER,
    SCARD_SHARE_SHARED,
    SCardEstablishContext,
    SCardListReaders,
    SCardReleaseContext,
)

from spooltag.core.errors import ConnectionFailed
from spooltag.core.smartcard.observer import LoggingCardObserver
from spooltag.core.smartcard.status import from_connect, from_pcsc, status_ok
from spooltag.core.smartcard.types import APDU, Response

if TYPE_CHECKING:
    from smartcard.CardConnection import CardConnection

lg = logging.getLogger(__name__)

GET_UID = [0xFF, 0xCA, 0x00, 0x00, 0x00]


class ReaderSession:
    """One PC/SC context and at most one shared-mode card connection."""

    def __init__(self) -> None:
        self._context: int | None = None
        self._connection: CardConnection | None = None
        self._observer = LoggingCardObserver()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    def open(self) -> None:
        """Establish the PC/SC context."""
        hresult, context = SCardEstablishContext(SCARD_SCOPE_USER)
        if hresult != SCARD_S_SUCCESS:
            raise from_pcsc(hresult)
        self._context = context

    def list_readers(self) -> Iterator[str]:
        """Enumerate reader names. The iterator is single-use."""
        if self._context is None:
            raise RuntimeError("reader service not open")
        hresult, names = SCardListReaders(self._context, [])
        if hresult == SCARD_E_NO_READERS_AVAILABLE:
            return iter(())
        if hresult != SCARD_S_SUCCESS:
            raise from_pcsc(hresult)
        return iter(names)

    def connect(self, reader: str) -> None:
        """Connect to the card on *reader* in shared mode, any protocol."""
        connection = PCSCReader(reader).createConnection()
        connection.addObserver(self._observer)
        try:
            connection.connect(mode=SCARD_SHARE_SHARED)
        except CardConnectionException as exc:
            connection.deleteObserver(self._observer)
            raise from_connect(exc) from exc
        self._connection = connection

    def close(self) -> None:
        """Drop the card connection and release the context."""
        try:
            if self._connection is not None:
                connection, self._connection = self._connection, None
                try:
                    connection.disconnect()
                except CardConnectionException as exc:
                    lg.warning("disconnecting card: %s", exc)
                finally:
                    connection.deleteObserver(self._observer)
        finally:
            if self._context is not None:
                hresult = SCardReleaseContext(self._context)
                self._context = None
                if hresult != SCARD_S_SUCCESS:
                    lg.warning("releasing PC/SC context: %08X", hresult & 0xFFFFFFFF)

    def get_uid(self) -> str | None:
        """UID of the contactless card as hex text, or None when unavailable."""
        if self._connection is None:
            raise RuntimeError("not connected to a card")
        try:
            data, sw1, sw2 = self._connection.transmit(GET_UID)
        except CardConnectionException as exc:
            lg.debug("UID not available: %s", exc)
            return None
        if not data or not status_ok(bytes(data) + bytes([sw1, sw2])):
            return None
        return bytes(data).hex()

    def transmit(self, apdu: APDU) -> Response:
        if self._connection is None:
            raise RuntimeError("not connected to a card")
        try:
            data, sw1, sw2 = self._connection.transmit(list(apdu.to_bytes()))
        except CardConnectionException as exc:
            raise ConnectionFailed(str(exc) or type(exc).__name__) from exc
        return Response(data=bytes(data), sw1=sw1, sw2=sw2)
