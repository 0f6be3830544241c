from __future__ import annotations

import logging

from spooltag.core.errors import NoReaderAttached
from spooltag.core.smartcard import APDU, ReaderSession, Response

lg = logging.getLogger(__name__)


class Agent:
    """Agent that owns the reader session of a single transaction.

    Protocol classes receive agent.transmit as a callable. The agent only
    ever talks to the first enumerated reader.
    """

    def __init__(self, session: ReaderSession) -> None:
        self._session = session
        self.reader_name: str | None = None

    def connect(self) -> str:
        """Open the reader service and connect to the first reader's card."""
        self._session.open()
        reader = next(self._session.list_readers(), None)
        if reader is None:
            raise NoReaderAttached()
        self.reader_name = reader
        self._session.connect(reader)
        lg.info("connected to %s", reader)
        return reader

    def disconnect(self) -> None:
        self._session.close()

    def get_uid(self) -> str | None:
        """Return the UID of the card as hex text, or None if not available."""
        return self._session.get_uid()

    def transmit(self, apdu: APDU) -> Response:
        return self._session.transmit(apdu)
