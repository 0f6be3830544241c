from spooltag.core.smartcard.card import ReaderSession
from spooltag.core.smartcard.logging import PROTOCOL, TRACE
from spooltag.core.smartcard.types import APDU, Response

__all__ = ["APDU", "PROTOCOL", "ReaderSession", "Response", "TRACE"]
