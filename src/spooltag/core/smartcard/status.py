"""Status interpretation.

Turns status words, PC/SC result codes and pyscard connection errors into
the ChipError taxonomy, and a probe outcome into presence facts.
"""

from __future__ import annotations

from smartcard.Exceptions import CardConnectionException, NoCardException
from smartcard.scard import SCardGetErrorMessage

from spooltag.core.errors import (
    ChipError,
    ConnectionFailed,
    NoCardPresent,
    NoReaderAttached,
    ServiceUnavailable,
)
from spooltag.core.smartcard.types import SW_LENGTH, Response

SW_SUCCESS = b"\x90\x00"


def status_ok(raw: bytes) -> bool:
    """Whether a raw response ends in 90 00, whatever payload precedes it."""
    return len(raw) >= SW_LENGTH and bytes(raw[-SW_LENGTH:]) == SW_SUCCESS


def check(response: Response, error: type[ChipError]) -> Response:
    """Return the response if its status word is 90 00, else raise *error*."""
    if not status_ok(response.to_bytes()):
        raise error(f"SW={response.sw:04X}")
    return response


def from_pcsc(hresult: int) -> ServiceUnavailable:
    return ServiceUnavailable(f"{SCardGetErrorMessage(hresult).strip()} ({hresult & 0xFFFFFFFF:08X})")


def from_connect(exc: CardConnectionException) -> ChipError:
    """Classify a pyscard connect failure."""
    if isinstance(exc, NoCardException):
        return NoCardPresent(str(exc) or None)
    return ConnectionFailed(str(exc) or type(exc).__name__)


def presence(error: ChipError | None) -> tuple[bool, bool, str | None]:
    """Map a probe outcome to (connected, card_present, error tag).

    A reader is "connected" once enumeration found one; a missing card is
    a normal state and carries no error.
    """
    if error is None:
        return True, True, None
    if isinstance(error, (ServiceUnavailable, NoReaderAttached)):
        return False, False, error.tag
    if isinstance(error, NoCardPresent):
        return True, False, None
    return True, False, error.tag
