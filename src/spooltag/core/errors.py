"""Error taxonomy for reader sessions and chip transactions."""

from __future__ import annotations


class ChipError(Exception):
    """Base class for every failure of a probe, read or write."""

    message = "chip operation failed"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(str(self))

    @property
    def tag(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class ServiceUnavailable(ChipError):
    message = "cannot connect to the PC/SC service"


class NoReaderAttached(ChipError):
    message = "no RFID reader attached"


class NoCardPresent(ChipError):
    message = "no card on the reader"


class ConnectionFailed(ChipError):
    message = "card connection error"


class KeyLoadFailed(ChipError):
    message = "loading the authentication key failed"


class AuthenticationFailed(ChipError):
    message = "authentication failed; the chip may use a different key"


class ReadLengthError(ChipError):
    message = "read error: unexpected data length"


class WriteFailed(ChipError):
    message = "write failed"


class ValidationError(ChipError):
    """Rejected input. Raised before any reader I/O."""

    message = "invalid input"

    def __str__(self) -> str:
        return self.detail or self.message
