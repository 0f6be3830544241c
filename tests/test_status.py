import pytest
from smartcard.Exceptions import CardConnectionException, NoCardException
from smartcard.scard import SCARD_E_NO_SERVICE

from spooltag.core.errors import (
    AuthenticationFailed,
    ConnectionFailed,
    NoCardPresent,
    NoReaderAttached,
    ServiceUnavailable,
    WriteFailed,
)
from spooltag.core.smartcard.status import check, from_connect, from_pcsc, presence, status_ok
from spooltag.core.smartcard.types import Response


@pytest.mark.parametrize(
    "raw, ok",
    [
        (b"\x90\x00", True),
        (bytes(16) + b"\x90\x00", True),
        (b"\x90\x00\x90\x00\x63\x00", False),
        (b"\x63\x00", False),
        (b"\x90\x01", False),
        (b"\x91\x00", False),
        (b"\x00", False),
        (b"", False),
    ],
)
def test_status_ok(raw, ok):
    assert status_ok(raw) is ok


def test_check_passes_success_through():
    resp = Response(data=b"\x01", sw1=0x90, sw2=0x00)
    assert check(resp, WriteFailed) is resp


def test_check_raises_given_error():
    with pytest.raises(AuthenticationFailed) as err:
        check(Response(data=b"", sw1=0x63, sw2=0x00), AuthenticationFailed)
    assert err.value.detail == "SW=6300"
    assert str(err.value).startswith("authentication failed; the chip may use a different key")


def test_from_pcsc():
    error = from_pcsc(SCARD_E_NO_SERVICE)
    assert isinstance(error, ServiceUnavailable)
    assert "8010001D" in str(error)


def test_from_connect_classification():
    assert isinstance(from_connect(NoCardException("Unable to connect")), NoCardPresent)
    error = from_connect(CardConnectionException("reader unavailable"))
    assert isinstance(error, ConnectionFailed)
    assert error.detail == "reader unavailable"


@pytest.mark.parametrize(
    "error, expected",
    [
        (None, (True, True, None)),
        (ServiceUnavailable("down"), (False, False, "ServiceUnavailable")),
        (NoReaderAttached(), (False, False, "NoReaderAttached")),
        (NoCardPresent(), (True, False, None)),
        (ConnectionFailed("protocol mismatch"), (True, False, "ConnectionFailed")),
    ],
)
def test_presence(error, expected):
    assert presence(error) == expected
