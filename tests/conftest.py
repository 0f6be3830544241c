import pytest

from spooltag.app.service import ChipService
from spooltag.core.errors import NoCardPresent
from spooltag.core.smartcard.card import GET_UID
from spooltag.core.smartcard.status import status_ok
from spooltag.core.smartcard.types import APDU, Response
from spooltag.core.spool.config import DEFAULT_KEY

OK = b"\x90\x00"
READER = "ACS ACR122U PICC Interface 00 00"


class SimulatedChip:
    """MIFARE Classic 1K as seen through a PC/SC reader's pseudo-APDUs."""

    def __init__(self, block4=bytes(16), key=DEFAULT_KEY, uid=bytes.fromhex("04A1B2C3"), writable=True):
        self.blocks = {4: bytes(block4)}
        self.key = key
        self.uid = uid
        self.writable = writable
        self.loaded_key = None
        self.sector = None
        # INS -> raw response, replaces the normal behaviour of that command
        self.overrides: dict[int, bytes] = {}

    def respond(self, command: bytes) -> bytes:
        ins = command[1]
        if ins in self.overrides:
            return self.overrides[ins]
        if ins == 0xCA:
            return self.uid + OK if self.uid else b"\x6A\x81"
        if ins == 0x82:
            self.loaded_key = bytes(command[5:11])
            return OK
        if ins == 0x86:
            if self.loaded_key != self.key:
                return b"\x63\x00"
            self.sector = command[7] // 4
            return OK
        if ins == 0xB0:
            if self.sector != command[3] // 4:
                return b"\x69\x82"
            return self.blocks.get(command[3], bytes(16)) + OK
        if ins == 0xD6:
            if self.sector != command[3] // 4:
                return b"\x69\x82"
            if not self.writable:
                return b"\x63\x00"
            self.blocks[command[3]] = bytes(command[5:21])
            return OK
        return b"\x6D\x00"


class FakeSession:
    """Stands in for ReaderSession; records every step and command."""

    def __init__(self, chip=None, readers=(READER,), service_error=None, connect_error=None):
        self.chip = chip
        self.readers = list(readers)
        self.service_error = service_error
        self.connect_error = connect_error
        self.transmit_error = None
        self.events = []
        self.commands = []

    def open(self):
        self.events.append("open")
        if self.service_error is not None:
            raise self.service_error

    def list_readers(self):
        self.events.append("list")
        return iter(self.readers)

    def connect(self, reader):
        self.events.append(("connect", reader))
        if self.connect_error is not None:
            raise self.connect_error
        if self.chip is None:
            raise NoCardPresent()

    def close(self):
        self.events.append("close")

    def get_uid(self):
        raw = self.chip.respond(bytes(GET_UID))
        self.commands.append(bytes(GET_UID))
        if len(raw) <= 2 or not status_ok(raw):
            return None
        return raw[:-2].hex()

    def transmit(self, apdu: APDU) -> Response:
        raw = apdu.to_bytes()
        self.commands.append(raw)
        if self.transmit_error is not None and raw[1] in self.transmit_error[0]:
            raise self.transmit_error[1]
        return Response.from_bytes(self.chip.respond(raw))

    def sent(self, ins):
        return [c for c in self.commands if c[1] == ins]


@pytest.fixture
def chip():
    return SimulatedChip(block4=bytes([7, 3, 1]) + bytes(13))


@pytest.fixture
def session(chip):
    return FakeSession(chip)


@pytest.fixture
def service(session):
    return ChipService(session_factory=lambda: session)
