import threading

import pytest

from conftest import FakeSession, SimulatedChip
from spooltag.app import service as service_module
from spooltag.app.service import ChipService
from spooltag.core.errors import AuthenticationFailed, NoReaderAttached, ValidationError


def test_each_call_uses_a_fresh_session():
    sessions = []

    def factory():
        session = FakeSession(SimulatedChip(block4=bytes([7, 3, 1]) + bytes(13)))
        sessions.append(session)
        return session

    svc = ChipService(session_factory=factory)
    svc.probe_status()
    svc.read_chip()
    svc.write_chip(8, 2)
    assert len(sessions) == 3
    assert all(s.events[-1] == "close" for s in sessions)


def test_read_chip(service):
    data = service.read_chip()
    assert (data.material_code, data.color_code, data.manufacturer_code, data.uid) == (7, 3, 1, "04a1b2c3")


def test_write_chip_confirmation(service, chip):
    result = service.write_chip(7, 3, 1)
    assert result.confirmation == "material=7 color=3 manufacturer=1"
    assert chip.blocks[4][:3] == bytes([7, 3, 1])


def test_session_closed_after_failure(chip, session, service):
    chip.overrides[0x86] = b"\x63\x00"
    with pytest.raises(AuthenticationFailed):
        service.read_chip()
    assert session.events[-1] == "close"


def test_validation_error_makes_no_connection_attempt(session, service):
    with pytest.raises(ValidationError):
        service.write_chip(51, 3)
    assert "open" not in session.events
    assert not any(isinstance(e, tuple) for e in session.events)


def test_no_reader_scenario():
    session = FakeSession(SimulatedChip(), readers=())
    svc = ChipService(session_factory=lambda: session)

    status = svc.probe_status()
    assert (status.connected, status.card_present, status.error) == (False, False, "NoReaderAttached")
    with pytest.raises(NoReaderAttached):
        svc.read_chip()
    with pytest.raises(NoReaderAttached):
        svc.write_chip(7, 3, 1)
    assert not any(isinstance(e, tuple) and e[0] == "connect" for e in session.events)


def test_transactions_are_serialized(monkeypatch):
    lock = threading.Lock()
    monkeypatch.setattr(service_module, "_reader_lock", lock)
    held = []

    def factory():
        held.append(lock.locked())
        return FakeSession(SimulatedChip())

    ChipService(session_factory=factory).probe_status()
    assert held == [True]
    assert not lock.locked()
