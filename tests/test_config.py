import pytest

from spooltag.core.errors import AuthenticationFailed, ValidationError
from spooltag.core.spool import AuthKey, ChipConfig, SectorAddress
from spooltag.core.spool.config import DEFAULT_KEY, KEY_TYPE_A, KEY_TYPE_B


def test_defaults():
    config = ChipConfig()
    assert config.key.value == DEFAULT_KEY == b"\xff" * 6
    assert config.address.sector == 1
    assert config.address.block == 0
    assert config.address.absolute == 4
    assert config.key_type == KEY_TYPE_A


@pytest.mark.parametrize("sector, block, absolute", [(0, 1, 1), (1, 2, 6), (15, 0, 60)])
def test_absolute_block(sector, block, absolute):
    assert SectorAddress(sector, block).absolute == absolute


@pytest.mark.parametrize("sector, block", [(-1, 0), (16, 0), (1, 3), (1, -1)])
def test_invalid_address(sector, block):
    with pytest.raises(ValueError):
        SectorAddress(sector, block)


def test_key_from_hex():
    assert AuthKey.from_hex("a0:a1:a2:a3:a4:a5").value == bytes.fromhex("A0A1A2A3A4A5")
    with pytest.raises(ValueError):
        AuthKey.from_hex("FFFF")


def test_key_repr_hides_value():
    assert "A0" not in repr(AuthKey(bytes.fromhex("A0A1A2A3A4A5")))


def test_key_type():
    assert ChipConfig(key_type=KEY_TYPE_B).key_type == 0x61
    with pytest.raises(ValueError):
        ChipConfig(key_type=0x62)


def test_error_text():
    assert AuthenticationFailed().tag == "AuthenticationFailed"
    assert str(AuthenticationFailed()) == "authentication failed; the chip may use a different key"
    assert str(AuthenticationFailed("SW=6300")).endswith(": SW=6300")
    assert str(ValidationError("invalid color code")) == "invalid color code"
