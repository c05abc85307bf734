"""Test configuration and fixtures."""

import pytest
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_syx_file(fixtures_dir):
    """
    Return path to a binary .syx file with five messages:

    0. Kawai K4 one patch data request
    1. Alesis V25 config command (extended identifier)
    2. KORG minilogue xd identity reply (universal non-real-time)
    3. Development message
    4. KORG program dump with a packed payload
    """
    return fixtures_dir / "sample.syx"


@pytest.fixture
def sample_hex_file(fixtures_dir):
    """Return path to a hex text .syx file with two messages."""
    return fixtures_dir / "sample_hex.syx"


@pytest.fixture
def sample_syx_data(sample_syx_file):
    """Return raw bytes of the binary sample file."""
    with open(sample_syx_file, "rb") as f:
        return f.read()


@pytest.fixture
def kawai_message_bytes():
    """Kawai K4 one patch data request."""
    return bytes(
        [
            0xF0,  # SysEx start
            0x40,  # Kawai
            0x00,  # channel 1
            0x00,  # one patch data request
            0x00,  # synthesizer group
            0x04,  # K4/K4r ID
            0x00,  # internal
            0x00,  # patch A-1
            0xF7,  # SysEx end
        ]
    )


@pytest.fixture
def alesis_message_bytes():
    """Alesis V25 config command (not a complete message)."""
    return bytes(
        [
            0xF0,
            0x00, 0x00, 0x0E,  # Alesis
            0x00, 0x41, 0x61, 0x00, 0x5D,  # V25 config command
            0x00,
            0xF7,
        ]
    )


@pytest.fixture
def identity_reply_bytes():
    """KORG minilogue xd identity reply (universal non-real-time)."""
    return bytes(
        [0xF0, 0x7E, 0x00, 0x06, 0x02, 0x42, 0x51, 0x01, 0x00, 0x00, 0x01, 0x01, 0x01, 0x01, 0xF7]
    )
