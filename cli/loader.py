"""
Load and save SysEx messages as .syx files.
"""

from pathlib import Path
from typing import Iterable, List, Tuple

import mido

from syxcodec.errors import ParseError
from syxcodec.models.message import SYSEX_START, Message
from syxcodec.parser import SysExParser


def read_syx_bytes(filepath: Path) -> bytes:
    """
    Read the raw bytes of a .syx file.

    Binary files start with F0. Anything else is read as hex text
    ("F0 43 10 ... F7", any whitespace or line breaks).

    Raises:
        ValueError: If a text file is not valid hex
    """
    with open(filepath, "rb") as f:
        data = f.read()

    if data and data[0] != SYSEX_START:
        data = bytes.fromhex(data.decode("latin1"))

    return data


def load_messages(filepath: Path) -> Tuple[List[Message], List[Tuple[int, ParseError]]]:
    """
    Read a .syx file and parse every message in it.

    Args:
        filepath: Path to .syx file

    Returns:
        (messages, errors) where errors pairs the byte offset of each
        rejected frame with its parse failure
    """
    parser = SysExParser()
    messages = parser.parse_bytes(read_syx_bytes(filepath))
    return messages, parser.errors


def save_messages(filepath: Path, messages: Iterable[Message], plain: bool = False) -> None:
    """
    Write messages to a .syx file.

    Args:
        filepath: Output path
        messages: Messages to write
        plain: Write hex text instead of binary

    Raises:
        ValueError: If a message holds bytes with bit 7 set between its
            delimiters, which a MIDI stream cannot carry
    """
    midi_messages = [mido.Message("sysex", data=m.to_bytes()[1:-1]) for m in messages]
    mido.write_syx_file(str(filepath), midi_messages, plaintext=plain)
