"""
syxcodec - Codec for MIDI System Exclusive messages.

This library provides tools to:
- Parse SysEx bytes into universal or manufacturer-specific messages
- Encode messages back to the exact same bytes
- Resolve manufacturer identifiers to names and groups
- Pack/unpack and nybblify/denybblify bulk dump payloads

Example usage:
    from syxcodec import parse_message
    from syxcodec.utils import unpack

    message = parse_message(data)
    print(message.manufacturer.display_name)

    raw = unpack(message.payload)
"""

__version__ = "0.1.0"
__author__ = "syxcodec Contributors"

from syxcodec.errors import (
    BadFormatError,
    InvalidDataError,
    InvalidManufacturerError,
    ParseError,
    UnknownKindError,
)
from syxcodec.models.manufacturer import Group, Manufacturer, parse_identifier
from syxcodec.models.message import (
    ManufacturerSpecificMessage,
    Message,
    UniversalHeader,
    UniversalKind,
    UniversalMessage,
    encode_message,
    parse_message,
)
from syxcodec.parser import SysExParser, parse_messages

__all__ = [
    "BadFormatError",
    "InvalidDataError",
    "InvalidManufacturerError",
    "ParseError",
    "UnknownKindError",
    "Group",
    "Manufacturer",
    "parse_identifier",
    "ManufacturerSpecificMessage",
    "Message",
    "UniversalHeader",
    "UniversalKind",
    "UniversalMessage",
    "encode_message",
    "parse_message",
    "SysExParser",
    "parse_messages",
]
