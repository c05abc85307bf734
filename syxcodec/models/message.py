"""
MIDI System Exclusive message model and framer.

SysEx Format:
    F0 <id> [header] <payload...> F7

Where <id> is one of:
    - 7E: Universal non-real-time, followed by a 3-byte header
    - 7F: Universal real-time, followed by a 3-byte header
    - 7D: Development / non-commercial
    - 00 xx xx: Extended three-byte manufacturer identifier
    - xx: Standard one-byte manufacturer identifier

Universal header:
    DC S1 S2  (device channel, sub-ID #1, sub-ID #2)

parse_message() and encode_message() are exact inverses: for every
buffer that parses, encode_message(parse_message(data)) == data.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from syxcodec.errors import BadFormatError, InvalidDataError, UnknownKindError
from syxcodec.models.manufacturer import (
    DEVELOPMENT_BYTE,
    EXTENDED_FIRST_BYTE,
    DevelopmentIdentifier,
    ExtendedIdentifier,
    Manufacturer,
    StandardIdentifier,
)

logger = logging.getLogger(__name__)

SYSEX_START = 0xF0
SYSEX_END = 0xF7

# Initiator + identifier + at least one more byte + terminator
MINIMUM_LENGTH = 5

UNIVERSAL_HEADER_LENGTH = 3


class UniversalKind(Enum):
    """Universal message kinds, valued by their identifier byte."""

    NON_REAL_TIME = 0x7E
    REAL_TIME = 0x7F

    @property
    def label(self) -> str:
        return "Non-Real-time" if self is UniversalKind.NON_REAL_TIME else "Real-time"


@dataclass(frozen=True)
class UniversalHeader:
    """Header of a Universal System Exclusive message."""

    device_channel: int
    sub_id1: int
    sub_id2: int

    def to_bytes(self) -> bytes:
        return bytes([self.device_channel, self.sub_id1, self.sub_id2])


def _own_payload(message, payload) -> None:
    # Frozen dataclass: store a private bytes copy of the payload
    object.__setattr__(message, "payload", bytes(payload))


@dataclass(frozen=True)
class UniversalMessage:
    """
    Universal System Exclusive message.

    Attributes:
        kind: Real-time or non-real-time
        header: Device channel and sub-IDs
        payload: Bytes between the header and the terminator
    """

    kind: UniversalKind
    header: UniversalHeader
    payload: bytes = b""

    def __post_init__(self):
        _own_payload(self, self.payload)

    def to_bytes(self) -> bytes:
        """Return the complete message, delimiters included."""
        return b"".join(
            [
                bytes([SYSEX_START, self.kind.value]),
                self.header.to_bytes(),
                self.payload,
                bytes([SYSEX_END]),
            ]
        )

    @property
    def data_length(self) -> int:
        return len(self.to_bytes())

    def __str__(self) -> str:
        lines = [
            f"Universal {self.kind.label} System Exclusive message",
            f"Device Ch: {self.header.device_channel}",
            f"Sub-ID #1: {self.header.sub_id1:02X}",
            f"Sub-ID #2: {self.header.sub_id2:02X}",
            f"Payload  : {len(self.payload)} bytes",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class ManufacturerSpecificMessage:
    """
    Manufacturer-specific System Exclusive message.

    Attributes:
        manufacturer: Manufacturer named by the identifier bytes
        payload: Bytes between the identifier and the terminator
    """

    manufacturer: Manufacturer
    payload: bytes = b""

    def __post_init__(self):
        _own_payload(self, self.payload)

    def to_bytes(self) -> bytes:
        """Return the complete message, delimiters included."""
        return b"".join(
            [
                bytes([SYSEX_START]),
                self.manufacturer.to_bytes(),
                self.payload,
                bytes([SYSEX_END]),
            ]
        )

    @property
    def data_length(self) -> int:
        return len(self.to_bytes())

    def __str__(self) -> str:
        lines = [
            "Manufacturer-specific System Exclusive message",
            f"Manufacturer: {self.manufacturer}",
            f"Payload     : {len(self.payload)} bytes",
        ]
        return "\n".join(lines)


Message = Union[UniversalMessage, ManufacturerSpecificMessage]


def parse_message(data: Union[bytes, bytearray, List[int]]) -> Message:
    """
    Parse one complete SysEx message.

    Args:
        data: Message bytes, F0 and F7 included

    Returns:
        UniversalMessage or ManufacturerSpecificMessage

    Raises:
        InvalidDataError: If the data is too short
        BadFormatError: If the initiator or terminator is wrong
    """
    data = bytes(data)

    if len(data) < MINIMUM_LENGTH:
        logger.debug("Not enough bytes for a SysEx message: %d", len(data))
        raise InvalidDataError(0)

    if data[0] != SYSEX_START:
        logger.debug("First byte is %02XH, not SysEx initiator", data[0])
        raise BadFormatError()

    if data[-1] != SYSEX_END:
        logger.debug("Last byte is %02XH, not SysEx terminator", data[-1])
        raise BadFormatError()

    lead = data[1]

    if lead in (UniversalKind.NON_REAL_TIME.value, UniversalKind.REAL_TIME.value):
        payload_start = 2 + UNIVERSAL_HEADER_LENGTH
        if len(data) <= payload_start:
            logger.debug("Universal header runs into the terminator")
            raise InvalidDataError(len(data) - 1)
        header = UniversalHeader(data[2], data[3], data[4])
        return UniversalMessage(UniversalKind(lead), header, data[payload_start:-1])

    if lead == DEVELOPMENT_BYTE:
        identifier = DevelopmentIdentifier()
        payload_start = 2
    elif lead == EXTENDED_FIRST_BYTE:
        identifier = ExtendedIdentifier(data[1], data[2], data[3])
        payload_start = 4
    else:
        identifier = StandardIdentifier(lead)
        payload_start = 2

    return ManufacturerSpecificMessage(Manufacturer(identifier), data[payload_start:-1])


def encode_message(message: Message) -> bytes:
    """
    Encode a message back to SysEx bytes.

    Raises:
        UnknownKindError: If `message` is not a SysEx message type
    """
    if not isinstance(message, (UniversalMessage, ManufacturerSpecificMessage)):
        raise UnknownKindError()
    return message.to_bytes()
