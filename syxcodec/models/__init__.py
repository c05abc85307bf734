"""Data models for SysEx messages and manufacturers."""

from syxcodec.models.manufacturer import (
    DevelopmentIdentifier,
    ExtendedIdentifier,
    Group,
    Identifier,
    IdentifierKind,
    Manufacturer,
    StandardIdentifier,
    parse_identifier,
)
from syxcodec.models.message import (
    ManufacturerSpecificMessage,
    Message,
    UniversalHeader,
    UniversalKind,
    UniversalMessage,
    encode_message,
    parse_message,
)

__all__ = [
    "DevelopmentIdentifier",
    "ExtendedIdentifier",
    "Group",
    "Identifier",
    "IdentifierKind",
    "Manufacturer",
    "StandardIdentifier",
    "parse_identifier",
    "ManufacturerSpecificMessage",
    "Message",
    "UniversalHeader",
    "UniversalKind",
    "UniversalMessage",
    "encode_message",
    "parse_message",
]
