"""
MIDI manufacturer identifiers.

A manufacturer-specific SysEx message names its manufacturer right
after the F0 initiator, in one of three forms:

    43          Standard: one byte (Yamaha)
    00 00 0E    Extended: 0x00 followed by two bytes (Alesis)
    7D          Development / non-commercial use

Names and groups are looked up in the static table in
syxcodec.data.manufacturers. Identifiers missing from the table resolve
to "(unknown)" rather than raising.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Union

from syxcodec.data.manufacturers import MANUFACTURERS
from syxcodec.errors import InvalidDataError, InvalidManufacturerError

EXTENDED_FIRST_BYTE = 0x00
DEVELOPMENT_BYTE = 0x7D

# Highest lead byte of an assigned one-byte identifier (Japanese group ends at 5F)
LAST_STANDARD_BYTE = 0x5F

UNKNOWN_NAME = "(unknown)"


class IdentifierKind(Enum):
    """Wire form of a manufacturer identifier."""

    STANDARD = "standard"
    EXTENDED = "extended"
    DEVELOPMENT = "development"


class Group(Enum):
    """Geographic group a manufacturer identifier was assigned from."""

    AMERICAN = "american"
    EUROPEAN = "european"
    JAPANESE = "japanese"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class StandardIdentifier:
    """One-byte manufacturer identifier."""

    value: int

    kind: ClassVar[IdentifierKind] = IdentifierKind.STANDARD

    @property
    def key(self) -> str:
        return f"{self.value:02X}"

    def to_bytes(self) -> bytes:
        return bytes([self.value])


@dataclass(frozen=True)
class ExtendedIdentifier:
    """
    Three-byte manufacturer identifier.

    The first byte is always 0x00 and only marks the extended form.
    """

    first: int
    second: int
    third: int

    kind: ClassVar[IdentifierKind] = IdentifierKind.EXTENDED

    def __post_init__(self):
        if self.first != EXTENDED_FIRST_BYTE:
            raise ValueError(
                f"Extended identifier must start with 0x00, got 0x{self.first:02X}"
            )

    @property
    def key(self) -> str:
        return f"{self.first:02X}{self.second:02X}{self.third:02X}"

    def to_bytes(self) -> bytes:
        return bytes([self.first, self.second, self.third])


@dataclass(frozen=True)
class DevelopmentIdentifier:
    """
    Identifier reserved for development and non-commercial use.

    Never equal to StandardIdentifier(0x7D), although both are sent as
    the same byte.
    """

    kind: ClassVar[IdentifierKind] = IdentifierKind.DEVELOPMENT

    @property
    def key(self) -> str:
        return f"{DEVELOPMENT_BYTE:02X}"

    def to_bytes(self) -> bytes:
        return bytes([DEVELOPMENT_BYTE])


Identifier = Union[StandardIdentifier, ExtendedIdentifier, DevelopmentIdentifier]


def parse_identifier(data: Union[bytes, bytearray, List[int]]) -> Identifier:
    """
    Parse a manufacturer identifier from the start of `data`.

    Args:
        data: Bytes starting with the identifier lead byte

    Returns:
        The parsed identifier

    Raises:
        InvalidDataError: If data is empty, or an extended identifier is
            cut short
        InvalidManufacturerError: If the lead byte is not a manufacturer
            identifier (0x60-0x7C are unassigned, 0x7E/0x7F are universal
            message markers, 0x80 and up are not data bytes)
    """
    data = bytes(data)
    if not data:
        raise InvalidDataError(0)

    lead = data[0]

    if lead == EXTENDED_FIRST_BYTE:
        if len(data) < 3:
            raise InvalidDataError(len(data))
        return ExtendedIdentifier(data[0], data[1], data[2])

    if lead == DEVELOPMENT_BYTE:
        return DevelopmentIdentifier()

    if lead <= LAST_STANDARD_BYTE:
        return StandardIdentifier(lead)

    raise InvalidManufacturerError(data[:1])


@dataclass(frozen=True)
class Manufacturer:
    """
    A MIDI equipment manufacturer.

    Example:
        m = Manufacturer.parse(b"\\x43")
        print(m.display_name, m.group)   # Yamaha Group.JAPANESE
    """

    identifier: Identifier

    KAWAI: ClassVar["Manufacturer"]
    ROLAND: ClassVar["Manufacturer"]
    KORG: ClassVar["Manufacturer"]
    YAMAHA: ClassVar["Manufacturer"]
    ALESIS: ClassVar["Manufacturer"]
    DEVELOPMENT: ClassVar["Manufacturer"]

    @classmethod
    def parse(cls, data: Union[bytes, bytearray, List[int]]) -> "Manufacturer":
        """Parse a manufacturer from identifier bytes. See parse_identifier."""
        return cls(parse_identifier(data))

    @classmethod
    def count(cls) -> int:
        """Number of manufacturers in the lookup table."""
        return len(MANUFACTURERS)

    @property
    def kind(self) -> IdentifierKind:
        return self.identifier.kind

    @property
    def key(self) -> str:
        return self.identifier.key

    @property
    def display_name(self) -> str:
        entry = MANUFACTURERS.get(self.key)
        return entry[0] if entry else UNKNOWN_NAME

    @property
    def canonical_name(self) -> str:
        entry = MANUFACTURERS.get(self.key)
        return entry[1] if entry else UNKNOWN_NAME

    @property
    def group(self) -> Group:
        entry = MANUFACTURERS.get(self.key)
        return Group(entry[2]) if entry else Group.UNKNOWN

    def to_bytes(self) -> bytes:
        return self.identifier.to_bytes()

    @property
    def data_length(self) -> int:
        return len(self.to_bytes())

    def __str__(self) -> str:
        hex_str = " ".join(f"{b:02X}" for b in self.to_bytes())
        return f"{self.display_name} ({hex_str})"


Manufacturer.KAWAI = Manufacturer(StandardIdentifier(0x40))
Manufacturer.ROLAND = Manufacturer(StandardIdentifier(0x41))
Manufacturer.KORG = Manufacturer(StandardIdentifier(0x42))
Manufacturer.YAMAHA = Manufacturer(StandardIdentifier(0x43))
Manufacturer.ALESIS = Manufacturer(ExtendedIdentifier(0x00, 0x00, 0x0E))
Manufacturer.DEVELOPMENT = Manufacturer(DevelopmentIdentifier())
