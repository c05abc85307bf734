"""
Errors raised while parsing MIDI System Exclusive data.
"""

from typing import List, Union


class ParseError(Exception):
    """Base class for all SysEx parsing failures."""

    description = "Parse error"

    def __str__(self) -> str:
        return self.description


class BadFormatError(ParseError):
    """Raised when the SysEx initiator or terminator byte is wrong."""

    description = "Bad message format"


class UnknownKindError(ParseError):
    """Raised when a message cannot be classified."""

    description = "Unknown message kind"


class InvalidDataError(ParseError):
    """
    Raised when the data is too short to hold the expected structure.

    Attributes:
        offset: Offset of the first byte that could not be read
    """

    def __init__(self, offset: int):
        super().__init__(offset)
        self.offset = offset

    def __str__(self) -> str:
        return f"Invalid data at offset {self.offset}."


class InvalidManufacturerError(ParseError):
    """
    Raised when a manufacturer identifier lead byte is not recognized.

    Attributes:
        data: The offending identifier byte(s)
    """

    def __init__(self, data: Union[bytes, List[int]]):
        super().__init__(bytes(data))
        self.data = bytes(data)

    def __str__(self) -> str:
        hex_str = " ".join(f"{b:02X}" for b in self.data)
        return f"Invalid manufacturer identifier: {hex_str}"
