"""
Bit and nybble helpers for single bytes.

Bit positions are numbered 0-7, with position 0 the least significant
bit. Positions outside that range are silently ignored: setting or
clearing them returns the byte unchanged, and testing them returns
False. Call sites can then walk arbitrary ranges without bounds checks.
"""

from enum import IntEnum
from typing import List, NamedTuple, Sequence


class Bit(IntEnum):
    """A single bit."""

    ZERO = 0
    ONE = 1

    def __str__(self) -> str:
        return str(self.value)


class Nybbles(NamedTuple):
    """High and low four-bit halves of a byte."""

    high: int
    low: int


def _in_range(position: int) -> bool:
    return 0 <= position < 8


def set_bit(byte: int, position: int) -> int:
    """Return `byte` with the bit at `position` set."""
    if not _in_range(position):
        return byte
    return (byte | (1 << position)) & 0xFF


def clear_bit(byte: int, position: int) -> int:
    """Return `byte` with the bit at `position` cleared."""
    if not _in_range(position):
        return byte
    return byte & ~(1 << position) & 0xFF


def is_bit_set(byte: int, position: int) -> bool:
    """Return True if the bit at `position` is set."""
    if not _in_range(position):
        return False
    return (byte & (1 << position)) != 0


def high_nybble(byte: int) -> int:
    """Return the top four bits of `byte`."""
    return (byte & 0xF0) >> 4


def low_nybble(byte: int) -> int:
    """Return the bottom four bits of `byte`."""
    return byte & 0x0F


def nybbles(byte: int) -> Nybbles:
    """Split `byte` into its high and low nybbles."""
    return Nybbles(high=high_nybble(byte), low=low_nybble(byte))


def byte_from_nybbles(high: int, low: int) -> int:
    """
    Combine two nybbles into a byte.

    The nybbles are not masked; callers must pass values in 0x0-0xF.
    """
    return (high << 4) | low


def bits(byte: int) -> List[Bit]:
    """
    Convert a byte into a list of eight bits.

    Index 0 of the result is the least significant bit.
    """
    return [Bit.ONE if is_bit_set(byte, i) else Bit.ZERO for i in range(8)]


def byte_from_bits(bit_list: Sequence[Bit]) -> int:
    """
    Build a byte from a list of bits, least significant first.

    Only the first eight bits are used. A shorter list builds a partial
    byte with the missing high bits zero.
    """
    value = 0
    for position, bit in enumerate(bit_list[:8]):
        if bit == Bit.ONE:
            value = set_bit(value, position)
    return value


def replace_bits(byte: int, first: int, last: int, value: int) -> int:
    """
    Overlay `value` onto bits `first` through `last` (inclusive) of `byte`.

    `value` is right-aligned in the field and zero-extended to its width.
    Bits outside the field are left as they are.

    Args:
        byte: The byte to modify
        first: Lowest bit position of the field
        last: Highest bit position of the field
        value: New field value

    Returns:
        The modified byte

    Raises:
        ValueError: If the range is reversed, or `value` has more
            significant bits than the field is wide

    Example:
        >>> bin(replace_bits(0b01010110, 2, 5, 0b1010))
        '0b1101010'
    """
    if last < first:
        raise ValueError(f"Invalid bit range {first}..{last}")

    width = last - first + 1
    if value < 0 or value.bit_length() > width:
        raise ValueError(f"Value {value:#b} does not fit in {width} bits")

    result = byte
    for i in range(width):
        if (value >> i) & 0x01:
            result = set_bit(result, first + i)
        else:
            result = clear_bit(result, first + i)
    return result
