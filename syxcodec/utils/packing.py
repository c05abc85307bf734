"""
Payload re-encoding used inside SysEx bulk dumps.

MIDI data bytes must have bit 7 clear, so synthesizers store 8-bit data
in one of two ways:

Packed (7-bit) encoding:
- Take up to 7 bytes of raw 8-bit data
- Collect bit 7 of each byte into an "index" byte
- Clear bit 7 in the original bytes
- Result: 8 bytes (1 index + 7 data bytes) for every 7 input bytes

    Input:  [0x81, 0x02, 0x83, 0x04, 0x85, 0x06, 0x87]
    Index:  0b01010101  (LSB-first: bit i is bit 7 of byte i)
    Output: [0x55, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07]

KORG dumps put the flag of data byte i in bit i of the index byte.
Yamaha bulk dumps put it in bit 6 - i; see IndexBitOrder.

Nybblified encoding:
- Each byte is sent as two bytes, each holding one 4-bit nybble
"""

from enum import Enum
from typing import List, Optional, Union

from syxcodec.utils.bits import byte_from_nybbles, clear_bit, is_bit_set, nybbles, set_bit

ByteInput = Union[bytes, bytearray, List[int]]

# Raw bytes per packed group, and wire bytes per group (index + data)
RAW_GROUP_SIZE = 7
PACKED_GROUP_SIZE = 8


class IndexBitOrder(Enum):
    """Which index-byte bit carries the high bit of each data byte."""

    LSB_FIRST = "lsb_first"  # bit i <- byte i (KORG)
    MSB_FIRST = "msb_first"  # bit 6 - i <- byte i (Yamaha)

    def position(self, index: int) -> int:
        """Index-byte bit position for the data byte at `index`."""
        if self is IndexBitOrder.LSB_FIRST:
            return index
        return (RAW_GROUP_SIZE - 1) - index


class NybbleOrder(Enum):
    """Order of the two nybbles of a nybblified byte."""

    HIGH_FIRST = "high_first"
    LOW_FIRST = "low_first"


def _as_bytes(data: ByteInput) -> bytes:
    if isinstance(data, bytes):
        return data
    return bytes(data)


def chunked(data: ByteInput, size: int) -> List[bytes]:
    """
    Split data into consecutive chunks of at most `size` bytes.

    The last chunk may be shorter.

    Raises:
        ValueError: If size is less than 1
    """
    if size < 1:
        raise ValueError(f"Chunk size must be at least 1, got {size}")

    data = _as_bytes(data)
    return [data[i : i + size] for i in range(0, len(data), size)]


def pack(data: ByteInput, order: IndexBitOrder = IndexBitOrder.LSB_FIRST) -> bytes:
    """
    Encode 8-bit raw data into the packed 7-bit format.

    For every 7 bytes of raw data, produces 8 bytes: the index byte
    holding the high bits, followed by the 7 bytes with bit 7 cleared.
    A final group of fewer than 7 bytes is indexed the same way.

    Args:
        data: The raw 8-bit data
        order: Index byte bit assignment

    Returns:
        Packed data safe for SysEx transmission
    """
    result = bytearray()

    for chunk in chunked(data, RAW_GROUP_SIZE):
        index = 0
        for j, byte in enumerate(chunk):
            if is_bit_set(byte, 7):
                index = set_bit(index, order.position(j))

        result.append(index)
        result.extend(clear_bit(byte, 7) for byte in chunk)

    return bytes(result)


def unpack(data: ByteInput, order: IndexBitOrder = IndexBitOrder.LSB_FIRST) -> bytes:
    """
    Decode packed 7-bit data back to 8-bit raw data.

    Each group of up to 8 bytes starts with the index byte; the bytes
    after it get bit 7 restored from the index. A group of k bytes
    yields k - 1 bytes. Data bytes that already have bit 7 set are
    passed through as they are.

    Args:
        data: The packed data
        order: Index byte bit assignment

    Returns:
        Decoded 8-bit data
    """
    result = bytearray()

    for chunk in chunked(data, PACKED_GROUP_SIZE):
        index = chunk[0]
        for j, byte in enumerate(chunk[1:]):
            if is_bit_set(index, order.position(j)):
                byte = set_bit(byte, 7)
            result.append(byte)

    return bytes(result)


def nybblify(data: ByteInput, order: NybbleOrder = NybbleOrder.HIGH_FIRST) -> bytes:
    """
    Split every byte into two bytes holding one nybble each.

    Args:
        data: The raw data
        order: Which nybble is emitted first

    Returns:
        Data twice as long as the input
    """
    result = bytearray()

    for byte in _as_bytes(data):
        n = nybbles(byte)
        if order is NybbleOrder.HIGH_FIRST:
            result.extend((n.high, n.low))
        else:
            result.extend((n.low, n.high))

    return bytes(result)


def denybblify(data: ByteInput, order: NybbleOrder = NybbleOrder.HIGH_FIRST) -> Optional[bytes]:
    """
    Join pairs of nybble bytes back into bytes.

    Args:
        data: Nybblified data
        order: Which nybble comes first in each pair

    Returns:
        The joined data, or None if the input length is odd
    """
    data = _as_bytes(data)
    if len(data) % 2 != 0:
        return None

    result = bytearray()
    for first, second in zip(data[0::2], data[1::2]):
        if order is NybbleOrder.HIGH_FIRST:
            result.append(byte_from_nybbles(first & 0x0F, second & 0x0F))
        else:
            result.append(byte_from_nybbles(second & 0x0F, first & 0x0F))

    return bytes(result)
