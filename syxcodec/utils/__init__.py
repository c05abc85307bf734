"""Byte-level utility functions for syxcodec."""

from syxcodec.utils.bits import (
    Bit,
    Nybbles,
    bits,
    byte_from_bits,
    byte_from_nybbles,
    clear_bit,
    high_nybble,
    is_bit_set,
    low_nybble,
    nybbles,
    replace_bits,
    set_bit,
)
from syxcodec.utils.packing import (
    IndexBitOrder,
    NybbleOrder,
    chunked,
    denybblify,
    nybblify,
    pack,
    unpack,
)
from syxcodec.utils.dump import (
    HexDumpConfig,
    HexDumpOption,
    SourceDumpConfig,
    hex_dump,
    source_dump,
)

__all__ = [
    "Bit",
    "Nybbles",
    "bits",
    "byte_from_bits",
    "byte_from_nybbles",
    "clear_bit",
    "high_nybble",
    "is_bit_set",
    "low_nybble",
    "nybbles",
    "replace_bits",
    "set_bit",
    "IndexBitOrder",
    "NybbleOrder",
    "chunked",
    "denybblify",
    "nybblify",
    "pack",
    "unpack",
    "HexDumpConfig",
    "HexDumpOption",
    "SourceDumpConfig",
    "hex_dump",
    "source_dump",
]
