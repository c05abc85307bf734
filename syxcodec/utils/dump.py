"""
Text dumps of byte data: annotated hex dump and Python source literal.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import List, Union

from syxcodec.utils.packing import chunked

ByteInput = Union[bytes, bytearray, List[int]]


class HexDumpOption(IntFlag):
    """Optional parts of a hex dump line."""

    OFFSET = 1
    PRINTABLE_CHARACTERS = 2
    MID_CHUNK_GAP = 4

    ALL = OFFSET | PRINTABLE_CHARACTERS | MID_CHUNK_GAP


@dataclass(frozen=True)
class HexDumpConfig:
    """Hex dump layout."""

    bytes_per_line: int = 16
    uppercase: bool = True
    options: HexDumpOption = HexDumpOption.ALL
    indent: int = 0


@dataclass(frozen=True)
class SourceDumpConfig:
    """Source dump layout."""

    bytes_per_line: int = 8
    uppercase: bool = True
    variable_name: str = "data"
    type_name: str = "bytes"
    indent: int = 4


def _printable(byte: int) -> str:
    return chr(byte) if 32 <= byte < 127 else "."


def hex_dump(data: ByteInput, config: HexDumpConfig = HexDumpConfig()) -> str:
    """
    Format data as a hex dump.

    Each line holds `bytes_per_line` bytes:

        00000000: F0 43 00 5F 00 00 00 00  00 00 00 00 00 00 00 F7  .C._............

    A short final line is padded so the printable column stays aligned.

    Args:
        data: Bytes to dump
        config: Layout options

    Returns:
        The dump, one line per chunk, joined with newlines
    """
    hex_fmt = "X" if config.uppercase else "x"
    mid = config.bytes_per_line // 2
    gap = HexDumpOption.MID_CHUNK_GAP in config.options
    lines = []

    for n, chunk in enumerate(chunked(data, config.bytes_per_line)):
        line = " " * config.indent

        if HexDumpOption.OFFSET in config.options:
            line += format(n * config.bytes_per_line, f"08{hex_fmt}") + ": "

        for i in range(config.bytes_per_line):
            line += format(chunk[i], f"02{hex_fmt}") + " " if i < len(chunk) else "   "
            if gap and i + 1 == mid:
                line += " "

        if HexDumpOption.PRINTABLE_CHARACTERS in config.options:
            line += " " + "".join(_printable(b) for b in chunk)
        else:
            line = line.rstrip()

        lines.append(line)

    return "\n".join(lines)


def source_dump(data: ByteInput, config: SourceDumpConfig = SourceDumpConfig()) -> str:
    """
    Format data as a Python source literal.

    Example:
        >>> print(source_dump(b"ABC"))
        data = bytes([
            0x41, 0x42, 0x43,
        ])
    """
    hex_fmt = "X" if config.uppercase else "x"
    lines = [f"{config.variable_name} = {config.type_name}(["]

    for chunk in chunked(data, config.bytes_per_line):
        values = ", ".join("0x" + format(b, f"02{hex_fmt}") for b in chunk)
        lines.append(" " * config.indent + values + ",")

    lines.append("])")
    return "\n".join(lines)
