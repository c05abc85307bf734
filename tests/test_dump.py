"""Tests for hex and source dumps."""

from syxcodec.utils.dump import (
    HexDumpConfig,
    HexDumpOption,
    SourceDumpConfig,
    hex_dump,
    source_dump,
)


class TestHexDump:
    """Test cases for hex dump formatting."""

    def test_default_full_line(self):
        data = bytes([0xF0, 0x43, 0x00, 0x5F] + [0x00] * 11 + [0xF7])
        expected = (
            "00000000: F0 43 00 5F 00 00 00 00  00 00 00 00 00 00 00 F7  .C._............"
        )
        assert hex_dump(data) == expected

    def test_offset_only(self):
        config = HexDumpConfig(bytes_per_line=4, options=HexDumpOption.OFFSET)
        assert hex_dump(b"ABCDE", config) == "00000000: 41 42 43 44\n00000004: 45"

    def test_short_line_padding(self):
        config = HexDumpConfig(bytes_per_line=4, options=HexDumpOption.PRINTABLE_CHARACTERS)
        assert hex_dump(b"AB\x00", config) == "41 42 00     AB."

    def test_lowercase(self):
        config = HexDumpConfig(bytes_per_line=2, uppercase=False, options=HexDumpOption.OFFSET)
        assert hex_dump(bytes([0xAB] * 18), config).splitlines()[-1] == "00000010: ab ab"

    def test_indent(self):
        config = HexDumpConfig(bytes_per_line=2, options=HexDumpOption(0), indent=2)
        assert hex_dump(b"\x01\x02\x03", config) == "  01 02\n  03"

    def test_empty(self):
        assert hex_dump(b"") == ""


class TestSourceDump:
    """Test cases for source dump formatting."""

    def test_source_dump(self):
        assert source_dump(b"ABC") == "data = bytes([\n    0x41, 0x42, 0x43,\n])"

    def test_source_dump_config(self):
        config = SourceDumpConfig(
            bytes_per_line=2, uppercase=False, variable_name="patch", type_name="bytearray", indent=2
        )
        expected = "patch = bytearray([\n  0xab, 0xcd,\n  0xef,\n])"
        assert source_dump(bytes([0xAB, 0xCD, 0xEF]), config) == expected

    def test_source_dump_evaluates(self):
        data = bytes(range(20))
        namespace = {}
        exec(source_dump(data), namespace)
        assert namespace["data"] == data
