"""Tests for payload packing and nybble encoding."""

import pytest

from syxcodec.utils.packing import (
    IndexBitOrder,
    NybbleOrder,
    chunked,
    denybblify,
    nybblify,
    pack,
    unpack,
)


class TestChunked:
    """Test cases for splitting data into chunks."""

    def test_length_less_than_chunk_size(self):
        chunks = chunked(bytes([0x41, 0x42, 0x43]), 16)
        assert chunks == [b"ABC"]

    def test_length_exactly_chunk_size(self):
        chunks = chunked(bytes([0x42] * 16), 16)
        assert len(chunks) == 1

    def test_length_greater_than_chunk_size(self):
        chunks = chunked(bytes([0x42] * 24), 16)
        assert len(chunks) == 2
        assert len(chunks[-1]) == 8

    def test_empty(self):
        assert chunked(b"", 4) == []

    def test_accepts_list(self):
        assert chunked([1, 2, 3], 2) == [b"\x01\x02", b"\x03"]

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            chunked(b"abc", 0)


class TestPack:
    """Test cases for 7-bit packing."""

    def test_pack_alternating_high_bits(self):
        """Bit i of the index byte holds bit 7 of byte i."""
        raw = bytes([0x81, 0x02, 0x83, 0x04, 0x85, 0x06, 0x87])
        packed = pack(raw)

        assert len(packed) == 8
        assert packed[0] == 0b01010101
        assert packed[1:] == bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07])

    def test_pack_msb_first(self):
        """Yamaha order: bit 6 of the index byte holds bit 7 of byte 0."""
        raw = bytes([0x80, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02])
        packed = pack(raw, IndexBitOrder.MSB_FIRST)

        assert packed == bytes([0x40, 0x00, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02])

    def test_pack_partial_group(self):
        """A short final group is still indexed."""
        packed = pack(bytes([0x80, 0x40, 0x20]))

        assert packed == bytes([0x01, 0x00, 0x40, 0x20])

    def test_pack_multiple_groups(self):
        packed = pack(bytes([0xFF] * 9))

        assert len(packed) == 8 + 3
        assert packed[0] == 0x7F
        assert packed[8] == 0x03

    def test_packed_bytes_have_bit_7_clear(self):
        packed = pack(bytes(range(256)))
        assert all(b < 0x80 for b in packed)

    def test_all_high_bits(self):
        packed = pack(bytes([0x80] * 7))

        assert packed[0] == 0x7F
        assert all(b == 0 for b in packed[1:])

    def test_empty(self):
        assert pack(b"") == b""


class TestUnpack:
    """Test cases for 7-bit unpacking."""

    def test_unpack_simple(self):
        packed = bytes([0x55, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07])
        assert unpack(packed) == bytes([0x81, 0x02, 0x83, 0x04, 0x85, 0x06, 0x87])

    def test_unpack_msb_first(self):
        packed = bytes([0x40, 0x00, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02])
        decoded = unpack(packed, IndexBitOrder.MSB_FIRST)

        assert decoded[0] == 0x80
        assert len(decoded) == 7

    def test_unpack_partial_group(self):
        """A group of k bytes yields k - 1 bytes."""
        decoded = unpack(bytes([0x01, 0x00, 0x40, 0x20, 0x10]))

        assert decoded == bytes([0x80, 0x40, 0x20, 0x10])

    def test_unpack_lone_index_byte(self):
        assert unpack(bytes([0x7F])) == b""

    def test_unpack_is_permissive(self):
        """Data bytes with bit 7 already set are kept as they are."""
        assert unpack(bytes([0x00, 0x85])) == bytes([0x85])

    def test_empty(self):
        assert unpack(b"") == b""


class TestPackRoundtrip:
    """Test that unpack(pack(x)) == x."""

    @pytest.mark.parametrize("order", list(IndexBitOrder))
    def test_roundtrip_lengths(self, order):
        data = bytes((i * 37 + 0x80) & 0xFF for i in range(50))
        for length in range(len(data) + 1):
            assert unpack(pack(data[:length], order), order) == data[:length]

    def test_roundtrip_all_byte_values(self):
        data = bytes(range(256))
        assert unpack(pack(data)) == data

    def test_roundtrip_list_input(self):
        assert unpack(pack([0x00, 0x7F, 0x80, 0xFF])) == bytes([0x00, 0x7F, 0x80, 0xFF])


class TestNybblify:
    """Test cases for nybble splitting of byte sequences."""

    def test_nybblify_high_first(self):
        data = bytes([0xA4, 0xB5, 0xC6])
        assert nybblify(data) == bytes([0x0A, 0x04, 0x0B, 0x05, 0x0C, 0x06])

    def test_nybblify_low_first(self):
        data = bytes([0xA4, 0xB5, 0xC6])
        assert nybblify(data, NybbleOrder.LOW_FIRST) == bytes([0x04, 0x0A, 0x05, 0x0B, 0x06, 0x0C])

    def test_denybblify(self):
        data = bytes([0x0A, 0x04, 0x0B, 0x05, 0x0C, 0x06])
        assert denybblify(data) == bytes([0xA4, 0xB5, 0xC6])

    def test_denybblify_low_first(self):
        data = bytes([0x04, 0x0A, 0x05, 0x0B, 0x06, 0x0C])
        assert denybblify(data, NybbleOrder.LOW_FIRST) == bytes([0xA4, 0xB5, 0xC6])

    def test_denybblify_odd_length(self):
        assert denybblify(bytes([0x0A, 0x04, 0x0B, 0x05, 0x0C])) is None
        assert denybblify(bytes([0x0A]), NybbleOrder.LOW_FIRST) is None

    def test_empty(self):
        assert nybblify(b"") == b""
        assert denybblify(b"") == b""

    @pytest.mark.parametrize("order", list(NybbleOrder))
    def test_roundtrip(self, order):
        data = bytes(range(256))
        assert denybblify(nybblify(data, order), order) == data
