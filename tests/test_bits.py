"""Tests for bit and nybble helpers."""

import pytest

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


class TestBitOperations:
    """Test cases for set/clear/test of single bits."""

    def test_set_bit(self):
        assert set_bit(0x00, 0) == 0x01
        assert set_bit(0x00, 7) == 0x80
        assert set_bit(0x81, 7) == 0x81

    def test_clear_bit(self):
        assert clear_bit(0xFF, 0) == 0xFE
        assert clear_bit(0xFF, 7) == 0x7F
        assert clear_bit(0x00, 3) == 0x00

    def test_is_bit_set(self):
        assert is_bit_set(0b00000100, 2)
        assert not is_bit_set(0b00000100, 3)

    def test_out_of_range_positions_are_ignored(self):
        """Positions outside 0-7 leave the byte alone and test as False."""
        assert set_bit(0x42, 8) == 0x42
        assert set_bit(0x42, -1) == 0x42
        assert clear_bit(0x42, 8) == 0x42
        assert clear_bit(0x42, -1) == 0x42
        assert not is_bit_set(0xFF, 8)
        assert not is_bit_set(0xFF, -1)


class TestNybbles:
    """Test cases for nybble splitting."""

    def test_high_nybble(self):
        assert high_nybble(0xA4) == 0x0A

    def test_low_nybble(self):
        assert low_nybble(0xA4) == 0x04

    def test_nybbles_from_byte(self):
        n = nybbles(0xA4)
        assert n == Nybbles(high=0x0A, low=0x04)
        assert n.high == 0x0A
        assert n.low == 0x04

    def test_byte_from_nybbles(self):
        assert byte_from_nybbles(0x0A, 0x04) == 0xA4

    def test_roundtrip_all_bytes(self):
        for b in range(256):
            assert byte_from_nybbles(*nybbles(b)) == b


class TestBits:
    """Test cases for byte <-> bit list conversion."""

    def test_byte_from_bits(self):
        bs = [Bit.ZERO, Bit.ZERO, Bit.ONE, Bit.ONE, Bit.ONE, Bit.ZERO, Bit.ZERO, Bit.ZERO]
        assert byte_from_bits(bs) == 0b00011100

    def test_bits_from_byte(self):
        assert bits(0b00011100) == [
            Bit.ZERO, Bit.ZERO, Bit.ONE, Bit.ONE, Bit.ONE, Bit.ZERO, Bit.ZERO, Bit.ZERO,
        ]

    def test_partial_bit_list(self):
        """A short list builds only the low bits."""
        assert byte_from_bits([Bit.ONE, Bit.ONE]) == 0b11

    def test_extra_bits_are_ignored(self):
        bs = [Bit.ONE] * 8 + [Bit.ONE, Bit.ONE]
        assert byte_from_bits(bs) == 0xFF

    def test_bit_str(self):
        assert "".join(str(b) for b in bits(0x05)) == "10100000"

    def test_roundtrip_all_bytes(self):
        for b in range(256):
            assert byte_from_bits(bits(b)) == b


class TestReplaceBits:
    """Test cases for replacing a bit field."""

    def test_replace_bits(self):
        assert replace_bits(0b01010110, 2, 5, 0b1010) == 0b01101010

    def test_narrow_value_is_zero_extended(self):
        """A value with fewer significant bits clears the rest of the field."""
        assert replace_bits(0b11111111, 2, 5, 0b1) == 0b11000111

    def test_zero_value_clears_field(self):
        assert replace_bits(0xFF, 0, 3, 0) == 0xF0

    def test_single_bit_field(self):
        assert replace_bits(0x00, 7, 7, 1) == 0x80

    def test_bits_outside_field_untouched(self):
        assert replace_bits(0b10000001, 1, 6, 0b111111) == 0xFF

    def test_value_too_wide_raises(self):
        with pytest.raises(ValueError):
            replace_bits(0x00, 2, 5, 0b10000)

    def test_reversed_range_raises(self):
        with pytest.raises(ValueError):
            replace_bits(0x00, 5, 2, 0)

    def test_positions_past_bit_7_are_ignored(self):
        assert replace_bits(0x00, 6, 9, 0b1111) == 0b11000000
