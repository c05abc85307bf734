"""Tests for the multi-message SysEx parser."""

import logging

from syxcodec.errors import BadFormatError, InvalidDataError
from syxcodec.models.manufacturer import Manufacturer
from syxcodec.models.message import ManufacturerSpecificMessage, UniversalMessage
from syxcodec.parser import SysExParser, parse_messages, split_messages
from syxcodec.utils.packing import unpack


class TestSplitMessages:
    """Test cases for splitting a buffer into frames."""

    def test_split_sample(self, sample_syx_data):
        frames = split_messages(sample_syx_data)

        assert len(frames) == 5
        assert frames[0] == (0, bytes([0xF0, 0x40, 0x00, 0x00, 0x00, 0x04, 0x00, 0x00, 0xF7]))
        assert all(f[0] == 0xF0 and f[-1] == 0xF7 for _, f in frames)

    def test_bytes_between_frames_ignored(self):
        data = bytes([0x00, 0xF0, 0x43, 0x01, 0x02, 0xF7, 0x55, 0xF7])
        assert split_messages(data) == [(1, bytes([0xF0, 0x43, 0x01, 0x02, 0xF7]))]

    def test_unterminated_frame_dropped(self, caplog):
        data = bytes([0xF0, 0x43, 0x01, 0xF0, 0x42, 0x01, 0x02, 0xF7])

        with caplog.at_level(logging.WARNING, logger="syxcodec.parser"):
            frames = split_messages(data)

        assert frames == [(3, bytes([0xF0, 0x42, 0x01, 0x02, 0xF7]))]
        assert "Unterminated" in caplog.text

    def test_unterminated_frames_included(self):
        data = bytes([0xF0, 0x43, 0x01, 0xF0, 0x42, 0x01, 0x02, 0xF7, 0xF0, 0x41])

        assert split_messages(data, include_unterminated=True) == [
            (0, bytes([0xF0, 0x43, 0x01])),
            (3, bytes([0xF0, 0x42, 0x01, 0x02, 0xF7])),
            (8, bytes([0xF0, 0x41])),
        ]

    def test_empty(self):
        assert split_messages(b"") == []


class TestSysExParser:
    """Test cases for SysExParser."""

    def test_parse_sample(self, sample_syx_data):
        parser = SysExParser()
        messages = parser.parse_bytes(sample_syx_data)

        assert len(messages) == 5
        assert parser.errors == []
        assert messages[0].manufacturer == Manufacturer.KAWAI
        assert messages[1].manufacturer == Manufacturer.ALESIS
        assert isinstance(messages[2], UniversalMessage)
        assert messages[3].manufacturer == Manufacturer.DEVELOPMENT
        assert messages[4].manufacturer == Manufacturer.KORG

    def test_packed_payload(self, sample_syx_data):
        """The KORG program dump carries packed data after a 5-byte header."""
        message = parse_messages(sample_syx_data)[4]

        assert isinstance(message, ManufacturerSpecificMessage)
        assert unpack(message.payload[5:]) == bytes([0x81, 0x02, 0x83, 0x04, 0x85, 0x06, 0x87])

    def test_short_frames_recorded(self, caplog):
        data = bytes([0xF0, 0x43, 0xF7, 0xF0, 0x43, 0x10, 0x5F, 0xF7])
        parser = SysExParser()

        with caplog.at_level(logging.WARNING, logger="syxcodec.parser"):
            messages = parser.parse_bytes(data)

        assert len(messages) == 1
        assert len(parser.errors) == 1
        offset, error = parser.errors[0]
        assert offset == 0
        assert isinstance(error, InvalidDataError)
        assert "Skipping frame at offset 0" in caplog.text

    def test_unterminated_frame_recorded(self):
        """A frame cut off by the next F0 is an error, not silently lost."""
        data = bytes([0xF0, 0x43, 0x01, 0x02, 0xF0, 0x43, 0x10, 0x20, 0xF7])
        parser = SysExParser()
        messages = parser.parse_bytes(data)

        assert len(messages) == 1
        assert messages[0].payload == bytes([0x10, 0x20])
        assert len(parser.errors) == 1
        offset, error = parser.errors[0]
        assert offset == 0
        assert isinstance(error, InvalidDataError)

    def test_trailing_unterminated_frame_recorded(self):
        data = bytes([0xF0, 0x43, 0x10, 0x20, 0xF7, 0xF0, 0x43, 0x10, 0x20, 0x30, 0x40])
        parser = SysExParser()
        messages = parser.parse_bytes(data)

        assert len(messages) == 1
        assert len(parser.errors) == 1
        offset, error = parser.errors[0]
        assert offset == 5
        assert isinstance(error, BadFormatError)

    def test_parser_state_resets(self, sample_syx_data):
        parser = SysExParser()
        parser.parse_bytes(bytes([0xF0, 0xF7]))
        parser.parse_bytes(sample_syx_data)

        assert len(parser.messages) == 5
        assert parser.errors == []
