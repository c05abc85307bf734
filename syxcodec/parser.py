"""
Parser for buffers holding several SysEx messages back to back.

Bulk dumps are usually saved as a plain concatenation of messages:

    F0 43 00 5F ... F7 F0 43 00 5F ... F7 ...

SysExParser splits such a buffer into frames and parses each one with
parse_message(). Frames that fail to parse, including frames cut off
before their F7 terminator, are recorded in `errors` and skipped.
"""

import logging
from typing import List, Tuple, Union

from syxcodec.errors import ParseError
from syxcodec.models.message import SYSEX_END, SYSEX_START, Message, parse_message

logger = logging.getLogger(__name__)


def split_messages(
    data: Union[bytes, bytearray], include_unterminated: bool = False
) -> List[Tuple[int, bytes]]:
    """
    Split data into individual SysEx frames.

    A frame runs from an F0 byte to the next F7 byte. Bytes outside any
    frame are ignored, and an F0 inside a frame starts a new one.

    Args:
        data: Raw bytes
        include_unterminated: Also return frames cut off by another F0 or
            by the end of data (without a terminator)

    Returns:
        List of (offset, frame bytes) pairs, in stream order
    """
    frames = []
    start = None

    for i, byte in enumerate(data):
        if byte == SYSEX_START:
            if start is not None:
                logger.warning("Unterminated SysEx frame at offset %d", start)
                if include_unterminated:
                    frames.append((start, bytes(data[start:i])))
            start = i
        elif byte == SYSEX_END and start is not None:
            frames.append((start, bytes(data[start : i + 1])))
            start = None

    if start is not None:
        logger.warning("Unterminated SysEx frame at offset %d", start)
        if include_unterminated:
            frames.append((start, bytes(data[start:])))

    return frames


class SysExParser:
    """
    Parser for concatenated SysEx messages.

    Example:
        parser = SysExParser()
        messages = parser.parse_bytes(data)

        for offset, error in parser.errors:
            print(f"Skipped frame at {offset}: {error}")
    """

    def __init__(self):
        self.messages: List[Message] = []
        self.errors: List[Tuple[int, ParseError]] = []

    def parse_bytes(self, data: Union[bytes, bytearray]) -> List[Message]:
        """
        Parse every SysEx frame in data.

        Args:
            data: Raw bytes holding zero or more messages

        Returns:
            List of parsed messages, in stream order
        """
        self.messages = []
        self.errors = []

        for offset, frame in split_messages(data, include_unterminated=True):
            try:
                self.messages.append(parse_message(frame))
            except ParseError as e:
                logger.warning("Skipping frame at offset %d: %s", offset, e)
                self.errors.append((offset, e))

        return self.messages


def parse_messages(data: Union[bytes, bytearray]) -> List[Message]:
    """
    Convenience function to parse all messages in a buffer.

    Args:
        data: Raw bytes

    Returns:
        List of parsed messages
    """
    parser = SysExParser()
    return parser.parse_bytes(data)
