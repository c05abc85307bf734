#!/usr/bin/env python3
"""
Example: Edit a packed bulk dump payload

Unpacks the 7-bit packed data of a KORG program dump, changes one byte,
packs it again and re-encodes the message.
"""

import sys

sys.path.insert(0, "..")

from syxcodec import ManufacturerSpecificMessage, encode_message, parse_message
from syxcodec.utils import pack, unpack

# F0 42 3n 00 01 51 4C [packed data] F7
HEADER_LENGTH = 5


def main():
    data = bytes.fromhex("F0 42 30 00 01 51 4C 55 01 02 03 04 05 06 07 F7")
    message = parse_message(data)

    header = message.payload[:HEADER_LENGTH]
    raw = bytearray(unpack(message.payload[HEADER_LENGTH:]))
    print("Raw data:   " + " ".join(f"{b:02X}" for b in raw))

    raw[1] = 0xFF

    edited = ManufacturerSpecificMessage(message.manufacturer, header + pack(raw))
    print("Re-encoded: " + " ".join(f"{b:02X}" for b in encode_message(edited)))


if __name__ == "__main__":
    main()
