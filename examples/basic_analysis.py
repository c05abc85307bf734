#!/usr/bin/env python3
"""
Example: Basic SysEx analysis

Shows how to split a .syx buffer into messages and inspect each one.
"""

import sys

sys.path.insert(0, "..")

from syxcodec import SysExParser, UniversalMessage
from syxcodec.utils import hex_dump


def main():
    with open("../tests/fixtures/sample.syx", "rb") as f:
        data = f.read()

    parser = SysExParser()
    messages = parser.parse_bytes(data)

    print(f"Messages: {len(messages)}")
    print()

    for i, message in enumerate(messages):
        print(f"Message {i}:")
        print(message)
        if not isinstance(message, UniversalMessage):
            print(f"Group: {message.manufacturer.group.value}")
        print(hex_dump(message.payload))
        print()

    for offset, error in parser.errors:
        print(f"Skipped frame at offset {offset}: {error}")


if __name__ == "__main__":
    main()
