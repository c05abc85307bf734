"""
Formatting helpers for CLI output.
"""

from syxcodec.models.message import Message, UniversalMessage


def hex_bytes(data: bytes, limit: int = 0) -> str:
    """
    Format bytes as space separated hex.

    Args:
        data: Bytes to format
        limit: Maximum number of bytes to show (0 = all)

    Returns:
        String like "F0 43 00 5F ..."
    """
    if limit and len(data) > limit:
        return " ".join(f"{b:02X}" for b in data[:limit]) + " ..."
    return " ".join(f"{b:02X}" for b in data)


def message_kind(message: Message) -> str:
    """Short label for the message kind."""
    if isinstance(message, UniversalMessage):
        return f"Universal {message.kind.label}"
    return f"Manufacturer ({message.manufacturer.kind.value})"


def message_source(message: Message) -> str:
    """Manufacturer or universal header summary."""
    if isinstance(message, UniversalMessage):
        header = message.header
        return (
            f"Ch {header.device_channel} "
            f"Sub-ID {header.sub_id1:02X} {header.sub_id2:02X}"
        )
    return str(message.manufacturer)
