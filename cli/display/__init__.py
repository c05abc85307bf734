"""
CLI display modules.
"""

from cli.display.tables import display_manufacturer, display_message_table
from cli.display.hex_view import display_hex_dump, display_source_dump

__all__ = [
    "display_manufacturer",
    "display_message_table",
    "display_hex_dump",
    "display_source_dump",
]
