"""
Hex and source dump display utilities.
"""

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.text import Text

from syxcodec.utils.dump import HexDumpConfig, SourceDumpConfig, hex_dump, source_dump

console = Console()


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    bytes_per_line: int = 16,
) -> None:
    """Display a hex dump of data in a panel."""
    if not data:
        console.print(Panel("[dim](empty)[/dim]", title=title, border_style="blue", expand=False))
        return

    content = hex_dump(data, HexDumpConfig(bytes_per_line=bytes_per_line))
    console.print(Panel(Text(content), title=title, border_style="blue", expand=False))


def display_source_dump(
    data: bytes,
    title: str = "Source",
    bytes_per_line: int = 8,
    variable_name: str = "data",
) -> None:
    """Display data as a highlighted Python literal."""
    config = SourceDumpConfig(bytes_per_line=bytes_per_line, variable_name=variable_name)
    code = source_dump(data, config)
    console.print(Panel(Syntax(code, "python"), title=title, border_style="blue", expand=False))
