"""
Rich table displays for SysEx messages and manufacturers.
"""

from typing import List, Tuple

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from syxcodec.errors import ParseError
from syxcodec.models.manufacturer import Manufacturer
from syxcodec.models.message import Message

from cli.display.formatters import hex_bytes, message_kind, message_source

console = Console()


def display_message_table(
    messages: List[Message],
    errors: List[Tuple[int, ParseError]],
    title: str = "SysEx Messages",
) -> None:
    """Display one row per message, followed by any parse errors."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Source")
    table.add_column("Length", justify="right")
    table.add_column("Payload", justify="right", style="green")
    table.add_column("Preview", style="dim")

    for i, message in enumerate(messages):
        table.add_row(
            str(i),
            message_kind(message),
            message_source(message),
            str(message.data_length),
            str(len(message.payload)),
            hex_bytes(message.payload, limit=8),
        )

    console.print(table)

    for offset, error in errors:
        console.print(f"[red]Frame at offset {offset} (0x{offset:X}): {error}[/red]")


def display_manufacturer(manufacturer: Manufacturer) -> None:
    """Display manufacturer details in a panel."""
    content = f"""[bold]Identifier:[/bold] {hex_bytes(manufacturer.to_bytes())}
[bold]Kind:[/bold] {manufacturer.kind.value}
[bold]Display Name:[/bold] {manufacturer.display_name}
[bold]Canonical Name:[/bold] {manufacturer.canonical_name}
[bold]Group:[/bold] {manufacturer.group.value}"""

    console.print(
        Panel(
            content,
            title="[bold blue]Manufacturer[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )
