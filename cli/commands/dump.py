"""
Dump command - hex or source dump of message payloads.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.display.formatters import message_kind, message_source
from cli.display.hex_view import display_hex_dump, display_source_dump
from cli.loader import load_messages

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="SysEx file (.syx) to dump"),
    message: Optional[int] = typer.Option(
        None, "--message", "-m", help="Dump only this message (0-based index)"
    ),
    source: bool = typer.Option(False, "--source", "-s", help="Dump as Python source"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    whole: bool = typer.Option(
        False, "--whole", help="Dump the complete message instead of the payload"
    ),
) -> None:
    """
    Hex dump of the payload of each message in a SysEx file.

    Examples:

        syxcodec dump dump.syx

        syxcodec dump dump.syx --message 2 --width 8

        syxcodec dump dump.syx --source
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        messages, errors = load_messages(file)
    except ValueError as e:
        console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)

    if width < 1:
        console.print(f"[red]Error: Width must be at least 1, got {width}[/red]")
        raise typer.Exit(1)

    if message is not None:
        if not 0 <= message < len(messages):
            console.print(f"[red]Error: No message {message} (file has {len(messages)})[/red]")
            raise typer.Exit(1)
        selected = [(message, messages[message])]
    else:
        selected = list(enumerate(messages))

    for index, msg in selected:
        data = msg.to_bytes() if whole else msg.payload
        title = f"#{index} {message_kind(msg)} - {message_source(msg)} ({len(data)} bytes)"

        if source:
            display_source_dump(
                data, title=title, bytes_per_line=width, variable_name=f"message_{index}"
            )
        else:
            display_hex_dump(data, title=title, bytes_per_line=width)

    for offset, error in errors:
        console.print(f"[red]Frame at offset {offset} (0x{offset:X}): {error}[/red]")

    if errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
