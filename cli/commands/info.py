"""
Info command - list the messages in a .syx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_message_table
from cli.loader import load_messages

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="SysEx file (.syx) to analyze"),
    full: bool = typer.Option(False, "--full", "-f", help="Show full description of each message"),
) -> None:
    """
    Show the messages contained in a SysEx file.

    For each message shows its kind (universal or manufacturer-specific),
    the manufacturer or universal header, and the payload size.

    Examples:

        syxcodec info dump.syx

        syxcodec info dump.syx --full
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        messages, errors = load_messages(file)
    except ValueError as e:
        console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)

    display_message_table(messages, errors, title=f"{file.name}: {len(messages)} message(s)")

    if full:
        for i, message in enumerate(messages):
            console.print()
            console.print(f"[bold]Message {i}[/bold]")
            console.print(str(message), markup=False)

    if errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
