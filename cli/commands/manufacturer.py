"""
Manufacturer command - look up a manufacturer identifier.
"""

from typing import List

import typer
from rich.console import Console

from syxcodec.errors import ParseError
from syxcodec.models.manufacturer import Manufacturer

from cli.display.tables import display_manufacturer

console = Console()
app = typer.Typer()


def parse_hex_bytes(values: List[str]) -> bytes:
    """
    Parse hex strings like ["00", "20", "29"] or ["002029"] into bytes.

    Raises:
        ValueError: If a value is not valid hex
    """
    return bytes.fromhex("".join(values))


@app.command()
def manufacturer(
    identifier: List[str] = typer.Argument(..., help="Identifier bytes in hex, e.g. 43 or 00 20 29"),
) -> None:
    """
    Show the name and group of a manufacturer identifier.

    Examples:

        syxcodec manufacturer 43

        syxcodec manufacturer 00 20 29
    """
    try:
        data = parse_hex_bytes(identifier)
    except ValueError:
        console.print(f"[red]Error: Not a hex identifier: {' '.join(identifier)}[/red]")
        raise typer.Exit(1)

    try:
        m = Manufacturer.parse(data)
    except ParseError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_manufacturer(m)


if __name__ == "__main__":
    app()
