"""
Decode command - undo payload packing or nybble splitting.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from syxcodec.utils.packing import IndexBitOrder, NybbleOrder, denybblify, unpack

from cli.display.hex_view import display_hex_dump
from cli.loader import load_messages

console = Console()
app = typer.Typer()


class Scheme(str, Enum):
    """Payload encodings understood by the decode command."""

    PACKED = "packed"
    PACKED_MSB = "packed-msb"
    NYBBLE_HIGH = "nybble-high"
    NYBBLE_LOW = "nybble-low"


def decode_payload(payload: bytes, scheme: Scheme) -> Optional[bytes]:
    """
    Decode a payload with the given scheme.

    Returns:
        Decoded bytes, or None if the payload cannot be denybblified
    """
    if scheme is Scheme.PACKED:
        return unpack(payload, IndexBitOrder.LSB_FIRST)
    if scheme is Scheme.PACKED_MSB:
        return unpack(payload, IndexBitOrder.MSB_FIRST)
    if scheme is Scheme.NYBBLE_HIGH:
        return denybblify(payload, NybbleOrder.HIGH_FIRST)
    return denybblify(payload, NybbleOrder.LOW_FIRST)


@app.command()
def decode(
    file: Path = typer.Argument(..., help="SysEx file (.syx)"),
    scheme: Scheme = typer.Option(Scheme.PACKED, "--scheme", "-s", help="Payload encoding"),
    message: int = typer.Option(0, "--message", "-m", help="Message index (0-based)"),
    skip: int = typer.Option(
        0, "--skip", help="Payload bytes before the encoded data (device header)"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write decoded bytes to this file"
    ),
) -> None:
    """
    Decode the payload of one message.

    Schemes:

    - [cyan]packed[/cyan]: 8 bytes -> 7, index bit i holds bit 7 of byte i (KORG)
    - [cyan]packed-msb[/cyan]: same, index bit 6-i holds bit 7 of byte i (Yamaha)
    - [cyan]nybble-high[/cyan]: byte pairs, high nybble first
    - [cyan]nybble-low[/cyan]: byte pairs, low nybble first

    Examples:

        syxcodec decode program.syx --scheme packed --skip 4

        syxcodec decode patch.syx -s nybble-low -o patch.bin
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        messages, errors = load_messages(file)
    except ValueError as e:
        console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)

    for offset, error in errors:
        console.print(f"[red]Frame at offset {offset} (0x{offset:X}): {error}[/red]")

    if skip < 0:
        console.print(f"[red]Error: Skip must be at least 0, got {skip}[/red]")
        raise typer.Exit(1)

    if not 0 <= message < len(messages):
        console.print(f"[red]Error: No message {message} (file has {len(messages)})[/red]")
        raise typer.Exit(1)

    payload = messages[message].payload[skip:]
    decoded = decode_payload(payload, scheme)

    if decoded is None:
        console.print(
            f"[red]Error: Payload has odd length ({len(payload)}), cannot denybblify[/red]"
        )
        raise typer.Exit(1)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "wb") as f:
            f.write(decoded)
        console.print(f"[green]Wrote {len(decoded)} bytes to {output}[/green]")
    else:
        display_hex_dump(
            decoded,
            title=f"#{message} {scheme.value}: {len(payload)} -> {len(decoded)} bytes",
        )


if __name__ == "__main__":
    app()
