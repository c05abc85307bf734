"""
Convert command - rewrite a SysEx file as binary or hex text.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.loader import load_messages, save_messages

console = Console()
app = typer.Typer()


@app.command()
def convert(
    file: Path = typer.Argument(..., help="Input SysEx file (.syx, binary or hex text)"),
    output: Path = typer.Argument(..., help="Output .syx file"),
    hex_text: bool = typer.Option(False, "--hex", help="Write hex text instead of binary"),
) -> None:
    """
    Rewrite every message of a SysEx file in binary or hex text form.

    Nothing is written if any frame fails to parse.

    Examples:

        syxcodec convert dump.syx dump.txt --hex

        syxcodec convert dump.txt dump.syx
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        messages, errors = load_messages(file)
    except ValueError as e:
        console.print(f"[red]Error: Cannot read {file}: {e}[/red]")
        raise typer.Exit(1)

    if errors:
        for offset, error in errors:
            console.print(f"[red]Frame at offset {offset} (0x{offset:X}): {error}[/red]")
        console.print("[red]Error: Not converting a file with rejected frames[/red]")
        raise typer.Exit(1)

    output.parent.mkdir(parents=True, exist_ok=True)
    try:
        save_messages(output, messages, plain=hex_text)
    except ValueError as e:
        console.print(f"[red]Error: Cannot write {output}: {e}[/red]")
        raise typer.Exit(1)

    form = "hex text" if hex_text else "binary"
    console.print(f"[green]Wrote {len(messages)} message(s) to {output} ({form})[/green]")


if __name__ == "__main__":
    app()
