"""
syxcodec - Inspect and decode MIDI System Exclusive files.

A CLI front end for the syxcodec library.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from syxcodec import __version__

from cli.commands.info import info
from cli.commands.dump import dump
from cli.commands.decode import decode
from cli.commands.manufacturer import manufacturer
from cli.commands.convert import convert

console = Console()

# Main app
app = typer.Typer(
    name="syxcodec",
    help="Inspect and decode MIDI System Exclusive files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="dump")(dump)
app.command(name="decode")(decode)
app.command(name="manufacturer")(manufacturer)
app.command(name="convert")(convert)


def setup_logging(verbose: bool) -> None:
    """Route library log records through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]syxcodec[/bold] version {__version__}")
    console.print("[dim]Codec for MIDI System Exclusive messages[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser diagnostics"),
) -> None:
    """
    syxcodec - Inspect and decode MIDI System Exclusive files.

    [bold]Quick Start:[/bold]

        syxcodec info dump.syx            # List messages
        syxcodec info dump.syx --full     # Describe every message

    [bold]Payload Commands:[/bold]

        syxcodec dump dump.syx            # Hex dump of payloads
        syxcodec dump dump.syx --source   # Payloads as Python source
        syxcodec decode dump.syx -s packed  # Unpack 7-bit packed data
        syxcodec convert dump.syx dump.txt --hex  # Rewrite as hex text

    [bold]Lookup:[/bold]

        syxcodec manufacturer 43          # Manufacturer by identifier

    Use --help with any command for more details.
    """
    setup_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
