"""Main CLI entry point using Typer."""

from __future__ import annotations

import typer
from rich.console import Console

from gru import __version__
from gru.cli.commands import bios, hosts, init, show
from gru.cli.context import CliState
from gru.logging.config import configure_logging

app = typer.Typer(
    name="gru",
    help="Query and configure machines through their BMCs.",
    add_completion=True,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"gru version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool | None = typer.Option(
        None,
        "--json/--no-json",
        help="Print results as JSON. Overrides the json_output setting.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
) -> None:
    """gru - hardware management for machines with a BMC."""
    configure_logging(verbose=verbose, debug=debug)
    ctx.obj = CliState(json_override=json_output)


# Register subcommands
app.add_typer(bios.app, name="bios")
app.command()(hosts.hosts)
app.command()(init.init)
app.command()(show.show)


if __name__ == "__main__":
    app()
