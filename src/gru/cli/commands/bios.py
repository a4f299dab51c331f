"""BIOS attribute commands."""

from __future__ import annotations

import json

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gru.cli.context import get_state
from gru.cli.output import format_scalar

app = typer.Typer(help="Look up BIOS attribute descriptors.")
console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()


@app.command()
def decode(
    ctx: typer.Context,
    keys: list[str] = typer.Argument(..., help="Attribute keys to decode."),
) -> None:
    """Translate attribute keys into readable names.

    Unknown keys are printed unchanged.
    """
    state = get_state(ctx)
    library = state.library
    decoded = [library.decode(key, state.json_output) for key in keys]
    logger.debug("Decoded attribute keys", keys=len(keys))

    if state.json_output:
        console.print(json.dumps(decoded, indent=2), markup=False, highlight=False, soft_wrap=True)
        return
    for name in decoded:
        console.print(name, markup=False, highlight=False, soft_wrap=True)


@app.command()
def describe(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Attribute key to describe."),
) -> None:
    """Show everything known about one attribute."""
    state = get_state(ctx)
    descriptor = state.library.get(key)
    if descriptor is None:
        err_console.print(f"[red]Error:[/red] unknown BIOS attribute {escape(key)}")
        raise typer.Exit(code=1)

    if state.json_output:
        console.print(
            descriptor.model_dump_json(by_alias=True, indent=2),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return

    table = Table(title=escape(descriptor.label))
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Name", escape(descriptor.name))
    table.add_row("Display Name", escape(descriptor.display_name))
    table.add_row("Type", escape(descriptor.value_kind))
    table.add_row("Default", escape(format_scalar(descriptor.default_value)))
    table.add_row("Read Only", format_scalar(descriptor.read_only))
    if descriptor.help_text:
        table.add_row("Help", escape(descriptor.help_text))
    for choice in descriptor.choices:
        table.add_row(
            "Choice",
            escape(f"{choice.value_name} ({choice.value_display_name})"),
        )

    console.print(table)
