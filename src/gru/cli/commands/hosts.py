"""Hosts command for checking which machines a command would target."""

from __future__ import annotations

import json

import structlog
import typer
from rich.console import Console

from gru.cli.context import get_state
from gru.cli.hosts import parse_hosts
from gru.exceptions import NoHostsError

console = Console()
err_console = Console(stderr=True)
logger = structlog.get_logger()


def hosts(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(
        None,
        metavar="[HOST]...",
        help="Target hosts. Ignored when hosts are piped on stdin.",
    ),
) -> None:
    """Print the resolved target hosts, one per line."""
    try:
        resolved = parse_hosts(args or [])
    except NoHostsError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    logger.info("Resolved hosts", count=len(resolved))
    if get_state(ctx).json_output:
        console.print(
            json.dumps(resolved, indent=2, ensure_ascii=False),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        return
    for host in resolved:
        console.print(host, markup=False, highlight=False, soft_wrap=True)
