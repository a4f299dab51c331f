"""Show command for rendering saved query results."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from gru.cli.context import get_state
from gru.cli.output import render
from gru.query.results import result_set_from_mapping

err_console = Console(stderr=True)
logger = structlog.get_logger()


def _read_results(source: str) -> dict[str, Any]:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text()
    data = json.loads(text)
    if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
        raise ValueError("results must map each host to an object of fields")
    return data


def show(
    ctx: typer.Context,
    source: str = typer.Argument(
        ...,
        help="JSON file of results keyed by host, or '-' for stdin.",
    ),
) -> None:
    """Render saved per-host results as text or JSON.

    BIOS attribute keys in mapping fields are shown with their display names.
    """
    state = get_state(ctx)
    try:
        data = _read_results(source)
    except (OSError, ValueError) as e:
        err_console.print(
            f"[red]Error:[/red] could not read results from {escape(source)}: {escape(str(e))}"
        )
        raise typer.Exit(code=1) from e

    logger.info("Rendering saved results", source=source, hosts=len(data))
    results = result_set_from_mapping(data)
    render(
        results,
        state.json_output,
        decode=state.library.decode,
        width=state.config.column_width,
    )
