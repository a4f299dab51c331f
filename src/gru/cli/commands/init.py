"""Init command for writing a default configuration file."""

from __future__ import annotations

import structlog
import typer
from rich.console import Console
from rich.panel import Panel

from gru.core.config.models import (
    CONFIG_DIR,
    CONFIG_FILE,
    GruConfig,
)

console = Console()
logger = structlog.get_logger()


def init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration.",
    ),
) -> None:
    """Write a default configuration to ~/.config/gru/config.yaml."""
    logger.info("Initializing config", path=str(CONFIG_FILE))

    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    if CONFIG_FILE.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {CONFIG_FILE}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=1)

    CONFIG_FILE.write_text(GruConfig().to_yaml())

    console.print(
        Panel(
            f"[green]Configuration initialized successfully![/green]\n\n"
            f"Configuration created at: {CONFIG_FILE}\n\n"
            f"Set [bold]attribute_dirs[/bold] to add BIOS attribute documents\n"
            f"for other platform generations.",
            title="gru init",
            border_style="green",
        )
    )

    logger.info("Configuration initialized", config_file=str(CONFIG_FILE))
