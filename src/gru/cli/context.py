"""Shared state passed from the root callback to every command."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NoReturn

import structlog
import typer
import yaml
from rich.console import Console
from rich.markup import escape

from gru.bios.attributes import AttributeLibrary
from gru.core.config.models import GruConfig, load_config
from gru.exceptions import AttributeParseError, AttributeSourceNotFoundError, GruError

err_console = Console(stderr=True)
logger = structlog.get_logger()


def _fail(error: GruError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise typer.Exit(code=1) from error


@dataclass
class CliState:
    """Lazily loaded configuration and BIOS attributes.

    Nothing is read from disk until a command asks for it, so commands that
    do not need the configuration still run when the file is broken.
    """

    json_override: bool | None = None
    _config: GruConfig | None = field(default=None, init=False, repr=False)
    _library: AttributeLibrary | None = field(default=None, init=False, repr=False)

    @property
    def config(self) -> GruConfig:
        """The configuration file with environment and ``--json`` overrides applied."""
        if self._config is None:
            try:
                config = load_config()
            except (ValueError, yaml.YAMLError) as e:
                err_console.print(f"[red]Error:[/red] invalid configuration: {escape(str(e))}")
                raise typer.Exit(code=1) from e
            if self.json_override is not None:
                config = config.model_copy(update={"json_output": self.json_override})
            self._config = config
        return self._config

    @property
    def json_output(self) -> bool:
        return self.config.json_output

    @property
    def library(self) -> AttributeLibrary:
        """The built-in attribute corpus extended with configured directories.

        A broken built-in document is a packaging bug and propagates. An unknown
        generation or a missing or broken user directory ends the command with
        an error.
        """
        if self._library is None:
            try:
                library = AttributeLibrary.from_package(self.config.bios_generation)
            except AttributeSourceNotFoundError as e:
                _fail(e)
            for directory in self.config.attribute_dirs:
                try:
                    library.load_directory(directory)
                except (AttributeParseError, AttributeSourceNotFoundError) as e:
                    _fail(e)
            logger.info(
                "BIOS attribute library ready",
                generation=self.config.bios_generation,
                attributes=len(library),
            )
            self._library = library
        return self._library


def get_state(ctx: typer.Context) -> CliState:
    """Return the CliState stored by the root callback, creating a default one."""
    root = ctx.find_root()
    if not isinstance(root.obj, CliState):
        root.obj = CliState()
    return root.obj
