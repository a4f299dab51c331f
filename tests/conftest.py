"""Shared pytest fixtures for gru tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
import typer
from typer.testing import CliRunner

from gru.cli.main import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("GRU_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path) -> Generator[Path]:
    """Keep config and log files out of the real home directory."""
    config_dir = tmp_path / "config"
    log_dir = tmp_path / "state"
    with (
        patch("gru.core.config.models.CONFIG_DIR", config_dir),
        patch("gru.core.config.models.CONFIG_FILE", config_dir / "config.yaml"),
        patch("gru.cli.commands.init.CONFIG_DIR", config_dir),
        patch("gru.cli.commands.init.CONFIG_FILE", config_dir / "config.yaml"),
        patch("gru.logging.config.LOG_DIR", log_dir),
        patch("gru.logging.config.LOG_FILE", log_dir / "gru.log"),
    ):
        yield tmp_path


@pytest.fixture
def attribute_document() -> str:
    """A single well-formed attribute document."""
    return """{
  "AttributeName": "Temp1ThresholdCritical",
  "DefaultValue": 95,
  "DisplayName": "CPU1 Critical Temperature",
  "HelpText": "Critical temperature threshold for CPU1.",
  "ReadOnly": true,
  "Type": "Integer",
  "Value": []
}"""


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None]:
    """Remove handlers installed by configure_logging during a test."""
    import logging

    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)
