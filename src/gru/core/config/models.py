"""gru configuration models.

Configuration is read from ~/.config/gru/config.yaml when present, then
environment variables override individual values:

    GRU_JSON: Render results as JSON ("1", "true", "yes", "on")
    GRU_BIOS_GENERATION: Built-in attribute corpus to load (e.g. amd/epyc/rome)
    GRU_ATTRIBUTE_DIRS: Extra attribute directories, separated by os.pathsep
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

# XDG-compliant config location
CONFIG_DIR = Path.home() / ".config" / "gru"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

_TRUTHY = {"1", "true", "yes", "on"}


class GruConfig(BaseModel):
    """Complete gru configuration."""

    model_config = ConfigDict(extra="forbid")

    json_output: bool = False
    bios_generation: str = "amd/epyc/rome"
    attribute_dirs: list[str] = []
    column_width: int = 60

    @field_validator("attribute_dirs")
    @classmethod
    def expand_attribute_dirs(cls, v: list[str]) -> list[str]:
        """Expand ~ in attribute directory paths."""
        return [str(Path(d).expanduser()) for d in v]

    @field_validator("bios_generation")
    @classmethod
    def validate_bios_generation(cls, v: str) -> str:
        """Normalize the corpus path and reject empty values."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("bios_generation must not be empty")
        return v

    @field_validator("column_width")
    @classmethod
    def validate_column_width(cls, v: int) -> int:
        """Validate column width is positive."""
        if v <= 0:
            raise ValueError("column_width must be positive")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> GruConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.
        """
        config_dict = base_config.copy() if base_config else {}

        if (json_output := os.environ.get("GRU_JSON")) is not None:
            config_dict["json_output"] = json_output.strip().lower() in _TRUTHY

        if generation := os.environ.get("GRU_BIOS_GENERATION"):
            config_dict["bios_generation"] = generation

        if attribute_dirs := os.environ.get("GRU_ATTRIBUTE_DIRS"):
            config_dict["attribute_dirs"] = [d for d in attribute_dirs.split(os.pathsep) if d]

        return cls.model_validate(config_dict)

    def to_yaml(self) -> str:
        """Serialize the configuration as YAML."""
        return yaml.safe_dump(self.model_dump(), default_flow_style=False, sort_keys=False)


def load_config(path: Path | None = None) -> GruConfig:
    """Load configuration from a YAML file and the environment.

    Args:
        path: Config file to read. Defaults to CONFIG_FILE; a missing file
            yields the defaults.

    Returns:
        The validated configuration.
    """
    config_path = path if path is not None else CONFIG_FILE
    base: dict[str, Any] = {}
    if config_path.exists():
        loaded = yaml.safe_load(config_path.read_text()) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{config_path} must contain a mapping")
        base = loaded
    return GruConfig.from_env(base)
