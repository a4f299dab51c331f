"""Configuration management with Pydantic validation."""

from gru.core.config.models import (
    CONFIG_DIR,
    CONFIG_FILE,
    GruConfig,
    load_config,
)

__all__ = [
    "CONFIG_DIR",
    "CONFIG_FILE",
    "GruConfig",
    "load_config",
]
