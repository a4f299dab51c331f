"""Logging configuration for gru."""

from gru.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
