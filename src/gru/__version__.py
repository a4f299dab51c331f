"""Version information for gru."""

__version__ = "0.3.0"
