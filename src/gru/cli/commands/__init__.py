"""gru CLI commands."""
