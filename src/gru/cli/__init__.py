"""Command line interface for gru."""
