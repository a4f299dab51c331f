"""Core functionality for gru."""
