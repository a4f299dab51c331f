"""Centralized CLI output utilities.

Every command that queries hosts hands its results to ``render`` so the
JSON and text forms stay consistent across command families.

Usage:
    from gru.cli.output import render

    render(results, json_mode=False, decode=library.decode)
"""

from gru.cli.output.printer import (
    COLUMN_WIDTH,
    format_scalar,
    identity_decode,
    render,
    to_json,
    to_text,
)

__all__ = [
    "COLUMN_WIDTH",
    "format_scalar",
    "identity_decode",
    "render",
    "to_json",
    "to_text",
]
