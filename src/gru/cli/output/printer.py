"""Render per-host query results to standard output.

Results are either dumped as indented JSON or printed as a plain text report.
Each host is a section header; its fields are indented one tab, and the
entries of list and mapping fields two tabs, padded to fixed-width columns.

Hosts are sorted; fields keep the order the query produced them in. Mapping
keys are passed through a decode hook so BIOS attribute keys can be shown
with their display names.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Mapping
from typing import Any, TextIO

import structlog

from gru.exceptions import RenderError
from gru.query.results import MappingValue, ResultRecord, ScalarValue, StringListValue

logger = structlog.get_logger()

COLUMN_WIDTH = 60

Decoder = Callable[[str, bool], str]


def identity_decode(key: str, json_mode: bool) -> str:
    """Decode hook that leaves every key unchanged."""
    return key


def format_scalar(value: Any) -> str:
    """Format a scalar the way it appears in JSON, without quoting strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _decoded_entries(
    entries: Mapping[str, Any], decode: Decoder, json_mode: bool
) -> list[tuple[str, Any]]:
    """Return ``(decoded key, value)`` pairs, keeping entries whose keys decode alike."""
    return [(decode(key, json_mode), value) for key, value in entries.items()]


def to_json(results: Mapping[str, ResultRecord], decode: Decoder = identity_decode) -> str:
    """Serialize results as two-space indented JSON.

    Hosts and fields keep their insertion order.

    Raises:
        RenderError: If a value is not JSON-serializable.
    """
    content: dict[str, dict[str, Any]] = {}
    for host, record in results.items():
        plain: dict[str, Any] = {}
        for name, value in record.fields.items():
            if isinstance(value, MappingValue):
                plain[name] = dict(_decoded_entries(value.entries, decode, True))
            else:
                plain[name] = value.to_plain()
        content[host] = plain

    try:
        return json.dumps(content, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise RenderError(f"could not create valid JSON from {content!r}", original_error=e) from e


def to_text(
    results: Mapping[str, ResultRecord],
    decode: Decoder = identity_decode,
    width: int = COLUMN_WIDTH,
) -> str:
    """Format results as a sorted, column-aligned text report."""
    lines: list[str] = []
    for host in sorted(results):
        lines.append(f"{host}:")
        for name, value in results[host].fields.items():
            if value.is_empty():
                continue

            if isinstance(value, MappingValue):
                lines.append(f"\t{name}:")
                entries = _decoded_entries(value.entries, decode, False)
                for key, entry in sorted(entries, key=lambda pair: pair[0]):
                    lines.append(f"\t\t{key:<{width}}: {format_scalar(entry):<{width}}")
            elif isinstance(value, StringListValue):
                lines.append(f"\t{name}:")
                for item in value.items:
                    lines.append(f"\t\t{item:<{width}}")
            elif isinstance(value, ScalarValue):
                lines.append(f"\t{name:<{width}}: {format_scalar(value.value):<{width}}")
            else:
                raise RenderError(f"unsupported value for field {name}: {value!r}")
    return "".join(f"{line}\n" for line in lines)


def render(
    results: Mapping[str, ResultRecord],
    json_mode: bool,
    decode: Decoder = identity_decode,
    stream: TextIO | None = None,
    width: int = COLUMN_WIDTH,
) -> str:
    """Write results to ``stream`` (stdout by default) and return the text.

    Args:
        results: Query result per host.
        json_mode: Emit JSON instead of the text report.
        decode: Hook translating mapping keys, called as
            ``decode(key, json_mode)``.
        stream: Destination stream.
        width: Column width of the text report.

    Raises:
        RenderError: If JSON serialization fails.
    """
    logger.debug("Rendering results", hosts=len(results), json=json_mode)
    if json_mode:
        text = to_json(results, decode) + "\n"
    else:
        text = to_text(results, decode, width)

    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.flush()
    return text
