"""Tagged result values produced by host queries.

Every command family (power status, boot configuration, BIOS attributes)
returns one ResultRecord per host. A record is an ordered set of named fields
whose values are one of three shapes, each carrying an explicit ``kind`` tag
so printers can dispatch without inspecting the payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

ValueKind = Literal["scalar", "list", "mapping"]


@dataclass(frozen=True)
class ScalarValue:
    """A single value: string, number, boolean or None."""

    value: Any = None

    kind: ClassVar[ValueKind] = "scalar"

    def is_empty(self) -> bool:
        return self.value is None or self.value == ""

    def to_plain(self) -> Any:
        return self.value


@dataclass(frozen=True)
class StringListValue:
    """An ordered sequence of strings, e.g. a boot order."""

    items: tuple[str, ...] = ()

    kind: ClassVar[ValueKind] = "list"

    def is_empty(self) -> bool:
        # An empty list still renders its header.
        return False

    def to_plain(self) -> list[str]:
        return list(self.items)


@dataclass(frozen=True)
class MappingValue:
    """A flat mapping of string keys to scalars, e.g. BIOS attributes."""

    entries: Mapping[str, Any] = field(default_factory=dict)

    kind: ClassVar[ValueKind] = "mapping"

    def is_empty(self) -> bool:
        return not self.entries

    def to_plain(self) -> dict[str, Any]:
        return dict(self.entries)


ResultValue = ScalarValue | StringListValue | MappingValue


def tag_value(value: Any) -> ResultValue:
    """Wrap a plain value in the matching tagged value.

    Dicts become MappingValue, lists and tuples of strings become
    StringListValue and anything else is a ScalarValue.
    """
    if isinstance(value, ScalarValue | StringListValue | MappingValue):
        return value
    if isinstance(value, Mapping):
        return MappingValue(entries=dict(value))
    if isinstance(value, list | tuple) and all(isinstance(item, str) for item in value):
        return StringListValue(items=tuple(value))
    return ScalarValue(value=value)


@dataclass
class ResultRecord:
    """The result of one query against one host.

    Field order is insertion order and is preserved by every printer.
    """

    fields: dict[str, ResultValue] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ResultRecord:
        """Build a record from plain data, tagging each value."""
        return cls(fields={name: tag_value(value) for name, value in data.items()})

    def set(self, name: str, value: Any) -> None:
        """Set a field, tagging plain values."""
        self.fields[name] = tag_value(value)

    def to_dict(self) -> dict[str, Any]:
        """Return the record as plain JSON-ready data."""
        return {name: value.to_plain() for name, value in self.fields.items()}

    def __getitem__(self, name: str) -> ResultValue:
        return self.fields[name]

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def __len__(self) -> int:
        return len(self.fields)


ResultSet = Mapping[str, ResultRecord]


def result_set_from_mapping(data: Mapping[str, Mapping[str, Any]]) -> dict[str, ResultRecord]:
    """Build a result set from plain ``{host: {field: value}}`` data."""
    return {host: ResultRecord.from_mapping(record) for host, record in data.items()}
