"""Unit tests for the tagged result model."""

from __future__ import annotations

import pytest

from gru.query.results import (
    MappingValue,
    ResultRecord,
    ScalarValue,
    StringListValue,
    result_set_from_mapping,
    tag_value,
)


@pytest.mark.unit
class TestTagValue:
    """Tests for tag_value."""

    def test_dict_becomes_mapping(self) -> None:
        value = tag_value({"Rome0039": "Auto"})
        assert isinstance(value, MappingValue)
        assert value.kind == "mapping"

    @pytest.mark.parametrize("items", [["Pxe", "Hdd"], ("Pxe",), []])
    def test_string_sequences_become_lists(self, items: list[str] | tuple[str, ...]) -> None:
        value = tag_value(items)
        assert isinstance(value, StringListValue)
        assert value.kind == "list"
        assert value.items == tuple(items)

    @pytest.mark.parametrize("raw", ["On", 3, 2.5, True, None, [1, 2]])
    def test_everything_else_is_scalar(self, raw: object) -> None:
        value = tag_value(raw)
        assert isinstance(value, ScalarValue)
        assert value.kind == "scalar"
        assert value.value == raw

    def test_tagged_values_pass_through(self) -> None:
        value = StringListValue(items=("Pxe",))
        assert tag_value(value) is value


@pytest.mark.unit
class TestEmptiness:
    """Tests for is_empty on each value kind."""

    @pytest.mark.parametrize(
        ("raw", "empty"), [(None, True), ("", True), (0, False), (False, False)]
    )
    def test_scalar(self, raw: object, empty: bool) -> None:
        assert ScalarValue(raw).is_empty() is empty

    def test_empty_list_is_not_empty(self) -> None:
        assert StringListValue().is_empty() is False

    def test_mapping(self) -> None:
        assert MappingValue().is_empty() is True
        assert MappingValue({"a": 1}).is_empty() is False


@pytest.mark.unit
class TestResultRecord:
    """Tests for ResultRecord."""

    def test_from_mapping_keeps_field_order(self) -> None:
        record = ResultRecord.from_mapping({"b": 1, "a": 2, "c": 3})
        assert list(record.fields) == ["b", "a", "c"]

    def test_to_dict_round_trip(self) -> None:
        data = {"PowerState": "On", "BootOrder": ["Pxe"], "Attributes": {"k": 1}, "Note": None}
        assert ResultRecord.from_mapping(data).to_dict() == data

    def test_set_tags_values(self) -> None:
        record = ResultRecord()
        record.set("BootOrder", ["Pxe"])
        assert isinstance(record["BootOrder"], StringListValue)
        assert "BootOrder" in record
        assert len(record) == 1

    def test_mapping_value_copies_input(self) -> None:
        entries = {"k": 1}
        record = ResultRecord.from_mapping({"Attributes": entries})
        entries["k"] = 2
        assert record.to_dict() == {"Attributes": {"k": 1}}


@pytest.mark.unit
def test_result_set_from_mapping() -> None:
    results = result_set_from_mapping({"host-a": {"PowerState": "On"}})
    assert set(results) == {"host-a"}
    assert results["host-a"].to_dict() == {"PowerState": "On"}
