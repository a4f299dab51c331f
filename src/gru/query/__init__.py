"""Query result model shared by every command family."""

from gru.query.results import (
    MappingValue,
    ResultRecord,
    ResultSet,
    ResultValue,
    ScalarValue,
    StringListValue,
    result_set_from_mapping,
    tag_value,
)

__all__ = [
    "MappingValue",
    "ResultRecord",
    "ResultSet",
    "ResultValue",
    "ScalarValue",
    "StringListValue",
    "result_set_from_mapping",
    "tag_value",
]
