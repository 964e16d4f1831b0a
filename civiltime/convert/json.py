"""JSON serialization and deserialization for civil objects.

This module provides functions for converting civil objects to and from
JSON-serializable dictionaries.

Functions:
    to_json: Convert a civil object to a JSON-serializable dict.
    from_json: Create a civil object from a JSON dict.

The JSON format uses the canonical text with a type tag for polymorphic
deserialization:

    {"_type": "DateTime", "value": "2014-08-20T15:04:05.999000000"}
    {"_type": "Date", "value": "2014-08-20"}
    {"_type": "Time", "value": "15:04:05"}

Examples:
    >>> from civiltime import Date
    >>> from civiltime.convert import to_json, from_json

    >>> data = to_json(Date(2014, 8, 20))
    >>> data["_type"]
    'Date'
    >>> from_json(data) == Date(2014, 8, 20)
    True
"""

from __future__ import annotations

from typing import Any

from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.time import Time
from civiltime.errors import FormatError
from civiltime.format.text import CivilType

_TYPES: dict[str, type[Date] | type[Time] | type[DateTime]] = {
    "Date": Date,
    "Time": Time,
    "DateTime": DateTime,
}


def to_json(value: CivilType) -> dict[str, Any]:
    """Convert a civil object to a JSON-serializable dictionary.

    Args:
        value: A Date, Time, or DateTime.

    Returns:
        A dictionary with `_type` and `value` fields.

    Raises:
        TypeError: If value is not a civil type.

    Examples:
        >>> to_json(Time(15, 4, 5))
        {'_type': 'Time', 'value': '15:04:05'}
    """
    for name, cls in _TYPES.items():
        if isinstance(value, cls):
            return {"_type": name, "value": value.format()}
    raise TypeError(
        f"expected Date, Time, or DateTime, got {type(value).__name__}"
    )


def from_json(data: dict[str, Any]) -> CivilType:
    """Create a civil object from a JSON dictionary.

    Args:
        data: A dictionary with `_type` and `value` fields.

    Returns:
        A Date, Time, or DateTime based on the `_type` field.

    Raises:
        FormatError: If the data is not a dict, misses a field, or the
            value is malformed.
        TypeError: If `_type` is not a civil type name.

    Examples:
        >>> from_json({"_type": "Date", "value": "2014-08-20"})
        Date(2014, 8, 20)
    """
    if not isinstance(data, dict):
        raise FormatError(repr(data), "JSON object")

    type_name = data.get("_type")
    if not type_name:
        raise FormatError(repr(data), "JSON object with '_type'")

    cls = _TYPES.get(type_name)
    if cls is None:
        raise TypeError(f"unknown civil type: {type_name!r}")

    value = data.get("value")
    if not isinstance(value, str):
        raise FormatError(repr(data), f"JSON {type_name} with 'value'")
    return cls.parse(value)


__all__ = ["to_json", "from_json"]
