"""Canonical text formatting and parsing for any civil type.

Functions:
    parse_civil: Parse text into a Date, Time, or DateTime by its shape.
    format_civil: Format a Date, Time, or DateTime as canonical text.

Shapes:
    - YYYY-MM-DD -> Date
    - HH:MM:SS[.fffffffff] -> Time
    - YYYY-MM-DDTHH:MM:SS[.fffffffff] (T or t) -> DateTime

Examples:
    >>> from civiltime.format import parse_civil, format_civil
    >>> parse_civil("2014-08-20")
    Date(2014, 8, 20)
    >>> format_civil(parse_civil("2014-08-20t15:04:05"))
    '2014-08-20T15:04:05'
"""

from __future__ import annotations

from typing import Union

from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.time import Time
from civiltime.errors import FormatError

# Type alias for civil objects
CivilType = Union[Date, Time, DateTime]

# Canonical forms have a fixed length for the date part
_DATE_LENGTH = len("YYYY-MM-DD")


def parse_civil(s: str) -> CivilType:
    """Parse canonical text into the civil type its shape names.

    Args:
        s: The text to parse.

    Returns:
        A Date, Time, or DateTime.

    Raises:
        FormatError: If s matches none of the canonical forms.

    Detection rules:
        - Longer than a date, with T or t after it -> DateTime
        - Contains '-' -> Date
        - Otherwise -> Time

    Examples:
        >>> parse_civil("15:04:05.999")
        Time(15, 4, 5, nanosecond=999000000)
    """
    if len(s) > _DATE_LENGTH and s[_DATE_LENGTH] in "Tt":
        return DateTime.parse(s)
    if "-" in s:
        return Date.parse(s)
    if ":" in s:
        return Time.parse(s)
    raise FormatError(s, "Date, Time, or DateTime")


def format_civil(value: CivilType) -> str:
    """Format a civil value as canonical text.

    Raises:
        TypeError: If value is not a Date, Time, or DateTime.

    Examples:
        >>> format_civil(Time(15, 4, 5))
        '15:04:05'
    """
    if isinstance(value, (Date, Time, DateTime)):
        return value.format()
    raise TypeError(
        f"expected Date, Time, or DateTime, got {type(value).__name__}"
    )


__all__ = ["CivilType", "parse_civil", "format_civil"]
