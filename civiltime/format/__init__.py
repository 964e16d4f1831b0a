"""Civil text formatting and parsing.

This module provides shape-dispatching helpers on top of the parse() and
format() methods of each civil type.

Functions:
    parse_civil: Parse canonical text into a Date, Time, or DateTime.
    format_civil: Format a Date, Time, or DateTime as canonical text.

Examples:
    >>> from civiltime.format import parse_civil
    >>> parse_civil("2014-08-20T15:04:05").time
    Time(15, 4, 5, nanosecond=0)
"""

from __future__ import annotations

from civiltime.format.text import CivilType, format_civil, parse_civil

__all__: list[str] = [
    "CivilType",
    "parse_civil",
    "format_civil",
]
