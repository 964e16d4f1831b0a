"""Civil conversion utilities.

This module provides functions and types for converting civil objects to
and from other representations:
    - JSON serialization and deserialization
    - SQLAlchemy column types storing canonical text

Examples:
    >>> from civiltime import DateTime
    >>> from civiltime.convert import to_json, from_json

    >>> dt = DateTime.parse("2014-08-20T15:04:05")
    >>> from_json(to_json(dt)) == dt
    True
"""

from __future__ import annotations

from civiltime.convert.json import from_json, to_json
from civiltime.convert.sql import CivilDate, CivilDateTime, CivilTime

__all__ = [
    # JSON
    "to_json",
    "from_json",
    # SQLAlchemy
    "CivilDate",
    "CivilTime",
    "CivilDateTime",
]
