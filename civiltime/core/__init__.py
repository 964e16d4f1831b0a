"""Core civil types.

This module provides the three civil value types:
    - Date: Calendar date (year, month, day)
    - Time: Time of day with nanosecond precision
    - DateTime: A Date and a Time side by side
"""

from __future__ import annotations

from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Time",
]
