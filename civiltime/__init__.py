"""Civiltime: civil dates and times without a timezone.

Civiltime provides date, time and date-time values that name a calendar
day or a wall-clock reading independent of any instant or location, with
canonical text and database serialization.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, nanosecond)
    DateTime: A Date and a Time side by side

Format Functions:
    parse_civil: Parse canonical text into a Date, Time, or DateTime
    format_civil: Format a civil value as canonical text

Exceptions:
    CivilError: Base exception
    FormatError: Text does not match the canonical form
    TypeMismatch: A database scan received an unsupported value

Instants and zones come from the whenever library: to_instant() returns a
whenever.ZonedDateTime, and the of() constructors accept whenever instants
as well as datetime.datetime values.

Example:
    >>> import whenever
    >>> from civiltime import Date, DateTime
    >>> today = Date.of(whenever.Instant.now(), "Europe/Amsterdam")
    >>> tomorrow = today.add_days(1)
    >>> tomorrow.days_since(today)
    1
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.time import Time

# Exceptions
from civiltime.errors import CivilError, FormatError, TypeMismatch

# Format functions
from civiltime.format import format_civil, parse_civil

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Time",
    # Exceptions
    "CivilError",
    "FormatError",
    "TypeMismatch",
    # Format functions
    "parse_civil",
    "format_civil",
]
