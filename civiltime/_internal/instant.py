"""Bridge between civil fields and absolute instants.

All conversion between wall-clock fields and instants goes through
whenever. Nothing here does calendar math beyond carrying out-of-range
fields into the next larger unit and shifting years by whole 400-year
Gregorian cycles; day arithmetic and zone resolution are left to whenever.
This module is not part of the public API.
"""

from __future__ import annotations

import datetime as _datetime
from typing import Union
from zoneinfo import ZoneInfo

import whenever

from civiltime._internal.constants import (
    CYCLE_BASE_YEAR,
    DAYS_PER_CYCLE,
    DISAMBIGUATE,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    REFERENCE_ZONE,
    YEARS_PER_CYCLE,
)

# Anything that denotes an absolute point in time. A bare datetime.datetime
# is accepted because that is what database drivers return.
InstantLike = Union[
    whenever.Instant,
    whenever.ZonedDateTime,
    whenever.OffsetDateTime,
    _datetime.datetime,
]

INSTANT_TYPES: tuple[type, ...] = tuple(
    cls
    for cls in (
        whenever.Instant,
        whenever.ZonedDateTime,
        whenever.OffsetDateTime,
        # Only present in whenever releases before 0.9
        getattr(whenever, "SystemDateTime", None),
        _datetime.datetime,
    )
    if cls is not None
)

# (year, month, day, hour, minute, second, nanosecond)
WallClock = tuple[int, int, int, int, int, int, int]


def decompose(instant: InstantLike, zone: str | None = None) -> WallClock:
    """Read the wall-clock fields of an instant.

    Args:
        instant: The instant to decompose.
        zone: IANA zone to view the instant in. None keeps the instant's
            own zone; a whenever.Instant has none and is read in UTC.

    Returns:
        The seven wall-clock fields.

    Raises:
        TypeError: If instant is not an instant type.
    """
    if isinstance(instant, _datetime.datetime):
        if zone is not None:
            instant = instant.astimezone(ZoneInfo(zone))
        return (
            instant.year,
            instant.month,
            instant.day,
            instant.hour,
            instant.minute,
            instant.second,
            instant.microsecond * NANOS_PER_MICROSECOND,
        )

    if isinstance(instant, whenever.Instant):
        local = instant.to_tz(zone or REFERENCE_ZONE)
    elif isinstance(instant, INSTANT_TYPES):
        local = instant if zone is None else instant.to_tz(zone)
    else:
        raise TypeError(f"expected an instant, got {type(instant).__name__}")

    return (
        local.year,
        local.month,
        local.day,
        local.hour,
        local.minute,
        local.second,
        local.nanosecond,
    )


def _cycles_from_base(year: int) -> int:
    return (year - CYCLE_BASE_YEAR) // YEARS_PER_CYCLE


def normalize(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
) -> WallClock:
    """Carry out-of-range fields into the next larger unit.

    Months carry into years first. Everything from nanoseconds up to days
    is then folded into a day offset from the first of the month, which
    whenever applies. The year is moved near CYCLE_BASE_YEAR by whole
    400-year cycles while whenever does the day arithmetic and moved back
    afterwards, so any integer fields can be normalized.

    Examples:
        >>> normalize(2023, 2, 30)
        (2023, 3, 2, 0, 0, 0, 0)
        >>> normalize(2023, 13, 1, 24)
        (2024, 1, 2, 0, 0, 0, 0)
        >>> normalize(0, 0, 0)
        (-1, 11, 30, 0, 0, 0, 0)
    """
    carry, month_index = divmod(month - 1, 12)
    year += carry

    nanos = (
        (day - 1) * NANOS_PER_DAY
        + hour * NANOS_PER_HOUR
        + minute * NANOS_PER_MINUTE
        + second * NANOS_PER_SECOND
        + nanosecond
    )
    days, nanos = divmod(nanos, NANOS_PER_DAY)
    day_cycles, days = divmod(days, DAYS_PER_CYCLE)

    cycles = _cycles_from_base(year)
    first = whenever.Date(year - cycles * YEARS_PER_CYCLE, month_index + 1, 1)
    date = first.add(days=days) if days else first
    cycles += day_cycles

    hour, nanos = divmod(nanos, NANOS_PER_HOUR)
    minute, nanos = divmod(nanos, NANOS_PER_MINUTE)
    second, nanos = divmod(nanos, NANOS_PER_SECOND)
    return (
        date.year + cycles * YEARS_PER_CYCLE,
        date.month,
        date.day,
        hour,
        minute,
        second,
        nanos,
    )


def epoch_nanos(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
) -> int:
    """Return nanoseconds since the Unix epoch for wall-clock fields at UTC.

    Unlike recompose(), this never fails: fields are normalized, the year
    is shifted into whenever's range by whole cycles, and each cycle
    shifted is added back as exactly DAYS_PER_CYCLE days.

    Examples:
        >>> epoch_nanos(1970, 1, 2)
        86400000000000
    """
    y, mo, d, h, mi, s, ns = normalize(
        year, month, day, hour, minute, second, nanosecond
    )
    cycles = _cycles_from_base(y)
    instant = whenever.Instant.from_utc(
        y - cycles * YEARS_PER_CYCLE, mo, d, h, mi, s, nanosecond=ns
    )
    return instant.timestamp_nanos() + cycles * DAYS_PER_CYCLE * NANOS_PER_DAY


def recompose(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
    *,
    zone: str = REFERENCE_ZONE,
) -> whenever.ZonedDateTime:
    """Build the instant for wall-clock fields in a zone.

    Out-of-range fields are normalized first. Skipped or repeated wall-clock
    times are resolved by whenever with the DISAMBIGUATE policy.

    Raises:
        ValueError: If the normalized year is outside whenever's range.
        zoneinfo.ZoneInfoNotFoundError: If the zone is unknown.
    """
    y, mo, d, h, mi, s, ns = normalize(
        year, month, day, hour, minute, second, nanosecond
    )
    return whenever.ZonedDateTime(
        y, mo, d, h, mi, s, nanosecond=ns, tz=zone, disambiguate=DISAMBIGUATE
    )


__all__ = [
    "INSTANT_TYPES",
    "InstantLike",
    "WallClock",
    "decompose",
    "epoch_nanos",
    "normalize",
    "recompose",
]
