"""Internal constants for civiltime.

These constants define the fixed reference points and unit conversions
used throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

from typing import Literal

# Time unit conversions
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000
NANOS_PER_MICROSECOND: int = 1_000

# The Gregorian calendar repeats every 400 years, which is exactly
# 146097 days. Fields are shifted by whole cycles to stay inside the
# years whenever can represent.
YEARS_PER_CYCLE: int = 400
DAYS_PER_CYCLE: int = 146_097
CYCLE_BASE_YEAR: int = 2000

FRACTION_DIGITS: int = 9

# Zone used for validity checks, day arithmetic and DateTime ordering
REFERENCE_ZONE: str = "UTC"

# Wall-clock resolution policy handed to whenever.ZonedDateTime.
# Skipped times take the offset after the transition, repeated times
# take the earlier occurrence.
DISAMBIGUATE: Literal["earlier"] = "earlier"

# Non-degenerate date used to check a Time's validity
TIME_CHECK_DATE: tuple[int, int, int] = (2, 2, 2)


__all__ = [
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "NANOS_PER_MICROSECOND",
    "YEARS_PER_CYCLE",
    "DAYS_PER_CYCLE",
    "CYCLE_BASE_YEAR",
    "FRACTION_DIGITS",
    "REFERENCE_ZONE",
    "DISAMBIGUATE",
    "TIME_CHECK_DATE",
]
