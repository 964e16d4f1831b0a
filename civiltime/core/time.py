"""Time class representing a civil time of day.

This module provides the Time class for representing time-of-day values
with nanosecond precision and no timezone.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import sqlite3

import whenever

from civiltime._internal.constants import (
    NANOS_PER_MICROSECOND,
    REFERENCE_ZONE,
    TIME_CHECK_DATE,
)
from civiltime._internal.instant import (
    INSTANT_TYPES,
    InstantLike,
    decompose,
    recompose,
)
from civiltime._internal.text import (
    TIME_PATTERN,
    as_text,
    compile_pattern,
    fraction_to_nanos,
)
from civiltime.errors import FormatError, TypeMismatch

logger = logging.getLogger(__name__)

_TIME_RE = compile_pattern(TIME_PATTERN)

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


class Time:
    """A civil time of day with nanosecond precision.

    Time carries no date or location, so it does not describe a unique
    moment. It exists mostly to represent TIME columns in storage APIs;
    prefer DateTime for anything that needs arithmetic.

    As with Date, fields are not checked on construction. Use is_valid()
    to find out whether the fields name a real time of day.

    Attributes:
        hour: The hour of the day in 24-hour format (0-23).
        minute: The minute of the hour (0-59).
        second: The second of the minute (0-59).
        nanosecond: The nanosecond of the second (0-999999999).

    Examples:
        >>> t = Time(15, 4, 5, nanosecond=999_000_000)
        >>> str(t)
        '15:04:05.999000000'

        >>> str(Time(15, 4, 5))
        '15:04:05'
    """

    __slots__ = ("_hour", "_minute", "_second", "_nanosecond")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        *,
        nanosecond: int = 0,
    ) -> None:
        self._hour = hour
        self._minute = minute
        self._second = second
        self._nanosecond = nanosecond

    @classmethod
    def of(cls, instant: InstantLike, zone: str | None = None) -> Time:
        """Return the wall-clock time of an instant, ignoring the date.

        Args:
            instant: A whenever instant or a datetime.datetime.
            zone: IANA zone to read the instant in. None uses the
                instant's own zone.

        Examples:
            >>> import whenever
            >>> Time.of(whenever.Instant.from_utc(2014, 8, 20, 15, 4, 5))
            Time(15, 4, 5, nanosecond=0)
        """
        *_, hour, minute, second, nanosecond = decompose(instant, zone)
        return cls(hour, minute, second, nanosecond=nanosecond)

    @classmethod
    def parse(cls, s: str) -> Time:
        """Parse a time of the form HH:MM:SS[.fffffffff].

        This is RFC 3339 partial-time extended to allow one to nine
        fractional digits. A short fraction is right-padded with zeros.

        Raises:
            FormatError: If s does not have that shape.

        Examples:
            >>> Time.parse("15:04:05.999")
            Time(15, 4, 5, nanosecond=999000000)
        """
        match = _TIME_RE.fullmatch(s)
        if not match:
            raise FormatError(s, "Time")
        hour, minute, second, fraction = match.groups()
        return cls(
            int(hour),
            int(minute),
            int(second),
            nanosecond=fraction_to_nanos(fraction),
        )

    @classmethod
    def unmarshal_text(cls, data: str | bytes) -> Time:
        """Decode the text produced by marshal_text()."""
        return cls.parse(as_text(data))

    @property
    def hour(self) -> int:
        """Return the hour component."""
        return self._hour

    @property
    def minute(self) -> int:
        """Return the minute component."""
        return self._minute

    @property
    def second(self) -> int:
        """Return the second component."""
        return self._second

    @property
    def nanosecond(self) -> int:
        """Return the nanosecond component."""
        return self._nanosecond

    def format(self) -> str:
        """Return the time as HH:MM:SS or HH:MM:SS.fffffffff.

        The fraction is left out when nanosecond is 0 and otherwise always
        has nine digits.

        Examples:
            >>> Time(15, 4, 5).format()
            '15:04:05'
            >>> Time(15, 4, 5, nanosecond=1).format()
            '15:04:05.000000001'
        """
        s = f"{self._hour:02d}:{self._minute:02d}:{self._second:02d}"
        if self._nanosecond == 0:
            return s
        return f"{s}.{self._nanosecond:09d}"

    def marshal_text(self) -> bytes:
        """Return format() encoded as bytes."""
        return self.format().encode("ascii")

    def is_valid(self) -> bool:
        """Report whether the fields name a real time of day.

        The time is placed on a fixed date well away from any range limit,
        recomposed at UTC and read back; it is valid when nothing carried.
        """
        try:
            instant = recompose(
                *TIME_CHECK_DATE,
                self._hour,
                self._minute,
                self._second,
                self._nanosecond,
                zone=REFERENCE_ZONE,
            )
        except (ValueError, OverflowError):
            return False
        return Time.of(instant) == self

    def before(self, other: Time) -> bool:
        """Report whether this time occurs before other."""
        return self._key() < other._key()

    def after(self, other: Time) -> bool:
        """Report whether this time occurs after other."""
        return other.before(self)

    def compare(self, other: Time) -> int:
        """Compare with other.

        Returns:
            -1 if this time is before other, +1 if after, otherwise 0.
        """
        if self.before(other):
            return -1
        if self.after(other):
            return 1
        return 0

    def is_zero(self) -> bool:
        """Report whether every field is 0."""
        return (
            self._hour == 0
            and self._minute == 0
            and self._second == 0
            and self._nanosecond == 0
        )

    def value(self) -> str:
        """Return the value stored in a database column."""
        return self.format()

    def scan(self, src: object) -> Time:
        """Convert a value read from a database into a Time.

        Accepted sources:
            - None: an absent value; this Time is returned unchanged.
            - an instant (whenever types or datetime.datetime): its
              wall-clock time in its own zone.
            - str, bytes, bytearray or memoryview: parsed with parse().
            - Time, datetime.time or whenever.Time: fields copied.

        Unlike Date.scan(), None does not reset the value.

        Raises:
            FormatError: If a text source is malformed.
            TypeMismatch: If src is of any other kind.

        Examples:
            >>> Time(1, 2, 3).scan(None)
            Time(1, 2, 3, nanosecond=0)
            >>> Time().scan(b"15:04:05")
            Time(15, 4, 5, nanosecond=0)
        """
        if src is None:
            return self
        if isinstance(src, INSTANT_TYPES):
            return Time.of(src)
        if isinstance(src, _TEXT_TYPES):
            return Time.parse(as_text(src))
        if isinstance(src, (Time, whenever.Time)):
            return Time(src.hour, src.minute, src.second, nanosecond=src.nanosecond)
        if isinstance(src, _datetime.time):
            return Time(
                src.hour,
                src.minute,
                src.second,
                nanosecond=src.microsecond * NANOS_PER_MICROSECOND,
            )
        logger.debug("cannot scan %s into Time: %r", type(src).__name__, src)
        raise TypeMismatch(type(src), "Time")

    def __conform__(self, protocol: object) -> str | None:
        """Adapt to sqlite3 by storing the canonical text."""
        if protocol is sqlite3.PrepareProtocol:
            return self.value()
        return None

    def _key(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._nanosecond)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return not self.before(other)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Time(15, 4, 5, nanosecond=0)'.
        """
        return (
            f"Time({self._hour}, {self._minute}, {self._second}, "
            f"nanosecond={self._nanosecond})"
        )

    def __str__(self) -> str:
        return self.format()


__all__ = ["Time"]
