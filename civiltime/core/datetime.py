"""DateTime class combining a civil date and a civil time.

This module provides the DateTime class. A DateTime holds a Date and a
Time side by side rather than extending either, so Date-only operations
such as add_days() are not exposed on it.
"""

from __future__ import annotations

import logging
import sqlite3

import whenever

from civiltime._internal.constants import REFERENCE_ZONE
from civiltime._internal.instant import (
    INSTANT_TYPES,
    InstantLike,
    decompose,
    epoch_nanos,
    recompose,
)
from civiltime._internal.text import (
    DATE_PATTERN,
    TIME_PATTERN,
    as_text,
    compile_pattern,
    fraction_to_nanos,
)
from civiltime.core.date import Date
from civiltime.core.time import Time
from civiltime.errors import FormatError, TypeMismatch

logger = logging.getLogger(__name__)

# Upper-case separator is tried first
_DATETIME_RES = tuple(
    compile_pattern(DATE_PATTERN + separator + TIME_PATTERN)
    for separator in ("T", "t")
)

_TEXT_TYPES = (str, bytes, bytearray, memoryview)

# whenever renamed LocalDateTime to PlainDateTime in 0.8
_PLAIN_DATETIME_TYPES: tuple[type, ...] = tuple(
    cls
    for cls in (
        getattr(whenever, "PlainDateTime", None),
        getattr(whenever, "LocalDateTime", None),
    )
    if cls is not None
)


class DateTime:
    """A civil date and time of day.

    DateTime carries no location, so it does not describe a unique moment.
    Use to_instant() to pin it to a zone.

    Equality is field by field. Ordering is defined on the instants the
    values denote in UTC, so out-of-range fields are normalized before
    comparing. Any two values can be ordered, including the zero value,
    whose year lies outside what to_instant() can represent.

    Attributes:
        date: The Date part.
        time: The Time part.

    Examples:
        >>> dt = DateTime.parse("2014-08-20t15:04:05")
        >>> str(dt)
        '2014-08-20T15:04:05'
        >>> dt.date
        Date(2014, 8, 20)
    """

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date | None = None, time: Time | None = None) -> None:
        self._date = date if date is not None else Date()
        self._time = time if time is not None else Time()

    @classmethod
    def of(cls, instant: InstantLike, zone: str | None = None) -> DateTime:
        """Return the DateTime at which an instant occurs.

        Args:
            instant: A whenever instant or a datetime.datetime.
            zone: IANA zone to read the instant in. None uses the
                instant's own zone.

        Examples:
            >>> import whenever
            >>> i = whenever.Instant.from_utc(2014, 8, 20, 15, 4, 5)
            >>> str(DateTime.of(i, "Europe/Paris"))
            '2014-08-20T17:04:05'
        """
        year, month, day, hour, minute, second, nanosecond = decompose(
            instant, zone
        )
        return cls(
            Date(year, month, day),
            Time(hour, minute, second, nanosecond=nanosecond),
        )

    @classmethod
    def parse(cls, s: str) -> DateTime:
        """Parse a date and time of the form YYYY-MM-DDTHH:MM:SS[.fffffffff].

        This is RFC 3339 date-time without the offset, with the fraction
        described in Time.parse(). The separator may be 'T' or 't'.

        Raises:
            FormatError: If s has neither form.

        Examples:
            >>> DateTime.parse("2014-08-20T15:04:05.5")
            DateTime(Date(2014, 8, 20), Time(15, 4, 5, nanosecond=500000000))
        """
        for pattern in _DATETIME_RES:
            match = pattern.fullmatch(s)
            if match:
                break
        else:
            raise FormatError(s, "DateTime")

        year, month, day, hour, minute, second, fraction = match.groups()
        return cls(
            Date(int(year), int(month), int(day)),
            Time(
                int(hour),
                int(minute),
                int(second),
                nanosecond=fraction_to_nanos(fraction),
            ),
        )

    @classmethod
    def unmarshal_text(cls, data: str | bytes) -> DateTime:
        """Decode the text produced by marshal_text()."""
        return cls.parse(as_text(data))

    @property
    def date(self) -> Date:
        """Return the Date part."""
        return self._date

    @property
    def time(self) -> Time:
        """Return the Time part."""
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def format(self) -> str:
        """Return the text form accepted by parse(), always with 'T'."""
        return f"{self._date.format()}T{self._time.format()}"

    def marshal_text(self) -> bytes:
        """Return format() encoded as bytes."""
        return self.format().encode("ascii")

    def is_valid(self) -> bool:
        """Report whether both the date and the time are valid.

        The parts are independent, so no combination of a valid date and
        a valid time is invalid.
        """
        return self._date.is_valid() and self._time.is_valid()

    def to_instant(self, zone: str = REFERENCE_ZONE) -> whenever.ZonedDateTime:
        """Return the instant this DateTime denotes in a zone.

        Normalization and the handling of skipped or repeated wall-clock
        times are the same as for Date.to_instant(). For example,
        1955-05-01T00:30 in America/Indiana/Vincennes resolves to 23:30
        on April 30.

        Raises:
            ValueError: If the normalized year is out of whenever's range.
        """
        d, t = self._date, self._time
        return recompose(
            d.year,
            d.month,
            d.day,
            t.hour,
            t.minute,
            t.second,
            t.nanosecond,
            zone=zone,
        )

    def before(self, other: DateTime) -> bool:
        """Report whether this DateTime occurs before other."""
        return self._epoch_nanos() < other._epoch_nanos()

    def after(self, other: DateTime) -> bool:
        """Report whether this DateTime occurs after other."""
        return other.before(self)

    def compare(self, other: DateTime) -> int:
        """Compare the UTC instants of this DateTime and other.

        Returns:
            -1 if this DateTime is before other, +1 if after, otherwise 0.
        """
        mine = self._epoch_nanos()
        theirs = other._epoch_nanos()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def is_zero(self) -> bool:
        """Report whether both parts are zero."""
        return self._date.is_zero() and self._time.is_zero()

    def value(self) -> str:
        """Return the value stored in a database column."""
        return self.format()

    def scan(self, src: object) -> DateTime:
        """Convert a value read from a database into a DateTime.

        Accepted sources:
            - None: an absent value; this DateTime is returned unchanged.
            - an instant (whenever types or datetime.datetime): its
              wall-clock date and time in its own zone.
            - DateTime or whenever.PlainDateTime (LocalDateTime before
              whenever 0.8): fields copied.
            - str, bytes, bytearray or memoryview: parsed with parse().

        Raises:
            FormatError: If a text source is malformed.
            TypeMismatch: If src is of any other kind.
        """
        if src is None:
            return self
        if isinstance(src, INSTANT_TYPES):
            return DateTime.of(src)
        if isinstance(src, (DateTime, *_PLAIN_DATETIME_TYPES)):
            return DateTime(
                Date(src.year, src.month, src.day),
                Time(src.hour, src.minute, src.second, nanosecond=src.nanosecond),
            )
        if isinstance(src, _TEXT_TYPES):
            return DateTime.parse(as_text(src))
        logger.debug("cannot scan %s into DateTime: %r", type(src).__name__, src)
        raise TypeMismatch(type(src), "DateTime")

    def __conform__(self, protocol: object) -> str | None:
        """Adapt to sqlite3 by storing the canonical text."""
        if protocol is sqlite3.PrepareProtocol:
            return self.value()
        return None

    def _epoch_nanos(self) -> int:
        d, t = self._date, self._time
        return epoch_nanos(
            d.year, d.month, d.day, t.hour, t.minute, t.second, t.nanosecond
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return not self.before(other)

    def __repr__(self) -> str:
        return f"DateTime({self._date!r}, {self._time!r})"

    def __str__(self) -> str:
        return self.format()


__all__ = ["DateTime"]
