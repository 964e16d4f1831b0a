"""Date class representing a civil calendar date.

This module provides the Date class for representing a calendar date
without any timezone, and therefore without a unique 24-hour span.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import sqlite3
from typing import TYPE_CHECKING

import whenever

from civiltime._internal.constants import NANOS_PER_DAY, REFERENCE_ZONE
from civiltime._internal.instant import (
    INSTANT_TYPES,
    InstantLike,
    decompose,
    epoch_nanos,
    normalize,
    recompose,
)
from civiltime._internal.text import DATE_PATTERN, as_text, compile_pattern
from civiltime.errors import FormatError, TypeMismatch

if TYPE_CHECKING:
    from civiltime.core.datetime import DateTime
    from civiltime.core.time import Time

logger = logging.getLogger(__name__)

_DATE_RE = compile_pattern(DATE_PATTERN)


class Date:
    """A civil date (year, month, day).

    Date carries no location, so it does not describe a unique 24-hour
    timespan. Fields are stored as given: Date(2023, 2, 30) can be built
    and formatted, and is_valid() reports that it is not a real day.
    Operations that need an instant (to_instant, add_days, days_since)
    normalize such values by carrying the excess into the next field.

    The zero value Date() has every field set to 0. It is not a valid
    date; use is_zero() to detect it.

    Attributes:
        year: The year (e.g. 2014).
        month: The month of the year, January = 1.
        day: The day of the month, starting at 1.

    Examples:
        >>> d = Date(2014, 8, 20)
        >>> str(d)
        '2014-08-20'

        >>> Date(2023, 2, 30).is_valid()
        False

        >>> Date().is_zero()
        True
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int = 0, month: int = 0, day: int = 0) -> None:
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def of(cls, instant: InstantLike, zone: str | None = None) -> Date:
        """Return the Date on which an instant falls.

        Args:
            instant: A whenever instant or a datetime.datetime.
            zone: IANA zone to read the instant in. None uses the
                instant's own zone (UTC for a whenever.Instant).

        Returns:
            The calendar date of the instant in the zone.

        Examples:
            >>> import whenever
            >>> i = whenever.Instant.from_utc(2014, 8, 20, 23, 30)
            >>> Date.of(i)
            Date(2014, 8, 20)
            >>> Date.of(i, "Asia/Tokyo")
            Date(2014, 8, 21)
        """
        year, month, day, *_ = decompose(instant, zone)
        return cls(year, month, day)

    @classmethod
    def parse(cls, s: str) -> Date:
        """Parse a date in RFC 3339 full-date form (YYYY-MM-DD).

        Only the shape is checked; the components are not validated
        against the calendar.

        Args:
            s: The text to parse.

        Returns:
            The parsed Date.

        Raises:
            FormatError: If s is not exactly YYYY-MM-DD.

        Examples:
            >>> Date.parse("2014-08-20")
            Date(2014, 8, 20)

            >>> Date.parse("2014-8-20")
            Traceback (most recent call last):
            ...
            civiltime.errors.FormatError: cannot parse '2014-8-20' as Date
        """
        match = _DATE_RE.fullmatch(s)
        if not match:
            raise FormatError(s, "Date")
        year, month, day = (int(g) for g in match.groups())
        return cls(year, month, day)

    @classmethod
    def unmarshal_text(cls, data: str | bytes) -> Date:
        """Decode the text produced by marshal_text().

        Raises:
            FormatError: If the text is not in the form accepted by parse().
        """
        return cls.parse(as_text(data))

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @property
    def month(self) -> int:
        """Return the month component."""
        return self._month

    @property
    def day(self) -> int:
        """Return the day component."""
        return self._day

    def format(self) -> str:
        """Return the date in RFC 3339 full-date form.

        The year is zero-padded to four digits but never truncated, so
        years past 9999 or before 0 keep their full width and sign.

        Examples:
            >>> Date(2014, 8, 20).format()
            '2014-08-20'
            >>> Date(12345, 1, 2).format()
            '12345-01-02'
        """
        return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"

    def marshal_text(self) -> bytes:
        """Return format() encoded as bytes."""
        return self.format().encode("ascii")

    def is_valid(self) -> bool:
        """Report whether the date names a real calendar day.

        A date is valid when recomposing it at midnight UTC and reading
        the date back yields the same fields. Dates whose years cannot be
        represented as instants at all are invalid.

        Examples:
            >>> Date(2024, 2, 29).is_valid()
            True
            >>> Date(2023, 2, 29).is_valid()
            False
        """
        try:
            instant = self.to_instant(REFERENCE_ZONE)
        except (ValueError, OverflowError):
            return False
        return Date.of(instant) == self

    def to_instant(self, zone: str = REFERENCE_ZONE) -> whenever.ZonedDateTime:
        """Return the instant of 00:00:00 on this date in a zone.

        Out-of-range fields carry into the next field rather than failing
        (Date(2024, 1, 32) is February 1). If midnight does not exist or
        occurs twice in the zone, whenever resolves it: a skipped time
        uses the offset after the transition, a repeated one the earlier
        occurrence. For example, midnight of 1955-05-01 in
        America/Indiana/Vincennes resolves to 23:00 on April 30.

        Args:
            zone: IANA zone name.

        Returns:
            The corresponding whenever.ZonedDateTime.

        Raises:
            ValueError: If the normalized year is out of whenever's range.
        """
        return recompose(self._year, self._month, self._day, zone=zone)

    def at(self, time: Time) -> DateTime:
        """Combine this date with a time of day.

        Examples:
            >>> from civiltime.core.time import Time
            >>> Date(2014, 8, 20).at(Time(15, 4, 5))
            DateTime(Date(2014, 8, 20), Time(15, 4, 5, nanosecond=0))
        """
        from civiltime.core.datetime import DateTime

        return DateTime(self, time)

    def add_days(self, days: int) -> Date:
        """Return the date that is the given number of days later.

        The shift is applied to the UTC midnight of this date, so invalid
        or zero dates are normalized first rather than rejected.

        Args:
            days: Number of days to add (can be negative).

        Examples:
            >>> Date(2024, 2, 28).add_days(2)
            Date(2024, 3, 1)
            >>> Date(2024, 1, 1).add_days(-1)
            Date(2023, 12, 31)
            >>> Date(2023, 2, 30).add_days(0)
            Date(2023, 3, 2)
        """
        year, month, day, *_ = normalize(self._year, self._month, self._day + days)
        return Date(year, month, day)

    def days_since(self, other: Date) -> int:
        """Return the signed number of days from other to this date.

        This is the inverse of add_days():
        d.add_days(n).days_since(d) == n.

        Examples:
            >>> Date(2024, 3, 1).days_since(Date(2024, 2, 28))
            2
            >>> Date(2024, 2, 28).days_since(Date(2024, 3, 1))
            -2
        """
        # UTC midnights are always an exact multiple of a day apart
        delta = epoch_nanos(*self._key()) - epoch_nanos(*other._key())
        return delta // NANOS_PER_DAY

    def before(self, other: Date) -> bool:
        """Report whether this date occurs before other."""
        return self._key() < other._key()

    def after(self, other: Date) -> bool:
        """Report whether this date occurs after other."""
        return other.before(self)

    def compare(self, other: Date) -> int:
        """Compare with other.

        Returns:
            -1 if this date is before other, +1 if after, otherwise 0.
        """
        if self.before(other):
            return -1
        if self.after(other):
            return 1
        return 0

    def is_zero(self) -> bool:
        """Report whether every field is 0."""
        return self._year == 0 and self._month == 0 and self._day == 0

    def value(self) -> str:
        """Return the value stored in a database column.

        Examples:
            >>> Date(2014, 8, 20).value()
            '2014-08-20'
        """
        return self.format()

    def scan(self, src: object) -> Date:
        """Convert a value read from a database into a Date.

        Accepted sources:
            - None: yields the zero Date().
            - str: parsed with parse().
            - an instant (whenever types or datetime.datetime): the date
              in the instant's own zone.
            - Date, datetime.date or whenever.Date: fields copied.

        Args:
            src: The raw column value.

        Returns:
            A new Date; this instance is not modified.

        Raises:
            FormatError: If a str source is malformed.
            TypeMismatch: If src is of any other kind.

        Examples:
            >>> Date(2014, 8, 20).scan(None)
            Date(0, 0, 0)
            >>> Date().scan("2014-08-20")
            Date(2014, 8, 20)
        """
        if src is None:
            return Date()
        if isinstance(src, str):
            return Date.parse(src)
        # datetime.datetime is a datetime.date, so instants come first
        if isinstance(src, INSTANT_TYPES):
            return Date.of(src)
        if isinstance(src, (Date, _datetime.date, whenever.Date)):
            return Date(src.year, src.month, src.day)
        logger.debug("cannot scan %s into Date: %r", type(src).__name__, src)
        raise TypeMismatch(type(src), "Date")

    def __conform__(self, protocol: object) -> str | None:
        """Adapt to sqlite3 by storing the canonical text."""
        if protocol is sqlite3.PrepareProtocol:
            return self.value()
        return None

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self.before(other)

    def __repr__(self) -> str:
        """Return a detailed string representation.

        Returns:
            String like 'Date(2014, 8, 20)'.
        """
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.format()


__all__ = ["Date"]
