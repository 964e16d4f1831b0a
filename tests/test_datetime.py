"""Tests for the DateTime class."""

from __future__ import annotations

import datetime
import warnings

import pytest
import whenever

from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.time import Time
from civiltime.errors import FormatError


def dt(*fields: int, nanosecond: int = 0) -> DateTime:
    """Build a DateTime from year, month, day, hour, minute, second."""
    year, month, day, hour, minute, second = (*fields, 0, 0, 0)[:6]
    return DateTime(
        Date(year, month, day), Time(hour, minute, second, nanosecond=nanosecond)
    )


class TestDateTimeConstruction:
    """Tests for DateTime construction and accessors."""

    def test_parts(self) -> None:
        """The date and time parts are kept as given."""
        value = DateTime(Date(2014, 8, 20), Time(15, 4, 5, nanosecond=6))
        assert value.date == Date(2014, 8, 20)
        assert value.time == Time(15, 4, 5, nanosecond=6)

    def test_field_proxies(self) -> None:
        """Field properties read through to the parts."""
        value = dt(2014, 8, 20, 15, 4, 5, nanosecond=6)
        assert (value.year, value.month, value.day) == (2014, 8, 20)
        assert (value.hour, value.minute, value.second) == (15, 4, 5)
        assert value.nanosecond == 6

    def test_default_is_zero(self) -> None:
        """DateTime() is built from zero parts."""
        assert DateTime() == DateTime(Date(), Time())

    def test_no_date_operations(self) -> None:
        """Date-only operations are not exposed."""
        assert not hasattr(DateTime(), "add_days")
        assert not hasattr(DateTime(), "days_since")


class TestDateTimeOf:
    """Tests for DateTime.of()."""

    def test_instant(self) -> None:
        """An Instant decomposes in UTC."""
        i = whenever.Instant.from_utc(2014, 8, 20, 15, 4, 5, nanosecond=999)
        assert DateTime.of(i) == dt(2014, 8, 20, 15, 4, 5, nanosecond=999)

    def test_zone_crosses_midnight(self) -> None:
        """The zone can move both the date and the time."""
        i = whenever.Instant.from_utc(2014, 8, 20, 23, 0)
        assert DateTime.of(i, "Europe/Paris") == dt(2014, 8, 21, 1, 0)

    def test_offset_datetime(self) -> None:
        """An OffsetDateTime keeps its own wall clock."""
        o = whenever.OffsetDateTime(2014, 8, 20, 15, 4, 5, offset=-7)
        assert DateTime.of(o) == dt(2014, 8, 20, 15, 4, 5)

    def test_naive_stdlib_datetime(self) -> None:
        """A naive datetime.datetime is read as it stands."""
        value = datetime.datetime(2014, 8, 20, 15, 4, 5, 250000)
        assert DateTime.of(value) == dt(2014, 8, 20, 15, 4, 5, nanosecond=250_000_000)


class TestDateTimeParse:
    """Tests for DateTime.parse()."""

    def test_parse(self) -> None:
        """Parse a date-time with an upper-case separator."""
        assert DateTime.parse("2014-08-20T15:04:05") == dt(2014, 8, 20, 15, 4, 5)

    def test_lower_case_separator(self) -> None:
        """A lower-case 't' parses identically."""
        assert DateTime.parse("2014-08-20t15:04:05") == DateTime.parse(
            "2014-08-20T15:04:05"
        )

    def test_fraction(self) -> None:
        """Fractions are padded to nanoseconds."""
        value = DateTime.parse("2014-08-20T15:04:05.123")
        assert value.nanosecond == 123_000_000

    @pytest.mark.parametrize(
        "text",
        [
            "2014-08-20",
            "2014-08-20 15:04:05",
            "2014-08-20T15:04:05Z",
            "2014-08-20T15:04:05+02:00",
            "2014-08-20T15:04",
            "2014-08-20TT15:04:05",
            "2014-08-20x15:04:05",
            "2014-08-20T15:04:05.",
        ],
    )
    def test_parse_rejects(self, text: str) -> None:
        """Other shapes fail with the original text."""
        with pytest.raises(FormatError) as excinfo:
            DateTime.parse(text)
        assert excinfo.value.text == text
        assert excinfo.value.kind == "DateTime"


class TestDateTimeFormat:
    """Tests for DateTime.format()."""

    def test_upper_case_separator(self) -> None:
        """Output always uses 'T'."""
        value = DateTime.parse("2014-08-20t15:04:05")
        assert value.format() == "2014-08-20T15:04:05"
        assert str(value) == "2014-08-20T15:04:05"

    def test_fraction(self) -> None:
        """The time part keeps its fraction rule."""
        assert dt(2014, 8, 20, 15, 4, 5, nanosecond=1).format() == (
            "2014-08-20T15:04:05.000000001"
        )

    def test_repr(self) -> None:
        """repr() nests the parts."""
        assert repr(dt(2014, 8, 20, 15, 4, 5)) == (
            "DateTime(Date(2014, 8, 20), Time(15, 4, 5, nanosecond=0))"
        )


class TestDateTimeValidity:
    """Tests for DateTime.is_valid()."""

    def test_valid(self) -> None:
        """Valid parts make a valid DateTime."""
        assert dt(2014, 8, 20, 23, 59, 59, nanosecond=999_999_999).is_valid()

    def test_invalid_date(self) -> None:
        """An invalid date part invalidates the whole."""
        assert not dt(2014, 9, 31, 12).is_valid()

    def test_invalid_time(self) -> None:
        """An invalid time part invalidates the whole."""
        assert not dt(2014, 8, 20, 24).is_valid()

    def test_zero_is_invalid(self) -> None:
        """The zero DateTime has an invalid date."""
        assert not DateTime().is_valid()


class TestDateTimeToInstant:
    """Tests for DateTime.to_instant()."""

    def test_utc(self) -> None:
        """All seven fields reach the instant."""
        z = dt(2014, 8, 20, 15, 4, 5, nanosecond=6).to_instant()
        expected = whenever.Instant.from_utc(2014, 8, 20, 15, 4, 5, nanosecond=6)
        assert z.timestamp_nanos() == expected.timestamp_nanos()

    def test_normalizes(self) -> None:
        """Hour 24 carries into the next day."""
        z = dt(2014, 8, 31, 24).to_instant()
        assert (z.month, z.day, z.hour) == (9, 1, 0)

    def test_skipped_time(self, vincennes: str) -> None:
        """A wall clock inside a gap resolves like whenever's 'earlier'."""
        z = dt(1955, 5, 1).to_instant(vincennes)
        assert (z.year, z.month, z.day, z.hour, z.minute) == (1955, 4, 30, 23, 0)

        z = dt(1955, 5, 1, 0, 30).to_instant(vincennes)
        assert (z.month, z.day, z.hour, z.minute) == (4, 30, 23, 30)

    def test_matches_whenever(self, vincennes: str) -> None:
        """Resolution is delegated, not reimplemented."""
        z = dt(1955, 5, 1).to_instant(vincennes)
        expected = whenever.ZonedDateTime(
            1955, 5, 1, tz=vincennes, disambiguate="earlier"
        )
        assert z.timestamp() == expected.timestamp()

    def test_repeated_time_picks_earlier(self) -> None:
        """A repeated wall clock resolves to its first occurrence."""
        z = dt(2023, 11, 5, 1, 30).to_instant("America/New_York")
        assert z.timestamp() == whenever.Instant.from_utc(2023, 11, 5, 5, 30).timestamp()

    def test_no_deprecation_warnings(self, vincennes: str) -> None:
        """Recomposition only uses keywords the installed whenever supports."""
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            dt(1955, 5, 1).to_instant(vincennes)
            assert Date(2014, 8, 20).is_valid()

    def test_spring_forward_gap(self) -> None:
        """A skipped wall clock moves back by the gap."""
        z = dt(2023, 3, 12, 2, 30).to_instant("America/New_York")
        assert (z.hour, z.minute) == (1, 30)
        assert z.timestamp() == whenever.Instant.from_utc(2023, 3, 12, 6, 30).timestamp()


class TestDateTimeComparison:
    """Tests for DateTime ordering."""

    def test_before_after(self) -> None:
        """The date part dominates the time part."""
        a = dt(2014, 8, 20, 23, 59, 59)
        b = dt(2014, 8, 21)
        assert a.before(b)
        assert b.after(a)
        assert a.compare(b) == -1
        assert b.compare(a) == 1

    def test_nanosecond_resolution(self) -> None:
        """Nanoseconds decide otherwise equal values."""
        a = dt(2014, 8, 20, nanosecond=1)
        b = dt(2014, 8, 20, nanosecond=2)
        assert a < b
        assert a.compare(b) == -1

    def test_equal(self) -> None:
        """Equal values compare 0."""
        assert dt(2014, 8, 20, 1).compare(dt(2014, 8, 20, 1)) == 0
        assert dt(2014, 8, 20, 1) <= dt(2014, 8, 20, 1)

    def test_ordering_uses_normalized_instants(self) -> None:
        """Out-of-range fields are normalized before comparing."""
        overflow = dt(2014, 8, 20, 24)
        midnight = dt(2014, 8, 21)
        assert overflow.compare(midnight) == 0
        assert overflow != midnight
        assert overflow.before(dt(2014, 8, 21, 0, 0, 1))

    def test_zero_value_orders(self) -> None:
        """The zero DateTime compares and sorts before real values."""
        value = dt(2014, 8, 20, 15, 4, 5)
        assert DateTime().compare(DateTime()) == 0
        assert DateTime().before(value)
        assert value.compare(DateTime()) == 1
        assert sorted([value, DateTime()]) == [DateTime(), value]

    def test_years_past_instant_range(self) -> None:
        """Values beyond year 9999 still order."""
        assert dt(9999, 12, 31, 23, 59, 59).before(dt(10000, 1, 1))

    def test_hash(self) -> None:
        """Equal values hash alike."""
        assert hash(dt(2014, 8, 20, 1)) == hash(dt(2014, 8, 20, 1))


class TestDateTimeZero:
    """Tests for DateTime.is_zero()."""

    def test_zero(self) -> None:
        """Both parts zero."""
        assert DateTime().is_zero()

    def test_non_zero(self) -> None:
        """Either part set makes it non-zero."""
        assert not DateTime(Date(1970, 1, 1)).is_zero()
        assert not DateTime(time=Time(0, 0, 1)).is_zero()


class TestDateTimeText:
    """Tests for marshal_text() and unmarshal_text()."""

    def test_round_trip(self) -> None:
        """Marshaled text unmarshals to an equal DateTime."""
        value = dt(2014, 8, 20, 15, 4, 5, nanosecond=999_000_000)
        assert value.marshal_text() == b"2014-08-20T15:04:05.999000000"
        assert DateTime.unmarshal_text(value.marshal_text()) == value

    def test_unmarshal_lower_case(self) -> None:
        """unmarshal_text accepts the lower-case separator."""
        assert DateTime.unmarshal_text(b"2014-08-20t15:04:05") == dt(
            2014, 8, 20, 15, 4, 5
        )
