"""SQLAlchemy column types for civil objects.

Each type stores its value as canonical text, which sorts correctly for
valid values and survives every backend unchanged. Loading goes through
the civil type's scan(), so drivers that hand back native date, time or
datetime objects are accepted too.

Types:
    CivilDate: Column type for Date.
    CivilTime: Column type for Time.
    CivilDateTime: Column type for DateTime.

SQL NULL maps to None in both directions.

Examples:
    >>> from sqlalchemy import Column, Integer, MetaData, Table
    >>> from civiltime.convert.sql import CivilDate
    >>> events = Table(
    ...     "events",
    ...     MetaData(),
    ...     Column("id", Integer, primary_key=True),
    ...     Column("day", CivilDate()),
    ... )
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from sqlalchemy.types import String as SQLString
from sqlalchemy.types import TypeDecorator

from civiltime.core.date import Date
from civiltime.core.datetime import DateTime
from civiltime.core.time import Time

C = TypeVar("C", Date, Time, DateTime)


class _CivilText(TypeDecorator[C]):
    """Shared bind and result processing for civil text columns."""

    impl = SQLString
    cache_ok = True

    civil_type: ClassVar[type[Any]]

    @property
    def python_type(self) -> type[Any]:
        return self.civil_type

    def process_bind_param(self, value: Any, dialect: Any) -> str | None:
        if value is None:
            return None
        return self.civil_type().scan(value).value()

    def process_result_value(self, value: Any, dialect: Any) -> C | None:
        if value is None:
            return None
        return self.civil_type().scan(value)


class CivilDate(_CivilText[Date]):
    """Database-agnostic civil date column, stored as YYYY-MM-DD."""

    cache_ok = True
    civil_type = Date


class CivilTime(_CivilText[Time]):
    """Database-agnostic civil time column, stored as HH:MM:SS[.fffffffff]."""

    cache_ok = True
    civil_type = Time


class CivilDateTime(_CivilText[DateTime]):
    """Database-agnostic civil date-time column."""

    cache_ok = True
    civil_type = DateTime


__all__ = ["CivilDate", "CivilTime", "CivilDateTime"]
