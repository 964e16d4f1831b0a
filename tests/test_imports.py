"""Tests for civiltime package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_civiltime() -> None:
    """Import civiltime package succeeds."""
    import civiltime

    assert hasattr(civiltime, "__version__")
    assert civiltime.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import civiltime.core submodule succeeds."""
    from civiltime import core

    assert set(core.__all__) == {"Date", "DateTime", "Time"}


def test_import_format_module() -> None:
    """Import civiltime.format submodule succeeds."""
    from civiltime import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import civiltime.convert submodule succeeds."""
    from civiltime import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    """Import civiltime._internal submodule succeeds."""
    from civiltime import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import civiltime.errors succeeds with all exception classes."""
    from civiltime.errors import CivilError, FormatError, TypeMismatch

    assert issubclass(FormatError, CivilError)
    assert issubclass(TypeMismatch, CivilError)
    assert issubclass(CivilError, Exception)


def test_import_constants() -> None:
    """Import civiltime._internal.constants succeeds."""
    from civiltime._internal.constants import (
        DAYS_PER_CYCLE,
        NANOS_PER_DAY,
        NANOS_PER_SECOND,
        REFERENCE_ZONE,
        YEARS_PER_CYCLE,
    )

    assert NANOS_PER_SECOND == 1_000_000_000
    assert NANOS_PER_DAY == 86_400_000_000_000
    assert DAYS_PER_CYCLE == 146_097
    assert YEARS_PER_CYCLE == 400
    assert REFERENCE_ZONE == "UTC"
