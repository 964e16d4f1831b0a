"""Text grammar shared by the civil types.

The patterns are kept as strings so DateTime can join the Date and Time
grammars around its separator. This module is not part of the public API.
"""

from __future__ import annotations

import re

from civiltime._internal.constants import FRACTION_DIGITS

# YYYY-MM-DD
DATE_PATTERN: str = r"(\d{4})-(\d{2})-(\d{2})"

# HH:MM:SS with an optional fraction of 1-9 digits
TIME_PATTERN: str = r"(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,%d}))?" % FRACTION_DIGITS


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a grammar pattern for use with fullmatch.

    ASCII mode keeps \\d from matching non-ASCII digits.
    """
    return re.compile(pattern, re.ASCII)


def fraction_to_nanos(fraction: str | None) -> int:
    """Convert fractional-second digits to nanoseconds.

    The digits are right-padded with zeros to nine places.

    Examples:
        >>> fraction_to_nanos("5")
        500000000
        >>> fraction_to_nanos("000000001")
        1
        >>> fraction_to_nanos(None)
        0
    """
    if not fraction:
        return 0
    return int(fraction.ljust(FRACTION_DIGITS, "0"))


def as_text(data: str | bytes | bytearray | memoryview) -> str:
    """Return data as a str, decoding byte sequences as UTF-8.

    Undecodable bytes are escaped so that the parser, not the decoder,
    reports the failure, and the error shows the bytes received.
    """
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8", errors="backslashreplace")


__all__ = [
    "DATE_PATTERN",
    "TIME_PATTERN",
    "as_text",
    "compile_pattern",
    "fraction_to_nanos",
]
