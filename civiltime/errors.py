"""Civiltime exception hierarchy.

All civiltime-specific exceptions inherit from CivilError.
"""

from __future__ import annotations


class CivilError(Exception):
    """Base exception for all civiltime errors."""

    pass


class FormatError(CivilError):
    """Text does not match the canonical form of the target type.

    Raised by every parse operation. The offending input is kept on the
    exception so callers can report it.

    Attributes:
        text: The input that failed to parse.
        kind: Name of the type that was being parsed.

    Examples:
        - "2024-1-15" for a Date (month must be two digits)
        - "15:04" for a Time (seconds are required)
        - "2024-01-15 15:04:05" for a DateTime (separator must be T or t)
    """

    def __init__(self, text: str, kind: str) -> None:
        self.text = text
        self.kind = kind
        super().__init__(f"cannot parse {text!r} as {kind}")


class TypeMismatch(CivilError):
    """A database scan received a value of an unsupported kind.

    Attributes:
        source_type: The type of the rejected value.
        target: Name of the type the scan was producing.
    """

    def __init__(self, source_type: type, target: str) -> None:
        self.source_type = source_type
        self.target = target
        super().__init__(
            f"unsupported scan type for {target}: {source_type.__name__}"
        )


__all__ = [
    "CivilError",
    "FormatError",
    "TypeMismatch",
]
