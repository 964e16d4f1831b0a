"""Internal utilities for civiltime.

This module contains private implementation details:
    - Constants and fixed reference points
    - The bridge to whenever for decomposing and recomposing instants
    - The text grammar shared by the civil types

Note: This module is not part of the public API.
"""

from __future__ import annotations

from civiltime._internal.instant import (
    decompose,
    epoch_nanos,
    normalize,
    recompose,
)
from civiltime._internal.text import as_text, fraction_to_nanos

__all__: list[str] = [
    "as_text",
    "decompose",
    "epoch_nanos",
    "fraction_to_nanos",
    "normalize",
    "recompose",
]
