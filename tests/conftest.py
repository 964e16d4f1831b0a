"""Pytest configuration and fixtures for civiltime tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so civiltime can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# 1955-05-01T00:00 does not exist here; clocks jumped to 01:00 CDT.
VINCENNES = "America/Indiana/Vincennes"


@pytest.fixture
def vincennes() -> str:
    """Zone with a spring-forward gap at midnight on 1955-05-01."""
    return VINCENNES
