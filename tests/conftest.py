"""Pytest configuration and fixtures for Calperiod tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so calperiod can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from calperiod import Period  # noqa: E402


@pytest.fixture
def january() -> Period:
    """Day-precision period covering January 2021, both ends included."""
    return Period.make("2021-01-01", "2021-01-31")
