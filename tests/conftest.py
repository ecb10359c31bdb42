"""Pytest configuration and fixtures for juliandate tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so juliandate can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from juliandate._internal.clock import use_clock  # noqa: E402


@pytest.fixture
def fixed_today():
    """Pin the current date to 2020-06-12 for the duration of a test."""
    with use_clock(lambda: (2020, 6, 12)) as source:
        yield source
