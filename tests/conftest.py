"""Pytest configuration and fixtures."""

import sys
import time
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed UTC instant (2025-11-18T12:00:00Z) used as 'now'."""
    return datetime(2025, 11, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def utc_local_time(monkeypatch):
    """Make the process-local timezone UTC for the duration of a test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
