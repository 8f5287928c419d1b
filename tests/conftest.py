"""Shared fixtures"""

import io
from datetime import datetime, timezone

import pytest


@pytest.fixture
def sink():
    """In-memory sink capturing written lines."""
    return io.StringIO()


@pytest.fixture
def fixed_time():
    return datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone.utc)
