"""Root test fixtures shared across all test types.

Database-backed fixtures live in tests/integration/conftest.py.
"""

import os

# Set env before any app imports so Settings can be constructed
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

# ruff: noqa: E402 - Imports must be after env var setup
from datetime import datetime

import pytest

from src.tracker.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant used by pipeline and urgency tests."""
    return datetime(2024, 1, 10, 0, 0)
