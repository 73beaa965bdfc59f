"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Database-specific fixtures are in tests/integration/conftest.py.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
# Unit tests never connect; integration tests build their own engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

# ruff: noqa: E402 - Imports must be after env var setup
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Connection

from src.projects.core.config import get_settings
from src.projects.core.db import TransactionScope

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def mock_connection() -> MagicMock:
    """A Connection stand-in; configure ``execute`` per test."""
    return MagicMock(spec=Connection)


@pytest.fixture
def mock_scope(mock_connection: MagicMock) -> MagicMock:
    """A TransactionScope that runs work directly against ``mock_connection``."""
    scope = MagicMock(spec=TransactionScope)
    scope.with_transaction.side_effect = lambda work: work(mock_connection)
    return scope
