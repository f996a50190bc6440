"""Shared test fixtures for all test modules."""

from datetime import UTC, datetime

import pytest

from emfpy.core.metadata import Metadata


@pytest.fixture
def fixed_timestamp() -> datetime:
    """2024-01-01T00:00:00Z, epoch millis 1704067200000."""
    return datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def metadata(fixed_timestamp: datetime) -> Metadata:
    """Metadata with a fixed timestamp and no directives."""
    return Metadata(timestamp=fixed_timestamp)
