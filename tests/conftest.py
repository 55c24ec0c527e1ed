"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from recur.config import reset_recur_config


@pytest.fixture(autouse=True)
def reset_recur_config_for_all_tests():
    """Reset the module-level config before and after each test for isolation.

    The config is a module-level singleton that persists across tests.
    This fixture ensures each test starts with host zone discovery.
    """
    reset_recur_config()
    yield
    reset_recur_config()


@pytest.fixture
def july_first():
    """Monday 2019-07-01 12:00 UTC, far from any DST transition."""
    return datetime(2019, 7, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def last_day_of_dst():
    """2019-11-02 23:00 in New York, the evening before clocks fall back."""
    return datetime(2019, 11, 3, 3, 0, tzinfo=timezone.utc)


@pytest.fixture
def eve_of_dst():
    """2019-03-09 23:00 in New York, the evening before clocks spring forward."""
    return datetime(2019, 3, 10, 4, 0, tzinfo=timezone.utc)
