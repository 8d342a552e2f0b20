"""Pytest configuration and fixtures for the opmeter tests."""

import pytest
from whenever import Instant

from opmeter.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; re-read the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def epoch() -> Instant:
    """Caller clock origin, t = 0 ms."""
    return Instant.from_timestamp(0)
