"""Core test fixtures for dice tests."""

import pytest

from polydie.config import get_settings
from polydie.dice.sampler import reset_sampler


@pytest.fixture(autouse=True)
def fresh_defaults():
    """Give each test its own default sampler and settings.

    Clears the cached settings and the thread's sampler before and after
    every test so environment patches never leak between tests.
    """
    get_settings.cache_clear()
    reset_sampler()

    yield

    get_settings.cache_clear()
    reset_sampler()
