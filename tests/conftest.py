"""
Shared pytest fixtures for the numval tests.

This module provides:
- Factories for each representation
- A helper asserting that a result degraded to the undefined value
- Isolation of the cached settings from environment changes
"""

import pytest

from numval import UNDEFINED, decimal_factory, floating_factory, undefined_factory
from numval.config import get_settings


@pytest.fixture
def floating():
    """The floating factory."""
    return floating_factory()


@pytest.fixture
def decimal16():
    """Arbitrary-precision factory with 16 significant digits."""
    return decimal_factory(16)


@pytest.fixture
def decimal32():
    """Arbitrary-precision factory with 32 significant digits."""
    return decimal_factory(32)


@pytest.fixture
def undefined():
    """The undefined factory."""
    return undefined_factory()


@pytest.fixture
def assert_undefined():
    """Helper to assert that a value is the undefined sentinel."""
    def _assert_undefined(value) -> None:
        assert value is UNDEFINED, f"Expected UNDEFINED, got {value!r}"
        assert value.is_undefined()
    return _assert_undefined


@pytest.fixture
def fresh_settings():
    """Clear the settings cache before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
