"""Pytest configuration and shared fixtures for fnkit tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fnkit import Ok

    return Ok(42)


@pytest.fixture
def sample_fail():
    """Sample Fail value for testing."""
    from fnkit import Error, Fail

    return Fail(Error("test error"))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fnkit import Some

    return Some("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fnkit import Nothing

    return Nothing


@pytest.fixture
def reset_config():
    """Restore the default configuration around each test."""
    from fnkit._config import reset

    reset()
    yield
    reset()
