"""Shared pytest fixtures for yumlgen tests."""

import pytest
from pathlib import Path
from unittest.mock import Mock
from yumlgen.builder import DiagramFragmentBuilder
from yumlgen.cache import ExpiringCache
from yumlgen.config import Configuration
from yumlgen.introspection import ReflectionMetadataProvider


@pytest.fixture
def data_path():
    """Directory with test configuration files."""
    return Path(__file__).parent / "data"


@pytest.fixture
def test_config():
    """Default configuration object."""
    return Configuration()


@pytest.fixture
def provider():
    """Reflection based metadata provider."""
    return ReflectionMetadataProvider()


@pytest.fixture
def builder():
    """Fragment builder with default settings."""
    return DiagramFragmentBuilder()


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ExpiringCache(clock=clock)


@pytest.fixture
def yuml_response():
    """Factory for mocked yUML server responses.

    Usage:
        yuml_response(text="abc123.png", status_code=200)
    """

    def _create(text="abc123.png", status_code=200):
        response = Mock()
        response.status_code = status_code
        response.text = text
        return response

    return _create
