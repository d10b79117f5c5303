"""
Shared pytest fixtures for rlayout tests.
"""

import pytest
from pubsub import pub

from rlayout.config import CarouselConfig, UniformGridConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a compositor")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop all bus listeners between tests."""
    yield
    pub.unsubAll()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep RLAYOUT_* variables from the caller's environment out of tests."""
    for name in (
        "RLAYOUT_DEBUG",
        "RLAYOUT_OUTER_PADDING",
        "RLAYOUT_VIEW_PADDING",
        "RLAYOUT_MAIN_LOCATION",
        "RLAYOUT_MAIN_RATIO",
        "RLAYOUT_SECONDARY_WINDOW_SIZE",
        "RLAYOUT_TARGET_ASPECT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def carousel_config():
    """Factory fixture for carousel configurations with default values."""

    def make(**kwargs):
        return CarouselConfig(**kwargs)

    return make


@pytest.fixture
def grid_config():
    """Factory fixture for uniform grid configurations with default values."""

    def make(**kwargs):
        return UniformGridConfig(**kwargs)

    return make


@pytest.fixture
def carousel_area():
    """1206x768 area; with 6px paddings the padded size is 1194x756."""
    return (1206, 768)


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return (1920, 1080)


@pytest.fixture
def portrait_area():
    """Portrait 1080x1920 area for layout tests."""
    return (1080, 1920)
