# ABOUTME: pytest configuration for cloud status tests
# ABOUTME: Configures marker timeouts and shared fixtures

from unittest.mock import Mock

import pytest

from cloud_status.config.settings import get_settings
from cloud_status.implementations.memory import InMemoryStatusStore, ManualTimerScheduler
from cloud_status.models.connection import ConnectionStatus


def pytest_configure(config):
    """Configure pytest for cloud status tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scheduler() -> ManualTimerScheduler:
    """Virtual-clock scheduler starting at 0ms."""
    return ManualTimerScheduler()


@pytest.fixture
def store() -> InMemoryStatusStore:
    """Status store that starts out connected."""
    return InMemoryStatusStore(ConnectionStatus.CONNECTED)


@pytest.fixture
def refresh() -> Mock:
    """Recording stand-in for the resource refresh trigger."""
    return Mock(name="refresh")
