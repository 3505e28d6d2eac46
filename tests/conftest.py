"""
Pytest configuration and fixtures for Language Manager tests.
"""
import os

import pytest
from pathlib import Path

from language_manager.config.settings import LocalizationSettings
from language_manager.core.provider import LocalizationProvider
from language_manager.core.resource_store import JsonResourceStore

# Qt must not need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

LOGIN = "Resources.Login.Login"
CREATE_ACCOUNT = "Resources.CreateAccount.CreateAccount"

# Qt Application fixture for tests that need QObject signals
_qt_app = None


@pytest.fixture(scope="session")
def qapp():
    """Create a QApplication for tests that need Qt."""
    global _qt_app
    from PySide6.QtWidgets import QApplication
    if _qt_app is None:
        _qt_app = QApplication.instance() or QApplication([])
    yield _qt_app


@pytest.fixture(scope="session")
def test_data_dir():
    """Return the test data directory."""
    return Path(__file__).parent / "test_data"


@pytest.fixture
def resource_root(test_data_dir):
    """Root directory the test base paths are resolved against."""
    return test_data_dir


@pytest.fixture
def store_factory(resource_root):
    """Store factory opening JSON stores below the test resource root."""
    def factory(base_path):
        return JsonResourceStore(base_path, root=resource_root)
    return factory


@pytest.fixture
def settings(resource_root):
    """Settings pointing at the test resources."""
    return LocalizationSettings(resource_root=resource_root)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from the caller's locale and overrides."""
    for var in ("LANGUAGE_MANAGER_RESOURCE_ROOT", "LANGUAGE_MANAGER_CULTURE",
                "LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_provider():
    """Each test starts with an empty process-wide slot."""
    LocalizationProvider.reset()
    yield
    LocalizationProvider.reset()
