"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from speaking_tracker.config import get_settings
from speaking_tracker.database import JsonDatabase


@pytest.fixture
def data_paths(tmp_path):
    """Data and settings file locations inside a temp directory."""
    return tmp_path / "data.json", tmp_path / "settings.json"


@pytest.fixture
def json_db(data_paths):
    """JSON store connected to temp files."""
    data_file, settings_file = data_paths
    JsonDatabase.connect(str(data_file), str(settings_file))

    yield JsonDatabase

    JsonDatabase.disconnect()


@pytest.fixture
def client(data_paths, monkeypatch):
    """API client running the app against temp files."""
    data_file, settings_file = data_paths
    monkeypatch.setenv("DATA_FILE", str(data_file))
    monkeypatch.setenv("SETTINGS_FILE", str(settings_file))
    get_settings.cache_clear()

    from speaking_tracker.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_settings.cache_clear()
