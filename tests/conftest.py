import dataclasses
import os

# Must be set before the application modules are imported
os.environ["APP_ENV"] = "testing"
os.environ["LOG_TO_FILE"] = "false"

import pytest
from fastapi.testclient import TestClient

from meetup_demo.api.main import create_app
from meetup_demo.core.config import get_settings
from meetup_demo.services import reset_metar_service


@pytest.fixture
def client():
    """Test client over a freshly built application."""
    reset_metar_service()
    with TestClient(create_app()) as client:
        yield client


@pytest.fixture
def public_dir(tmp_path):
    """Temporary public directory with an index page and a few assets."""
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Welcome</h1>")
    (directory / "hello").write_text("static hello")
    (directory / "css").mkdir()
    (directory / "css" / "site.css").write_text("body { color: black; }")
    return directory


@pytest.fixture
def static_client(public_dir):
    """Test client whose application serves the temporary public directory."""
    settings = dataclasses.replace(get_settings(), public_dir=public_dir)
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test that edits the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()
