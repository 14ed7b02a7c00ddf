import pytest
from fastapi.testclient import TestClient

from playlist_api.app.core.config import Settings
from playlist_api.app.core.store import PlaylistStore
from playlist_api.app.main import create_app


@pytest.fixture
def app():
    """A fresh application seeded with the demo playlist."""
    return create_app(Settings(seed_demo_data=True))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(app) -> PlaylistStore:
    return app.state.store


@pytest.fixture
def empty_client():
    """A client for an application started without seed data."""
    with TestClient(create_app(Settings(seed_demo_data=False))) as test_client:
        yield test_client
