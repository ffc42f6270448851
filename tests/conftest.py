# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from restservice.core.config import Settings
from restservice.main import create_app
from restservice.testing import LiveServer, Scenario


@pytest.fixture
def app():
    # fresh app per test, so ids start at 1
    return create_app(Settings(CORS_ORIGINS=["http://example.com"]))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="module")
def live_server():
    with LiveServer(create_app()) as server:
        yield server


@pytest.fixture
def scenario(live_server):
    with Scenario(live_server.base_url) as s:
        yield s
