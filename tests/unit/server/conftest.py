"""Fixtures for server tests."""

import pytest
from fastapi.testclient import TestClient

from wiseguy.server.api import app, create_app


@pytest.fixture
def test_client(skill_app):
    """Client for a configured server. Lifespan is not run."""
    client = TestClient(create_app(skill_app))
    yield client
    app.state.skill_app = None


@pytest.fixture
def unconfigured_client():
    """Client for a server that has no skill loaded."""
    app.state.skill_app = None
    return TestClient(app)
