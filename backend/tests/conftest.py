"""
Shared fixtures. Gemini is always mocked — tests run without API keys.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app_factory import create_app
from auth.sessions import InMemorySessionStore
from config import Settings
from gemini.client import GeminiGateway

ADMIN_EMAIL = "admin@pilgrimpath.com"
ADMIN_PASSWORD = "admin"


@pytest.fixture
def settings():
    return Settings(gemini_api_key="test-key", admin_email=ADMIN_EMAIL, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def genai_client():
    """Stand-in for google.genai.Client; only aio.models.generate_content is used."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text="hi there"))
    return client


@pytest.fixture
def gateway(genai_client):
    return GeminiGateway(genai_client, model="gemini-2.5-flash", timeout_seconds=5)


@pytest.fixture
def sessions():
    return InMemorySessionStore()


@pytest.fixture
def app(settings, sessions, gateway):
    return create_app(settings, session_store=sessions, gateway=gateway)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def token(client):
    resp = client.post("/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
