"""Shared test fixtures."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from laneful.config import Settings
from laneful.dependencies import get_settings
from laneful.webhooks.dispatcher import EventDispatcher
from laneful.webhooks.signature import generate_signature

SECRET = "test-secret-key"
LANE_ID = "5805dd85-ed8c-44db-91a7-1d53a41c86a5"


def make_event(event_type: str = "delivery", **overrides) -> dict:
    """Build a valid webhook event dict."""
    event = {
        "event": event_type,
        "email": "user@example.com",
        "lane_id": LANE_ID,
        "message_id": "H-1-019844e340027d728a7cfda632e14d0a",
        "timestamp": 1753502407,
    }
    event.update(overrides)
    return event


def to_body(data) -> bytes:
    return json.dumps(data, separators=(",", ":")).encode("utf-8")


def signed_headers(body: bytes, secret: str = SECRET, prefix: bool = True) -> dict[str, str]:
    return {
        "x-webhook-signature": generate_signature(secret, body, include_prefix=prefix),
        "content-type": "application/json",
    }


@pytest.fixture
def test_settings():
    return Settings(webhook_secret=SECRET, max_webhook_body_bytes=4096)


@pytest.fixture
def received():
    """Events seen by the recording dispatcher, in order."""
    return []


@pytest.fixture
def dispatcher(received):
    """Dispatcher that records every event it handles."""
    d = EventDispatcher()
    for event_type in ("delivery", "open", "click", "bounce", "drop", "spam_complaint", "unsubscribe"):
        d.register(event_type, received.append)
    return d


@pytest.fixture
def app(test_settings, dispatcher):
    """Create a test application instance with test settings."""
    from laneful.main import create_app

    _app = create_app(dispatcher=dispatcher)
    _app.dependency_overrides[get_settings] = lambda: test_settings
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
