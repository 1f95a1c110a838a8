"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from laneful.config import Settings, settings
from laneful.webhooks.dispatcher import EventDispatcher
from laneful.webhooks.verifier import WebhookVerifier


def get_settings() -> Settings:
    return settings


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


def get_verifier(config: Annotated[Settings, Depends(get_settings)]) -> WebhookVerifier:
    """Verifier keyed by the configured webhook secret."""
    return WebhookVerifier(config.webhook_secret)


def get_dispatcher(request: Request) -> EventDispatcher:
    """Return the event dispatcher installed on the app."""
    return request.app.state.dispatcher


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
TraceId = Annotated[str, Depends(get_trace_id)]
Verifier = Annotated[WebhookVerifier, Depends(get_verifier)]
Dispatcher = Annotated[EventDispatcher, Depends(get_dispatcher)]
