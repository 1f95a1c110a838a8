"""Laneful Python SDK — email sending and webhook verification."""

from laneful.client import LanefulClient
from laneful.errors.exceptions import (
    ApiError,
    AuthError,
    HttpError,
    LanefulError,
    PayloadError,
    ValidationError,
)
from laneful.models.email import Address, Attachment, Email, EmailBuilder, TrackingSettings
from laneful.models.enums import EventType
from laneful.models.webhook import ParsedWebhook, WebhookEvent
from laneful.version import __version__
from laneful.webhooks import (
    EventDispatcher,
    WebhookVerifier,
    extract_signature,
    generate_signature,
    parse_webhook_payload,
    verify_and_parse,
    verify_signature,
)

__all__ = [
    "__version__",
    "LanefulClient",
    "LanefulError",
    "ApiError",
    "AuthError",
    "HttpError",
    "PayloadError",
    "ValidationError",
    "Address",
    "Attachment",
    "Email",
    "EmailBuilder",
    "TrackingSettings",
    "EventType",
    "ParsedWebhook",
    "WebhookEvent",
    "EventDispatcher",
    "WebhookVerifier",
    "extract_signature",
    "generate_signature",
    "parse_webhook_payload",
    "verify_and_parse",
    "verify_signature",
]
