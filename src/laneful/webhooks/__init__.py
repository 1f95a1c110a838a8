"""Laneful webhooks package — signature verification and event parsing."""

from laneful.webhooks.dispatcher import EventDispatcher, default_dispatcher
from laneful.webhooks.headers import (
    SIGNATURE_HEADER,
    extract_signature,
    signature_header_name,
)
from laneful.webhooks.payload import parse_webhook_payload, validate_event
from laneful.webhooks.signature import (
    SIGNATURE_PREFIX,
    generate_signature,
    secure_compare,
    verify_signature,
)
from laneful.webhooks.verifier import WebhookVerifier, verify_and_parse

__all__ = [
    "EventDispatcher",
    "default_dispatcher",
    "SIGNATURE_HEADER",
    "extract_signature",
    "signature_header_name",
    "parse_webhook_payload",
    "validate_event",
    "SIGNATURE_PREFIX",
    "generate_signature",
    "secure_compare",
    "verify_signature",
    "WebhookVerifier",
    "verify_and_parse",
]
