"""Verify-and-parse entry point for inbound webhook requests."""

from __future__ import annotations

from collections.abc import Mapping

from laneful.errors.exceptions import AuthError
from laneful.models.webhook import ParsedWebhook
from laneful.webhooks.headers import extract_signature
from laneful.webhooks.payload import parse_webhook_payload
from laneful.webhooks.signature import verify_signature


class WebhookVerifier:
    """Authenticates and parses webhook requests signed with one secret.

    Holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, secret: str | bytes | None):
        self._secret = secret

    def __repr__(self) -> str:
        return "WebhookVerifier(secret=***)"

    def verify_and_parse(
        self,
        body: str | bytes | None,
        headers: Mapping[str, str] | None,
    ) -> ParsedWebhook:
        """Authenticate the request, then parse and validate its body.

        Args:
            body: Raw request body, unmodified.
            headers: Request headers or a WSGI-style environ mapping.

        Returns:
            ParsedWebhook with events in payload order.

        Raises:
            AuthError: Signature header missing or signature invalid.
            PayloadError: Body is not a valid event payload.
        """
        signature = extract_signature(headers)
        if signature is None:
            raise AuthError("missing signature header")

        if not verify_signature(self._secret, body, signature):
            raise AuthError("invalid signature")

        return parse_webhook_payload(body)


def verify_and_parse(
    secret: str | bytes | None,
    body: str | bytes | None,
    headers: Mapping[str, str] | None,
) -> ParsedWebhook:
    """Shortcut for ``WebhookVerifier(secret).verify_and_parse(body, headers)``."""
    return WebhookVerifier(secret).verify_and_parse(body, headers)
