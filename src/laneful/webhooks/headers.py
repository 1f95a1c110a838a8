"""Locate the webhook signature among request headers.

Depending on the framework, the header shows up as ``x-webhook-signature``
(raw/Starlette headers), ``X_WEBHOOK_SIGNATURE``, or ``HTTP_X_WEBHOOK_SIGNATURE``
(WSGI/CGI-style environ).
"""

from __future__ import annotations

from collections.abc import Mapping

SIGNATURE_HEADER = "x-webhook-signature"
SIGNATURE_HEADER_ENV = SIGNATURE_HEADER.upper().replace("-", "_")
SIGNATURE_HEADER_WSGI = f"HTTP_{SIGNATURE_HEADER_ENV}"

# Lookup order
SIGNATURE_HEADER_KEYS: tuple[str, ...] = (
    SIGNATURE_HEADER,
    SIGNATURE_HEADER_ENV,
    SIGNATURE_HEADER_WSGI,
)


def signature_header_name() -> str:
    """Canonical name of the signature header."""
    return SIGNATURE_HEADER


def extract_signature(headers: Mapping[str, str] | None) -> str | None:
    """Return the signature header value, or None if no spelling is present."""
    if not headers:
        return None
    for key in SIGNATURE_HEADER_KEYS:
        value = headers.get(key)
        if value is not None:
            return value
    return None
