"""Tests for signature header extraction."""

from starlette.datastructures import Headers

from laneful.webhooks.headers import (
    SIGNATURE_HEADER,
    SIGNATURE_HEADER_ENV,
    SIGNATURE_HEADER_WSGI,
    extract_signature,
    signature_header_name,
)


def test_header_name_constants():
    assert signature_header_name() == "x-webhook-signature"
    assert SIGNATURE_HEADER == "x-webhook-signature"
    assert SIGNATURE_HEADER_ENV == "X_WEBHOOK_SIGNATURE"
    assert SIGNATURE_HEADER_WSGI == "HTTP_X_WEBHOOK_SIGNATURE"


def test_extract_canonical_header():
    assert extract_signature({"x-webhook-signature": "sha256=abc123"}) == "sha256=abc123"


def test_extract_upper_snake_header():
    assert extract_signature({"X_WEBHOOK_SIGNATURE": "sha256=def456"}) == "sha256=def456"


def test_extract_wsgi_environ_header():
    environ = {"HTTP_X_WEBHOOK_SIGNATURE": "sha256=abc", "CONTENT_TYPE": "application/json"}
    assert extract_signature(environ) == "sha256=abc"


def test_extract_prefers_canonical_spelling():
    headers = {
        "HTTP_X_WEBHOOK_SIGNATURE": "third",
        "X_WEBHOOK_SIGNATURE": "second",
        "x-webhook-signature": "first",
    }
    assert extract_signature(headers) == "first"


def test_extract_missing_header():
    assert extract_signature({"other-header": "value"}) is None
    assert extract_signature({}) is None
    assert extract_signature(None) is None


def test_extract_from_case_insensitive_headers():
    """Starlette headers match regardless of the sender's casing."""
    headers = Headers(raw=[(b"X-Webhook-Signature", b"sha256=xyz")])
    assert extract_signature(headers) == "sha256=xyz"


def test_extract_does_not_mutate_input():
    headers = {"X_WEBHOOK_SIGNATURE": "sig"}
    extract_signature(headers)
    assert headers == {"X_WEBHOOK_SIGNATURE": "sig"}
