"""Webhook signature generation and constant-time verification.

Laneful signs the raw request body with HMAC-SHA256 keyed by the shared
webhook secret and sends the lowercase hex digest, optionally prefixed with
``sha256=``, in the ``x-webhook-signature`` header.

Verification never raises: anything that prevents a positive match
(blank secret, missing payload, malformed signature, unexpected error)
yields ``False``.
"""

from __future__ import annotations

import hashlib
import hmac

SIGNATURE_ALGORITHM = "sha256"
SIGNATURE_PREFIX = "sha256="


def _to_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return value.encode("utf-8")


def generate_signature(
    secret: str | bytes,
    payload: str | bytes,
    include_prefix: bool = False,
) -> str:
    """Compute the HMAC-SHA256 signature of a payload.

    Args:
        secret: Shared webhook secret. Empty is allowed.
        payload: Raw request body, exactly as sent on the wire.
        include_prefix: Prepend ``sha256=`` to the hex digest.

    Returns:
        Lowercase hex digest, optionally prefixed.
    """
    digest = hmac.new(
        _to_bytes(secret),
        _to_bytes(payload),
        getattr(hashlib, SIGNATURE_ALGORITHM),
    ).hexdigest()
    if include_prefix:
        return f"{SIGNATURE_PREFIX}{digest}"
    return digest


def secure_compare(a: str | bytes, b: str | bytes) -> bool:
    """Compare two values in constant time.

    Only a length mismatch returns early; equal-length inputs are compared
    over every byte.
    """
    a_bytes = _to_bytes(a)
    b_bytes = _to_bytes(b)
    if len(a_bytes) != len(b_bytes):
        return False
    return hmac.compare_digest(a_bytes, b_bytes)


def _is_blank(value: str | bytes | None) -> bool:
    return value is None or not value.strip()


def verify_signature(
    secret: str | bytes | None,
    payload: str | bytes | None,
    signature: str | None,
) -> bool:
    """Check a received signature against the payload.

    Args:
        secret: Shared webhook secret.
        payload: Raw request body.
        signature: Header value, with or without the ``sha256=`` prefix.

    Returns:
        True only if the signature matches.
    """
    try:
        if _is_blank(secret) or payload is None or _is_blank(signature):
            return False

        candidate = signature.strip()
        if candidate.startswith(SIGNATURE_PREFIX):
            candidate = candidate[len(SIGNATURE_PREFIX):]

        expected = generate_signature(secret, payload)
        return secure_compare(expected, candidate)
    except Exception:
        return False
