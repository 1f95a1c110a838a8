"""Webhook payload parsing and event validation.

A body is either one JSON object carrying an ``event`` key (single mode) or
a JSON array of such objects (batch mode). Every event is checked in order
and the first invalid one aborts parsing with a ``PayloadError`` whose
reason names the offending field or value.
"""

from __future__ import annotations

import json
import re
from typing import Any

from laneful.errors.exceptions import PayloadError
from laneful.models.enums import EventType
from laneful.models.webhook import ParsedWebhook, WebhookEvent

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS: tuple[str, ...] = ("event", "email", "lane_id", "message_id", "timestamp")

VALID_EVENT_TYPES: frozenset[str] = frozenset(e.value for e in EventType)

LANE_ID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_INTEGER_STRING = re.compile(r"[+-]?[0-9]+")


def _parse_timestamp(value: Any) -> int | None:
    """Return the timestamp as an int, or None if it is not integral."""
    # bool is an int subclass; JSON true/false is not a timestamp
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_STRING.fullmatch(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # longer than the interpreter's int conversion limit
            return None
    return None


def validate_event(candidate: Any) -> WebhookEvent:
    """Validate one decoded event object.

    Raises:
        PayloadError: On the first violated rule.
    """
    if not isinstance(candidate, dict):
        raise PayloadError("event must be an object")

    for name in REQUIRED_FIELDS:
        if name not in candidate:
            raise PayloadError(f"missing required field: {name}")

    event_type = candidate["event"]
    if not isinstance(event_type, str) or event_type not in VALID_EVENT_TYPES:
        raise PayloadError(f"invalid event type: {event_type}")

    email = candidate["email"]
    if not isinstance(email, str) or "@" not in email or "." not in email:
        raise PayloadError(f"invalid email format: {email}")

    timestamp = _parse_timestamp(candidate["timestamp"])
    if timestamp is None:
        raise PayloadError("invalid timestamp format")

    lane_id = candidate["lane_id"]
    if not isinstance(lane_id, str) or not LANE_ID_PATTERN.fullmatch(lane_id):
        raise PayloadError(f"invalid lane_id format: {lane_id}")

    message_id = candidate["message_id"]
    if not isinstance(message_id, str):
        raise PayloadError(f"invalid message_id format: {message_id}")

    return WebhookEvent.model_validate({**candidate, "timestamp": timestamp})


def _decode(raw: str | bytes | bytearray | None) -> Any:
    if raw is None:
        raise PayloadError("payload empty")
    if isinstance(raw, (bytes, bytearray)):
        try:
            text = bytes(raw).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadError(f"invalid JSON: {exc}") from exc
    else:
        text = raw
    if not text.strip():
        raise PayloadError("payload empty")

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise PayloadError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise PayloadError("invalid JSON: nesting too deep") from exc
    except ValueError as exc:
        # integer literals past the conversion limit
        raise PayloadError(f"invalid JSON: {exc}") from exc


def parse_webhook_payload(raw: str | bytes | bytearray | None) -> ParsedWebhook:
    """Parse and validate a raw webhook body.

    Args:
        raw: Request body as received.

    Returns:
        ParsedWebhook with the events in payload order.

    Raises:
        PayloadError: Empty body, invalid JSON, unsupported top-level shape,
            empty batch, or an invalid event.
    """
    data = _decode(raw)

    if isinstance(data, list):
        is_batch = True
        candidates = data
    elif isinstance(data, dict) and "event" in data:
        is_batch = False
        candidates = [data]
    else:
        raise PayloadError("invalid payload structure")

    if not candidates:
        raise PayloadError("invalid payload structure")

    events = [validate_event(candidate) for candidate in candidates]
    return ParsedWebhook(is_batch=is_batch, events=events)
