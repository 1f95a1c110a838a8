"""Tests for webhook payload parsing and event validation."""

import json

import pytest

from conftest import LANE_ID, make_event, to_body
from laneful.errors.exceptions import PayloadError
from laneful.models.enums import BatchMode, EventType
from laneful.webhooks.payload import REQUIRED_FIELDS, parse_webhook_payload, validate_event


def _reason(raw) -> str:
    with pytest.raises(PayloadError) as exc_info:
        parse_webhook_payload(raw)
    return exc_info.value.reason


def test_parse_single_event():
    """A bare object is single mode with one event."""
    event = make_event(metadata={"campaign_id": "test"}, tag="newsletter")
    result = parse_webhook_payload(to_body(event))
    assert result.is_batch is False
    assert result.mode == BatchMode.SINGLE
    assert len(result.events) == 1
    assert result.events[0].event == EventType.DELIVERY
    assert result.events[0].email == "user@example.com"


def test_parse_batch_preserves_order():
    events = [
        make_event("delivery", email="user1@example.com"),
        make_event("open", email="user2@example.com", message_id="m2", timestamp=1753502500),
    ]
    result = parse_webhook_payload(to_body(events))
    assert result.is_batch is True
    assert result.mode == BatchMode.BATCH
    assert [e.event for e in result.events] == ["delivery", "open"]
    assert [e.email for e in result.events] == ["user1@example.com", "user2@example.com"]


def test_single_element_array_is_still_batch():
    """Batch mode follows the JSON shape, not the event count."""
    event = make_event()
    single = parse_webhook_payload(to_body(event))
    batch = parse_webhook_payload(to_body([event]))
    assert single.is_batch is False
    assert batch.is_batch is True
    assert single.events == batch.events


@pytest.mark.parametrize("event_type", [e.value for e in EventType])
def test_all_event_types_accepted(event_type):
    result = parse_webhook_payload(to_body(make_event(event_type)))
    assert result.events[0].event == event_type


def test_optional_fields_pass_through_unchanged():
    event = make_event(
        "click",
        url="https://example.com/a?b=c",
        metadata={"campaign_id": "camp_456", "nested": [1, 2, {"x": None}]},
        tag="newsletter-campaign",
        client_device="iPhone",
    )
    parsed = parse_webhook_payload(to_body(event)).events[0]
    assert parsed.to_dict() == event
    assert parsed.extra_fields == {
        "url": "https://example.com/a?b=c",
        "metadata": {"campaign_id": "camp_456", "nested": [1, 2, {"x": None}]},
        "tag": "newsletter-campaign",
        "client_device": "iPhone",
    }
    assert parsed.get("url") == "https://example.com/a?b=c"
    assert parsed.get("is_hard", False) is False


def test_accepts_str_input():
    result = parse_webhook_payload(json.dumps(make_event()))
    assert len(result) == 1


@pytest.mark.parametrize("raw", ["", b"", "   \n\t", None])
def test_empty_payload(raw):
    assert _reason(raw) == "payload empty"


def test_invalid_json():
    assert _reason('{"event":"delivery","email"').startswith("invalid JSON: ")


def test_invalid_utf8_is_invalid_json():
    assert _reason(b'{"event":"\xff"}').startswith("invalid JSON: ")


def test_deeply_nested_json_is_rejected_not_crashing():
    assert _reason("[" * 100000 + "]" * 100000).startswith("invalid JSON")


def test_oversized_timestamp_string_is_invalid_timestamp():
    assert _reason(to_body(make_event(timestamp="1" * 5000))) == "invalid timestamp format"


def test_oversized_timestamp_literal_is_invalid_json():
    body = to_body(make_event(timestamp=0)).replace(b'"timestamp":0', b'"timestamp":' + b"1" * 5000)
    assert _reason(body).startswith("invalid JSON: ")


def test_oversized_integer_in_pass_through_field_is_invalid_json():
    body = to_body(make_event(metadata={"n": 0})).replace(b'"n":0', b'"n":' + b"1" * 5000)
    assert _reason(body).startswith("invalid JSON: ")


@pytest.mark.parametrize("raw", ['{"email":"user@example.com"}', "42", '"text"', "null", "true"])
def test_invalid_structure(raw):
    assert _reason(raw) == "invalid payload structure"


def test_empty_batch_is_invalid_structure():
    assert _reason("[]") == "invalid payload structure"


def test_batch_element_must_be_object():
    assert _reason(to_body([make_event(), "not-an-object"])) == "event must be an object"


def test_missing_fields_reported_in_declared_order():
    assert _reason('{"event":"delivery"}') == "missing required field: email"


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_each_required_field_is_checked(field):
    event = make_event()
    del event[field]
    if field == "event":
        # without "event" a bare object is not a recognised shape
        assert _reason(to_body([event])) == "missing required field: event"
    else:
        assert _reason(to_body(event)) == f"missing required field: {field}"


def test_invalid_event_type():
    assert _reason(to_body(make_event("not_a_real_type"))) == "invalid event type: not_a_real_type"


def test_event_type_is_case_sensitive():
    assert _reason(to_body(make_event("Delivery"))) == "invalid event type: Delivery"


@pytest.mark.parametrize("email", ["not-an-email", "user@localhost", "user.example.com"])
def test_invalid_email(email):
    assert _reason(to_body(make_event(email=email))) == f"invalid email format: {email}"


def test_email_check_is_coarse():
    """Only '@' and '.' are required."""
    result = parse_webhook_payload(to_body(make_event(email="a@b.c")))
    assert result.events[0].email == "a@b.c"


def test_invalid_lane_id():
    assert _reason(to_body(make_event(lane_id="not-a-uuid"))) == "invalid lane_id format: not-a-uuid"


def test_lane_id_rejects_trailing_garbage():
    lane_id = LANE_ID + "\n"
    assert _reason(to_body(make_event(lane_id=lane_id))).startswith("invalid lane_id format")


def test_lane_id_is_case_insensitive():
    upper = LANE_ID.upper()
    result = parse_webhook_payload(to_body(make_event(lane_id=upper)))
    assert result.events[0].lane_id == upper


@pytest.mark.parametrize("timestamp", ["abc", "12.5", 12.5, None, True, [], ""])
def test_invalid_timestamp(timestamp):
    assert _reason(to_body(make_event(timestamp=timestamp))) == "invalid timestamp format"


@pytest.mark.parametrize("timestamp", [1753502407, "1753502407", 1753502407.0])
def test_timestamp_normalized_to_int(timestamp):
    result = parse_webhook_payload(to_body(make_event(timestamp=timestamp)))
    assert result.events[0].timestamp == 1753502407


def test_non_string_message_id_rejected():
    assert _reason(to_body(make_event(message_id=123))) == "invalid message_id format: 123"


def test_validation_checks_event_before_email():
    event = make_event("bogus", email="nope")
    assert _reason(to_body(event)) == "invalid event type: bogus"


def test_batch_stops_at_first_invalid_event():
    events = [make_event(), make_event(email="bad"), make_event("bogus")]
    assert _reason(to_body(events)) == "invalid email format: bad"


def test_validate_event_returns_model():
    event = validate_event(make_event("bounce", is_hard=True))
    assert event.event == EventType.BOUNCE
    assert event.get("is_hard") is True


def test_validate_event_rejects_non_object():
    with pytest.raises(PayloadError, match="event must be an object"):
        validate_event(["delivery"])
