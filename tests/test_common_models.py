"""Test error response models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from laneful.errors.exceptions import (
    ApiError,
    AuthError,
    HttpError,
    LanefulError,
    PayloadError,
    PayloadTooLargeError,
)
from laneful.models.common import ErrorDetail, ErrorResponse


def test_error_response_serialization():
    error_resp = ErrorResponse(
        error=ErrorDetail(
            code="PAYLOAD_ERROR",
            message="missing required field: email",
            trace_id="trc_err_001",
            timestamp=datetime(2026, 2, 21, 10, 30, 0, tzinfo=timezone.utc),
        ),
    )
    dumped = error_resp.model_dump(mode="json", exclude_none=True)
    assert dumped["error"]["code"] == "PAYLOAD_ERROR"
    assert dumped["error"]["message"] == "missing required field: email"
    assert "details" not in dumped["error"]


def test_error_response_rejects_unknown_fields():
    """ErrorResponse should reject unknown fields (extra='forbid')."""
    with pytest.raises(ValidationError):
        ErrorResponse(
            error=ErrorDetail(
                code="TEST",
                message="test",
                trace_id="trc_test_001",
                timestamp=datetime.now(timezone.utc),
            ),
            unknown_field="should fail",
        )


def test_exception_status_codes():
    assert AuthError().status_code == 401
    assert AuthError().message == "invalid signature"
    assert PayloadError("payload empty").status_code == 400
    assert PayloadTooLargeError(10).status_code == 413
    assert HttpError("down").status_code == 502
    assert ApiError("failed", 429, "slow down").status_code == 429


def test_exceptions_share_base():
    for exc in (AuthError(), PayloadError("x"), HttpError("x"), ApiError("x", 500)):
        assert isinstance(exc, LanefulError)


def test_payload_error_reason():
    exc = PayloadError("invalid timestamp format")
    assert exc.reason == "invalid timestamp format"
    assert str(exc) == "invalid timestamp format"
