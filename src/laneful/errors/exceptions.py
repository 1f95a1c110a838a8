"""Custom exception classes for the Laneful SDK and webhook receiver."""


class LanefulError(Exception):
    """Base exception for Laneful."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class AuthError(LanefulError):
    """Webhook signature header missing or signature mismatch.

    The message is the same whichever part of the check failed.
    """

    def __init__(self, message: str = "invalid signature"):
        super().__init__("AUTH_ERROR", message, status_code=401)


class PayloadError(LanefulError):
    """Webhook body is not a well-formed, schema-valid event payload."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__("PAYLOAD_ERROR", reason, status_code=400)


class PayloadTooLargeError(LanefulError):
    """Webhook body exceeds the configured size ceiling."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            "PAYLOAD_TOO_LARGE",
            f"payload exceeds {limit} bytes",
            status_code=413,
        )


class ValidationError(LanefulError):
    """Outbound model or client configuration failed validation."""

    def __init__(self, message: str, details=None):
        super().__init__("VALIDATION_ERROR", message, details, status_code=400)


class ApiError(LanefulError):
    """The Laneful API answered with an error status."""

    def __init__(self, message: str, status_code: int, error_message: str | None = None):
        self.error_message = error_message
        super().__init__(
            "API_ERROR",
            message,
            details=error_message,
            status_code=status_code,
        )


class HttpError(LanefulError):
    """Communication with the Laneful API failed.

    ``upstream_status`` is the HTTP status received, if any.
    """

    def __init__(self, message: str, upstream_status: int | None = None):
        self.upstream_status = upstream_status
        super().__init__("HTTP_ERROR", message, status_code=502)
