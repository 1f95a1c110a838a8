"""Async client for the Laneful email API."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

import httpx

from laneful.config import Settings, settings
from laneful.errors.exceptions import ApiError, HttpError, ValidationError
from laneful.models.email import Email
from laneful.version import API_VERSION, USER_AGENT

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_SUCCESS_STATUSES = (200, 201, 202)
_MAX_ERROR_BODY = 500
_HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)


def _truncate(body: str, max_length: int = _MAX_ERROR_BODY) -> str:
    if len(body) <= max_length:
        return body
    return f"{body[:max_length]}..."


class LanefulClient:
    """Sends emails through ``POST /v1/email/send``.

    Use as an async context manager, or call :meth:`aclose` when done::

        async with LanefulClient("https://api.laneful.com", token) as client:
            await client.send_email(email)
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or "").strip().rstrip("/")
        self.auth_token = (auth_token or "").strip()
        self.timeout = timeout
        self._validate_configuration()

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self._default_headers(),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, config: Settings | None = None, **kwargs: Any) -> LanefulClient:
        """Build a client from environment configuration."""
        config = config or settings
        return cls(config.base_url, config.api_token, timeout=config.timeout, **kwargs)

    async def __aenter__(self) -> LanefulClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def __repr__(self) -> str:
        return f"LanefulClient(base_url={self.base_url!r})"

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    async def send_email(self, email: Email) -> dict[str, Any]:
        """Send a single email."""
        return await self.send_emails([email])

    async def send_emails(self, emails: Iterable[Email]) -> dict[str, Any]:
        """Send a batch of emails in one request.

        Returns:
            Decoded JSON response body ({} when the body is empty).

        Raises:
            ValidationError: Empty batch or non-Email items.
            ApiError: The API answered with an error status.
            HttpError: Transport failure, unknown endpoint or undecodable body.
        """
        emails = list(emails or [])
        if not emails:
            raise ValidationError("Emails list cannot be empty")
        if not all(isinstance(e, Email) for e in emails):
            raise ValidationError("All emails must be Email instances")

        path = f"/{API_VERSION}/email/send"
        body = {"emails": [e.to_dict() for e in emails]}

        try:
            response = await self._http.post(path, json=body)
        except httpx.HTTPError as exc:
            logger.error("Laneful request to %s failed: %s", path, exc)
            raise HttpError(f"Request to {self.base_url}{path} failed: {exc}") from exc

        logger.info("Laneful send of %d email(s) returned %s", len(emails), response.status_code)
        return self._handle_response(response)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _validate_configuration(self) -> None:
        if not self.base_url:
            raise ValidationError("Base URL cannot be empty")
        if not self.auth_token:
            raise ValidationError("Auth token cannot be empty")
        if not _HTTP_URL.match(self.base_url):
            raise ValidationError("Base URL must be a valid HTTP/HTTPS URL")

    def _default_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.auth_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        url = str(response.request.url)
        status = response.status_code

        if status in _SUCCESS_STATUSES:
            if not response.text.strip():
                return {}
            try:
                return response.json()
            except ValueError as exc:
                raise HttpError(
                    f"Failed to decode JSON response: {exc}. "
                    f"Response body: {_truncate(response.text)}. URL: {url}",
                    upstream_status=status,
                ) from exc

        if status == 404:
            raise HttpError(
                f"API endpoint not found (404). Check your base URL. Requested: {url}",
                upstream_status=status,
            )

        error_data = self._parse_error_body(response)
        error_message = error_data.get("error") or "Unknown API error"
        details = error_data.get("details") or ""
        full_error = f"{error_message} - {details}" if details else error_message
        logger.warning("Laneful API error %s from %s: %s", status, url, full_error)
        raise ApiError(f"API request failed to {url}", status, full_error)

    @staticmethod
    def _parse_error_body(response: httpx.Response) -> dict[str, Any]:
        if not response.text.strip():
            return {}
        try:
            data = response.json()
        except ValueError:
            return {"error": "Invalid JSON response", "details": _truncate(response.text)}
        return data if isinstance(data, dict) else {"details": str(data)}
