"""Inbound Laneful webhook endpoint.

Reads the raw body, authenticates it against the shared secret, validates
the events and hands each one to the app's dispatcher.
"""

import logging

from fastapi import APIRouter, Request

from laneful.dependencies import AppSettings, Dispatcher, TraceId, Verifier
from laneful.errors.exceptions import PayloadTooLargeError
from laneful.logging_config import bind_request_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Webhooks"])


async def _read_body(request: Request, limit: int) -> bytes:
    """Read the request body, refusing anything over ``limit`` bytes."""
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(limit)
    return bytes(body)


@router.post("/webhooks/laneful")
async def receive_webhook(
    request: Request,
    config: AppSettings,
    verifier: Verifier,
    dispatcher: Dispatcher,
    trace_id: TraceId,
) -> dict:
    """Verify, parse and dispatch a Laneful webhook delivery.

    401 for a missing/invalid signature, 400 for a malformed payload,
    413 for an oversized body.
    """
    if not config.webhook_secret_configured:
        logger.warning("LANEFUL_WEBHOOK_SECRET not set; every webhook will be rejected")

    body = await _read_body(request, config.max_webhook_body_bytes)
    parsed = verifier.verify_and_parse(body, request.headers)

    bind_request_context(trace_id, event_count=len(parsed), mode=parsed.mode)
    processed = await dispatcher.dispatch(parsed)

    logger.info(
        "Processed %d webhook event(s) in %s mode",
        processed,
        parsed.mode,
    )
    return {"status": "success", "processed": processed, "mode": parsed.mode.value}
