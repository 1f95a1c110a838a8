"""Trace ID middleware for request/response propagation."""

import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from laneful.logging_config import bind_request_context, clear_request_context

TRACE_ID_MIN_LENGTH = 7
TRACE_ID_MAX_LENGTH = 128


def _new_trace_id() -> str:
    return f"trc_{uuid.uuid4().hex[:16]}"


class TraceIdMiddleware(BaseHTTPMiddleware):
    """Extract X-Trace-Id from request or generate one, attach to response.

    Client ids outside 7-128 characters are replaced with a generated one.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        trace_id = request.headers.get("x-trace-id") or ""
        if not TRACE_ID_MIN_LENGTH <= len(trace_id) <= TRACE_ID_MAX_LENGTH:
            trace_id = _new_trace_id()
        request.state.trace_id = trace_id
        bind_request_context(trace_id)

        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Trace-Id"] = trace_id
        return response
