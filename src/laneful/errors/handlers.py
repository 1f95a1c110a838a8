"""FastAPI exception handlers producing the ErrorResponse envelope."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from laneful.errors.exceptions import AuthError, LanefulError
from laneful.models.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(LanefulError)
    async def laneful_error_handler(request: Request, exc: LanefulError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        if isinstance(exc, AuthError):
            logger.warning(
                "webhook_auth_rejected path=%s client=%s reason=%s trace_id=%s",
                request.url.path,
                request.client.host if request.client else None,
                exc.message,
                trace_id,
            )
        else:
            logger.info(
                "request_rejected code=%s status=%s reason=%s trace_id=%s",
                exc.code,
                exc.status_code,
                exc.message,
                trace_id,
            )
        error_response = ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                trace_id=trace_id,
                timestamp=datetime.now(timezone.utc),
            ),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(mode="json", exclude_none=True),
        )
