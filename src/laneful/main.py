"""FastAPI application factory for the Laneful webhook receiver."""

import logging

from fastapi import FastAPI

from laneful.config import settings
from laneful.logging_config import configure_logging
from laneful.version import __version__
from laneful.webhooks.dispatcher import EventDispatcher, default_dispatcher

logger = logging.getLogger(__name__)


def create_app(dispatcher: EventDispatcher | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        dispatcher: Event handlers to run for verified webhooks. Defaults to
            one that logs each event.
    """
    app = FastAPI(
        title="Laneful Webhooks",
        version=__version__,
        description="Receiver for signed Laneful email event webhooks.",
    )
    app.state.dispatcher = dispatcher if dispatcher is not None else default_dispatcher()

    from laneful.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from laneful.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from laneful.api.router import api_router
    app.include_router(api_router)

    return app


def build_app() -> FastAPI:
    """Configure logging from settings and build the app (uvicorn factory)."""
    configure_logging(log_level=settings.log_level, json_output=settings.json_logs)
    logger.info("Laneful webhook receiver starting (version=%s)", __version__)
    return create_app()
