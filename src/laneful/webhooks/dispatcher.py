"""Route validated webhook events to per-event-type handlers.

Handlers may be plain functions or coroutines. They run in registration
order for each event, and events run in payload order. A handler that
raises stops the dispatch and the exception propagates to the caller.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Union

from laneful.models.enums import EventType
from laneful.models.webhook import ParsedWebhook, WebhookEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[WebhookEvent], Union[None, Awaitable[None]]]


class EventDispatcher:
    """Registry of event handlers keyed by event type."""

    def __init__(self) -> None:
        self._handlers: dict[EventType, list[EventHandler]] = {}

    def register(self, event_type: EventType | str, handler: EventHandler) -> None:
        self._handlers.setdefault(EventType(event_type), []).append(handler)

    def on(self, event_type: EventType | str) -> Callable[[EventHandler], EventHandler]:
        """Decorator form of :meth:`register`."""

        def _decorator(handler: EventHandler) -> EventHandler:
            self.register(event_type, handler)
            return handler

        return _decorator

    def handlers_for(self, event_type: EventType | str) -> list[EventHandler]:
        return list(self._handlers.get(EventType(event_type), []))

    async def dispatch(self, parsed: ParsedWebhook) -> int:
        """Run the handlers for every event.

        Returns:
            Number of events processed.
        """
        processed = 0
        for event in parsed.events:
            handlers = self._handlers.get(event.event, [])
            if not handlers:
                logger.debug("No handler for %s event %s", event.event, event.message_id)
            for handler in handlers:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            processed += 1
        return processed


def _log_delivery(event: WebhookEvent) -> None:
    logger.info("Email delivered to %s (message_id=%s)", event.email, event.message_id)


def _log_open(event: WebhookEvent) -> None:
    logger.info(
        "Email opened by %s on %s (%s)",
        event.email,
        event.get("client_device", "Unknown"),
        event.get("client_os", "Unknown"),
    )


def _log_click(event: WebhookEvent) -> None:
    logger.info("Link clicked by %s: %s", event.email, event.get("url", "Unknown URL"))


def _log_bounce(event: WebhookEvent) -> None:
    kind = "hard" if event.get("is_hard", False) else "soft"
    logger.warning("Email bounced (%s) for %s", kind, event.email)


def _log_drop(event: WebhookEvent) -> None:
    logger.warning("Email dropped for %s: %s", event.email, event.get("reason", "Unknown reason"))


def _log_spam_complaint(event: WebhookEvent) -> None:
    logger.warning("Spam complaint for %s (message_id=%s)", event.email, event.message_id)


def _log_unsubscribe(event: WebhookEvent) -> None:
    logger.info(
        "Unsubscribe from %s (group=%s)",
        event.email,
        event.get("unsubscribe_group_id"),
    )


_DEFAULT_HANDLERS: dict[EventType, EventHandler] = {
    EventType.DELIVERY: _log_delivery,
    EventType.OPEN: _log_open,
    EventType.CLICK: _log_click,
    EventType.BOUNCE: _log_bounce,
    EventType.DROP: _log_drop,
    EventType.SPAM_COMPLAINT: _log_spam_complaint,
    EventType.UNSUBSCRIBE: _log_unsubscribe,
}


def default_dispatcher() -> EventDispatcher:
    """Dispatcher that logs one line per event, by event type."""
    dispatcher = EventDispatcher()
    for event_type, handler in _DEFAULT_HANDLERS.items():
        dispatcher.register(event_type, handler)
    return dispatcher
