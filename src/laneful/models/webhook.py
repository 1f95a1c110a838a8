"""Pydantic models for inbound webhook events."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from laneful.models.enums import BatchMode, EventType


class WebhookEvent(BaseModel):
    """One validated webhook event.

    The five required fields are typed; everything else the provider sends
    (``url``, ``is_hard``, ``reason``, ``metadata``, ``tag``...) is kept
    verbatim as extra fields.

    ``timestamp`` is always an int, even when the provider sent it as a
    digit string or an integral float, so ``to_dict()`` can differ from the
    wire object in that one field.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    event: EventType
    email: str
    lane_id: str
    message_id: str
    timestamp: int

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Optional, provider-specific fields in wire order."""
        return dict(self.model_extra or {})

    def get(self, key: str, default: Any = None) -> Any:
        """Dict-style access to any field, required or optional."""
        if key in type(self).model_fields:
            return getattr(self, key)
        return (self.model_extra or {}).get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Full event as plain JSON-compatible data."""
        return self.model_dump(mode="json")


class ParsedWebhook(BaseModel):
    """Result of parsing a webhook body.

    ``is_batch`` reflects the JSON shape (array vs. object), not the number
    of events: a one-element array is still a batch.
    """

    model_config = ConfigDict(frozen=True)

    is_batch: bool
    events: list[WebhookEvent] = Field(..., min_length=1)

    @property
    def mode(self) -> BatchMode:
        return BatchMode.BATCH if self.is_batch else BatchMode.SINGLE

    def __len__(self) -> int:
        return len(self.events)
