"""String enums for the Laneful webhook wire schema."""

from enum import StrEnum


class EventType(StrEnum):
    DELIVERY = "delivery"
    OPEN = "open"
    CLICK = "click"
    BOUNCE = "bounce"
    DROP = "drop"
    SPAM_COMPLAINT = "spam_complaint"
    UNSUBSCRIBE = "unsubscribe"


class BatchMode(StrEnum):
    SINGLE = "single"
    BATCH = "batch"
