"""Pydantic models for outbound emails.

``to_dict()`` produces the JSON accepted by ``POST /v1/email/send``; unset
optional fields are left out. Rule violations raise
:class:`laneful.errors.exceptions.ValidationError`.
"""

from __future__ import annotations

import re
import time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from laneful.errors.exceptions import ValidationError

_EMAIL_ADDRESS = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


def _has_text(value: str | None) -> bool:
    return bool(value and value.strip())


class Address(BaseModel):
    """Email address with an optional display name."""

    model_config = ConfigDict(frozen=True)

    email: str
    name: str | None = None

    @model_validator(mode="after")
    def check_email(self) -> Address:
        if not _has_text(self.email):
            raise ValidationError("Email address cannot be empty")
        if not _EMAIL_ADDRESS.fullmatch(self.email):
            raise ValidationError(f"Invalid email address format: {self.email}")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Address:
        return cls(email=data.get("email") or "", name=data.get("name"))

    def to_dict(self) -> dict[str, str]:
        data = {"email": self.email}
        if self.name:
            data["name"] = self.name
        return data

    def __str__(self) -> str:
        if _has_text(self.name):
            return f"{self.name} <{self.email}>"
        return self.email


class TrackingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    opens: bool = False
    clicks: bool = False
    unsubscribes: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TrackingSettings:
        return cls(
            opens=bool(data.get("opens")),
            clicks=bool(data.get("clicks")),
            unsubscribes=bool(data.get("unsubscribes")),
        )

    def to_dict(self) -> dict[str, bool]:
        return self.model_dump()


class Attachment(BaseModel):
    """File attachment. ``content`` is already base64-encoded."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    content_type: str
    content: str

    @model_validator(mode="after")
    def check_fields(self) -> Attachment:
        if not _has_text(self.file_name):
            raise ValidationError("Filename cannot be empty")
        if not _has_text(self.content_type):
            raise ValidationError("Content type cannot be empty")
        if not _has_text(self.content):
            raise ValidationError("Content cannot be empty")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attachment:
        return cls(
            file_name=data.get("file_name") or data.get("filename") or "",
            content_type=data.get("content_type") or "",
            content=data.get("content") or "",
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "file_name": self.file_name,
            "content_type": self.content_type,
            "content": self.content,
        }

    def __str__(self) -> str:
        return (
            f"Attachment(file_name={self.file_name!r}, content_type={self.content_type!r}, "
            f"content_length={len(self.content)})"
        )


class Email(BaseModel):
    """A single outbound email."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender: Address | None = Field(None, alias="from")
    to: list[Address] = Field(default_factory=list)
    cc: list[Address] = Field(default_factory=list)
    bcc: list[Address] = Field(default_factory=list)
    subject: str | None = None
    text_content: str | None = None
    html_content: str | None = None
    template_id: str | None = None
    template_data: dict[str, Any] | None = None
    attachments: list[Attachment] = Field(default_factory=list)
    headers: dict[str, str] | None = None
    reply_to: Address | None = None
    send_time: int | None = None
    webhook_data: dict[str, Any] | None = None
    tag: str | None = None
    tracking: TrackingSettings | None = None

    @model_validator(mode="after")
    def check_rules(self) -> Email:
        if self.sender is None:
            raise ValidationError("From address is required")
        if not (self.to or self.cc or self.bcc):
            raise ValidationError("Email must have at least one recipient (to, cc, or bcc)")
        has_content = _has_text(self.text_content) or _has_text(self.html_content)
        if not (has_content or _has_text(self.template_id)):
            raise ValidationError("Email must have either content (text/HTML) or a template ID")
        if self.send_time is not None and self.send_time <= int(time.time()):
            raise ValidationError("Send time must be in the future")
        return self

    @classmethod
    def builder(cls) -> EmailBuilder:
        return EmailBuilder()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Email:
        """Build an Email from its wire representation."""
        builder = EmailBuilder()
        if data.get("from"):
            builder.sender(Address.from_dict(data["from"]))
        for item in data.get("to") or []:
            builder.to(Address.from_dict(item))
        for item in data.get("cc") or []:
            builder.cc(Address.from_dict(item))
        for item in data.get("bcc") or []:
            builder.bcc(Address.from_dict(item))
        for item in data.get("attachments") or []:
            builder.attachment(Attachment.from_dict(item))
        if data.get("reply_to"):
            builder.reply_to(Address.from_dict(data["reply_to"]))
        if data.get("tracking"):
            builder.tracking(TrackingSettings.from_dict(data["tracking"]))
        for key in (
            "subject",
            "text_content",
            "html_content",
            "template_id",
            "template_data",
            "headers",
            "send_time",
            "webhook_data",
            "tag",
        ):
            if data.get(key):
                getattr(builder, key)(data[key])
        return builder.build()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "from": self.sender.to_dict(),
            "to": [a.to_dict() for a in self.to],
        }
        if self.subject:
            data["subject"] = self.subject
        if self.cc:
            data["cc"] = [a.to_dict() for a in self.cc]
        if self.bcc:
            data["bcc"] = [a.to_dict() for a in self.bcc]
        if _has_text(self.text_content):
            data["text_content"] = self.text_content
        if _has_text(self.html_content):
            data["html_content"] = self.html_content
        if _has_text(self.template_id):
            data["template_id"] = self.template_id
        if self.template_data is not None:
            data["template_data"] = self.template_data
        if self.attachments:
            data["attachments"] = [a.to_dict() for a in self.attachments]
        if self.headers is not None:
            data["headers"] = self.headers
        if self.reply_to is not None:
            data["reply_to"] = self.reply_to.to_dict()
        if self.send_time is not None:
            data["send_time"] = self.send_time
        if self.webhook_data is not None:
            data["webhook_data"] = self.webhook_data
        if _has_text(self.tag):
            data["tag"] = self.tag
        if self.tracking is not None:
            data["tracking"] = self.tracking.to_dict()
        return data


class EmailBuilder:
    """Fluent builder for :class:`Email`."""

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {
            "to": [],
            "cc": [],
            "bcc": [],
            "attachments": [],
        }

    def _set(self, key: str, value: Any) -> EmailBuilder:
        self._fields[key] = value
        return self

    def sender(self, address: Address) -> EmailBuilder:
        return self._set("sender", address)

    def to(self, address: Address) -> EmailBuilder:
        self._fields["to"].append(address)
        return self

    def cc(self, address: Address) -> EmailBuilder:
        self._fields["cc"].append(address)
        return self

    def bcc(self, address: Address) -> EmailBuilder:
        self._fields["bcc"].append(address)
        return self

    def attachment(self, attachment: Attachment) -> EmailBuilder:
        self._fields["attachments"].append(attachment)
        return self

    def subject(self, subject: str) -> EmailBuilder:
        return self._set("subject", subject)

    def text_content(self, content: str) -> EmailBuilder:
        return self._set("text_content", content)

    def html_content(self, content: str) -> EmailBuilder:
        return self._set("html_content", content)

    def template_id(self, template_id: str) -> EmailBuilder:
        return self._set("template_id", template_id)

    def template_data(self, data: dict[str, Any]) -> EmailBuilder:
        return self._set("template_data", dict(data))

    def headers(self, headers: dict[str, str]) -> EmailBuilder:
        return self._set("headers", dict(headers))

    def reply_to(self, address: Address) -> EmailBuilder:
        return self._set("reply_to", address)

    def send_time(self, send_time: int) -> EmailBuilder:
        return self._set("send_time", send_time)

    def webhook_data(self, data: dict[str, Any]) -> EmailBuilder:
        return self._set("webhook_data", dict(data))

    def tag(self, tag: str) -> EmailBuilder:
        return self._set("tag", tag)

    def tracking(self, tracking: TrackingSettings) -> EmailBuilder:
        return self._set("tracking", tracking)

    def build(self) -> Email:
        fields = dict(self._fields)
        for key in ("to", "cc", "bcc", "attachments"):
            fields[key] = list(fields[key])
        return Email(**fields)
