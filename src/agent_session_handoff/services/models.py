"""Values exchanged with the host's completion, session, and UI services.

Classes
-------
- ContentSegment      — one typed piece of a completion reply
- CompletionResponse  — ordered segments returned by the completion service
- CreatedSession      — session returned by the session service
- ToastVariant        — severity of a toast notification
- Toast               — a toast notification request
"""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ContentSegment(BaseModel):
    """A typed piece of a completion reply.

    Parameters
    ----------
    kind:
        Segment type as reported by the service, e.g. ``"text"``,
        ``"reasoning"``, or ``"tool"``.
    text:
        Text payload.  Empty for segment kinds that carry none.
    """

    model_config = {"frozen": True}

    kind: str
    text: str = ""


class CompletionResponse(BaseModel):
    """The data payload of one completion round-trip."""

    model_config = {"frozen": True}

    segments: list[ContentSegment] = Field(default_factory=list)

    def text_segments(self) -> list[ContentSegment]:
        """Return the ``text`` segments in their original order."""
        return [s for s in self.segments if s.kind == "text"]


class CreatedSession(BaseModel):
    """A session created by the session service."""

    model_config = {"frozen": True}

    id: str
    title: str = ""


class ToastVariant(str, Enum):
    """Severity of a toast notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class Toast(BaseModel):
    """A toast notification request.

    Parameters
    ----------
    message:
        Body text.
    title:
        Optional heading.
    variant:
        Severity.  Default ``info``.
    duration_ms:
        How long the toast stays visible, in milliseconds.
    """

    model_config = {"frozen": True}

    message: str
    title: str | None = None
    variant: ToastVariant = ToastVariant.INFO
    duration_ms: int = Field(default=5000, ge=0)
