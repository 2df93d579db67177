"""Host service interfaces and the values they exchange.

Classes
-------
CompletionService, SessionService, UIService
    Abstract collaborators implemented by the host.
ContentSegment, CompletionResponse, CreatedSession, Toast, ToastVariant
    Frozen pydantic values passed across the interfaces.
"""
from __future__ import annotations

from agent_session_handoff.services.base import (
    CompletionService,
    SessionService,
    UIService,
)
from agent_session_handoff.services.models import (
    CompletionResponse,
    ContentSegment,
    CreatedSession,
    Toast,
    ToastVariant,
)

__all__ = [
    "CompletionResponse",
    "CompletionService",
    "ContentSegment",
    "CreatedSession",
    "SessionService",
    "Toast",
    "ToastVariant",
    "UIService",
]
