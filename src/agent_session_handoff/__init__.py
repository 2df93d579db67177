"""agent-session-handoff — hand a working session off to a fresh one.

Given a session and a goal, generate a condensed handoff prompt, open a
child session, and deliver the prompt into it once the user switches
over.

Public API
----------
The stable public surface is everything exported from this module.

Example
-------
>>> import agent_session_handoff
>>> agent_session_handoff.__version__
'0.1.0'
"""
from __future__ import annotations

# Pipeline
from agent_session_handoff.handoff.analyzer import HandoffAnalyzer
from agent_session_handoff.handoff.best_effort import best_effort
from agent_session_handoff.handoff.category import HandoffCategory, HandoffRequest
from agent_session_handoff.handoff.classifier import ClassificationRule, GoalClassifier, classify
from agent_session_handoff.handoff.coordinator import HandoffCoordinator, HandoffResult
from agent_session_handoff.handoff.references import extract_file_references
from agent_session_handoff.handoff.registry import PendingHandoff, PendingHandoffRegistry
from agent_session_handoff.handoff.settings import HandoffSettings
from agent_session_handoff.handoff.templates import build_system_prompt, build_user_prompt
from agent_session_handoff.handoff.titles import derive_session_title

# Errors
from agent_session_handoff.handoff.errors import (
    AnalysisFailedError,
    HandoffError,
    InvalidInputError,
    SessionCreationFailedError,
)

# Host services
from agent_session_handoff.services import (
    CompletionResponse,
    CompletionService,
    ContentSegment,
    CreatedSession,
    SessionService,
    Toast,
    ToastVariant,
    UIService,
)

# Host event adapter
from agent_session_handoff.plugin import HandoffPlugin, HostEvent

__version__: str = "0.1.0"

__all__ = [
    "__version__",
    # Pipeline
    "ClassificationRule",
    "GoalClassifier",
    "HandoffAnalyzer",
    "HandoffCategory",
    "HandoffCoordinator",
    "HandoffRequest",
    "HandoffResult",
    "HandoffSettings",
    "PendingHandoff",
    "PendingHandoffRegistry",
    "best_effort",
    "build_system_prompt",
    "build_user_prompt",
    "classify",
    "derive_session_title",
    "extract_file_references",
    # Errors
    "AnalysisFailedError",
    "HandoffError",
    "InvalidInputError",
    "SessionCreationFailedError",
    # Host services
    "CompletionResponse",
    "CompletionService",
    "ContentSegment",
    "CreatedSession",
    "SessionService",
    "Toast",
    "ToastVariant",
    "UIService",
    # Host event adapter
    "HandoffPlugin",
    "HostEvent",
]
