"""Session handoff pipeline.

Summarize a working session for a stated goal, open a child session,
and deliver the summary into it when the user switches over.

Classes
-------
HandoffCategory, HandoffRequest
    Goal category and validated request.
GoalClassifier, ClassificationRule
    Ordered rule table mapping goals to categories.
HandoffAnalyzer
    One completion round-trip producing the handoff text.
PendingHandoff, PendingHandoffRegistry
    Prompts waiting for their session, with expiry.
HandoffCoordinator, HandoffResult
    Creation and delivery entry points.
HandoffSettings
    Pipeline tunables.
"""
from __future__ import annotations

from agent_session_handoff.handoff.analyzer import HandoffAnalyzer
from agent_session_handoff.handoff.best_effort import best_effort
from agent_session_handoff.handoff.category import HandoffCategory, HandoffRequest
from agent_session_handoff.handoff.classifier import (
    ClassificationRule,
    GoalClassifier,
    classify,
)
from agent_session_handoff.handoff.coordinator import HandoffCoordinator, HandoffResult
from agent_session_handoff.handoff.errors import (
    AnalysisFailedError,
    HandoffError,
    InvalidInputError,
    SessionCreationFailedError,
)
from agent_session_handoff.handoff.references import extract_file_references
from agent_session_handoff.handoff.registry import PendingHandoff, PendingHandoffRegistry
from agent_session_handoff.handoff.settings import HandoffSettings
from agent_session_handoff.handoff.templates import build_system_prompt, build_user_prompt
from agent_session_handoff.handoff.titles import derive_session_title

__all__ = [
    "AnalysisFailedError",
    "ClassificationRule",
    "GoalClassifier",
    "HandoffAnalyzer",
    "HandoffCategory",
    "HandoffCoordinator",
    "HandoffError",
    "HandoffRequest",
    "HandoffResult",
    "HandoffSettings",
    "InvalidInputError",
    "PendingHandoff",
    "PendingHandoffRegistry",
    "SessionCreationFailedError",
    "best_effort",
    "build_system_prompt",
    "build_user_prompt",
    "classify",
    "derive_session_title",
    "extract_file_references",
]
