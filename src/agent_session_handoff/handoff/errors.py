"""Hard-failure exceptions raised by the handoff pipeline.

Every exception here aborts a handoff before a pending entry is
registered.  UI notification failures are not represented: they are
absorbed by :func:`agent_session_handoff.handoff.best_effort.best_effort`.

Classes
-------
- HandoffError                — base class for all hard failures
- InvalidInputError           — empty goal or unknown category override
- AnalysisFailedError         — completion service produced nothing usable
- SessionCreationFailedError  — session service did not create a session
"""
from __future__ import annotations


class HandoffError(Exception):
    """Base class for errors that abort a handoff."""


class InvalidInputError(HandoffError, ValueError):
    """Raised when a handoff request is rejected before any I/O."""


class AnalysisFailedError(HandoffError):
    """Raised when the completion service returns no usable handoff text."""

    def __init__(self, session_id: str, reason: str) -> None:
        self.session_id = session_id
        self.reason = reason
        super().__init__(f"Failed to get handoff analysis for session {session_id!r}: {reason}")


class SessionCreationFailedError(HandoffError):
    """Raised when the session service reports no created session."""

    def __init__(self, parent_session_id: str) -> None:
        self.parent_session_id = parent_session_id
        super().__init__(
            f"Failed to create new session (parent {parent_session_id!r})."
        )
