"""Abstract interfaces for the host services a handoff talks to.

The handoff pipeline never talks to an LLM, a session store, or a UI
directly.  The host supplies concrete implementations of these classes.

Classes
-------
- CompletionService  — one-shot text completion in a session's context
- SessionService     — creates child sessions
- UIService          — fire-and-forget UI commands and toasts
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from agent_session_handoff.services.models import (
    CompletionResponse,
    CreatedSession,
    Toast,
)


class CompletionService(ABC):
    """Submits a prompt to the LLM using an existing session as context."""

    @abstractmethod
    async def submit(
        self,
        session_id: str,
        system: str,
        user: str,
    ) -> CompletionResponse | None:
        """Run one completion round-trip.

        Parameters
        ----------
        session_id:
            Session whose conversation the model should see as history.
        system:
            System instruction.
        user:
            User instruction.

        Returns
        -------
        CompletionResponse | None
            The reply segments, or ``None`` when the service produced no
            data payload.
        """


class SessionService(ABC):
    """Creates sessions in the host."""

    @abstractmethod
    async def create(self, parent_id: str, title: str) -> CreatedSession | None:
        """Create a child session of *parent_id* titled *title*.

        Returns
        -------
        CreatedSession | None
            The new session, or ``None`` when the host created nothing.
        """


class UIService(ABC):
    """The host's user-interface surface."""

    @abstractmethod
    async def publish(self, event: dict[str, Any]) -> None:
        """Publish a UI event (for example a command to execute)."""

    @abstractmethod
    async def show_toast(self, toast: Toast) -> None:
        """Show a toast notification."""

    @abstractmethod
    async def append_prompt(self, text: str) -> None:
        """Append *text* to the active session's input box."""
