"""End-to-end handoff orchestration.

``HandoffCoordinator`` exposes the two entry points the host calls:

- :meth:`HandoffCoordinator.execute_handoff` — summarize the current
  session, create a child session, and park the generated prompt in the
  pending registry under the child's id.
- :meth:`HandoffCoordinator.on_session_activated` — when a session
  becomes active, deliver its parked prompt (at most once).

Creation steps run strictly in sequence.  Analysis and session-creation
failures propagate; UI notifications are best-effort.  Delivery never
raises.

Classes
-------
- HandoffResult       — outcome of a handoff
- HandoffCoordinator  — orchestration and delivery
"""
from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from pydantic import BaseModel, Field

from agent_session_handoff.handoff.analyzer import HandoffAnalyzer
from agent_session_handoff.handoff.best_effort import FailureHook, best_effort
from agent_session_handoff.handoff.category import HandoffCategory, HandoffRequest
from agent_session_handoff.handoff.classifier import GoalClassifier
from agent_session_handoff.handoff.errors import SessionCreationFailedError
from agent_session_handoff.handoff.references import extract_file_references
from agent_session_handoff.handoff.registry import PendingHandoffRegistry
from agent_session_handoff.handoff.settings import HandoffSettings
from agent_session_handoff.handoff.titles import derive_session_title
from agent_session_handoff.services.base import (
    CompletionService,
    SessionService,
    UIService,
)
from agent_session_handoff.services.models import Toast, ToastVariant

logger = logging.getLogger(__name__)

SESSION_LIST_REFRESH_EVENT: dict[str, object] = {
    "type": "tui.command.execute",
    "properties": {"command": "session.list"},
}

Clock = Callable[[], float]
Sleep = Callable[[float], Awaitable[None]]


# ---------------------------------------------------------------------------
# HandoffResult
# ---------------------------------------------------------------------------


class HandoffResult(BaseModel):
    """Outcome of :meth:`HandoffCoordinator.execute_handoff`.

    Parameters
    ----------
    new_session_id:
        Id of the created child session.
    category:
        Category used for the summarization template.
    title:
        Title the child session was created with.
    prompt:
        Generated handoff text awaiting delivery.
    file_references:
        Distinct ``@path`` references in the prompt, first-seen order.
    delivered:
        Always False: delivery happens when the session is activated.
    """

    model_config = {"frozen": True}

    new_session_id: str
    category: HandoffCategory
    title: str
    prompt: str
    file_references: list[str] = Field(default_factory=list)
    delivered: bool = False


# ---------------------------------------------------------------------------
# HandoffCoordinator
# ---------------------------------------------------------------------------


class HandoffCoordinator:
    """Create handoff sessions and deliver their prompts on activation.

    Parameters
    ----------
    sessions:
        Creates the child session.
    completions:
        Generates the handoff text.
    ui:
        Receives refresh commands, toasts, and the delivered prompt.
    settings:
        Pipeline tunables.  Defaults to ``HandoffSettings()``.
    classifier:
        Goal classifier.  Defaults to the built-in rule table.
    clock:
        Time source for the pending registry.  Default ``time.monotonic``.
    sleep:
        Coroutine used for the fixed UI delays.  Default ``asyncio.sleep``.
    on_notification_error:
        Hook for absorbed UI failures.  Defaults to logging a warning.
    """

    def __init__(
        self,
        sessions: SessionService,
        completions: CompletionService,
        ui: UIService,
        *,
        settings: HandoffSettings | None = None,
        classifier: GoalClassifier | None = None,
        clock: Clock | None = None,
        sleep: Sleep = asyncio.sleep,
        on_notification_error: FailureHook | None = None,
    ) -> None:
        self._sessions = sessions
        self._ui = ui
        self._analyzer = HandoffAnalyzer(completions)
        self.settings = settings or HandoffSettings()
        self._classifier = classifier or GoalClassifier()
        self.registry = PendingHandoffRegistry(
            self.settings.pending_ttl_seconds, clock or time.monotonic
        )
        self._sleep = sleep
        self.on_notification_error = on_notification_error

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    async def execute_handoff(
        self,
        current_session_id: str,
        goal: str,
        category: HandoffCategory | str | None = None,
    ) -> HandoffResult:
        """Hand the current session off to a new child session.

        Parameters
        ----------
        current_session_id:
            The session being summarized; becomes the child's parent.
        goal:
            What the new session should do.
        category:
            Explicit category, bypassing classification.

        Returns
        -------
        HandoffResult
            The created session and the prompt parked for it.

        Raises
        ------
        InvalidInputError
            If *goal* is blank or *category* is unknown.  Nothing is sent.
        AnalysisFailedError
            If no handoff text was produced.  No session is created.
        SessionCreationFailedError
            If the child session was not created.  The prompt is dropped.
        """
        request = HandoffRequest(goal=goal, category=category)
        resolved = request.category or self._classifier.classify(request.goal)
        logger.debug(
            "HandoffCoordinator: handoff from %r as %s", current_session_id, resolved.value
        )

        prompt = await self._analyzer.analyze(current_session_id, request.goal, resolved)

        title = derive_session_title(
            request.goal,
            resolved,
            max_length=self.settings.title_max_length,
            prefixes=self.settings.title_prefixes,
            fillers=self.settings.filler_prefixes,
        )

        created = await self._sessions.create(current_session_id, title)
        if created is None:
            raise SessionCreationFailedError(current_session_id)

        references = extract_file_references(prompt)
        self.registry.register(created.id, prompt, title)
        self.registry.sweep_expired()

        await self._announce(title)

        logger.info(
            "HandoffCoordinator: created session %r (%s, %d file references)",
            created.id,
            resolved.value,
            len(references),
        )
        return HandoffResult(
            new_session_id=created.id,
            category=resolved,
            title=title,
            prompt=prompt,
            file_references=references,
            delivered=False,
        )

    async def _announce(self, title: str) -> None:
        with best_effort("refresh session list", self.on_notification_error):
            await self._ui.publish(dict(SESSION_LIST_REFRESH_EVENT))

        await self._sleep(self.settings.refresh_settle_seconds)

        with best_effort("show handoff ready toast", self.on_notification_error):
            await self._ui.show_toast(
                Toast(
                    title="Handoff Ready",
                    message=f'Select "{title}" to continue',
                    variant=ToastVariant.SUCCESS,
                    duration_ms=self.settings.toast_duration_ms,
                )
            )

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    async def on_session_activated(self, session_id: str) -> bool:
        """Deliver the pending prompt for *session_id*, if any.

        The entry is removed before the delivery delay, so repeated or
        concurrent activations deliver at most once.

        Returns
        -------
        bool
            True if the prompt was pushed into the input box.
        """
        pending = self.registry.consume(session_id)
        if pending is None:
            return False

        logger.debug("HandoffCoordinator: delivering handoff into %r", session_id)
        try:
            await self._sleep(self.settings.delivery_delay_seconds)
            await self._ui.append_prompt(pending.prompt)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "HandoffCoordinator: could not deliver handoff into %r: %s", session_id, exc
            )
            with best_effort("show delivery warning toast", self.on_notification_error):
                await self._ui.show_toast(
                    Toast(
                        title="Handoff Error",
                        message="Could not fill prompt. Copy from previous session.",
                        variant=ToastVariant.WARNING,
                        duration_ms=self.settings.toast_duration_ms,
                    )
                )
            return False

        with best_effort("show delivery toast", self.on_notification_error):
            await self._ui.show_toast(
                Toast(
                    message="Handoff ready - review and press Enter to start",
                    variant=ToastVariant.SUCCESS,
                    duration_ms=4000,
                )
            )
        logger.info("HandoffCoordinator: delivered handoff into %r", session_id)
        return True


__all__ = ["HandoffCoordinator", "HandoffResult", "SESSION_LIST_REFRESH_EVENT"]
