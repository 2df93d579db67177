"""Host plugin adapter for the handoff pipeline.

Translates host events into the coordinator's two entry points:

- ``command.executed`` for the handoff command → run a handoff, reporting
  progress and failures as toasts.
- any configured activation event → deliver a pending prompt.

Classes
-------
- HandoffPlugin  — event dispatcher around a HandoffCoordinator
"""
from __future__ import annotations

import logging
from typing import Any

from agent_session_handoff.handoff.best_effort import best_effort
from agent_session_handoff.handoff.coordinator import HandoffCoordinator, HandoffResult
from agent_session_handoff.handoff.errors import HandoffError
from agent_session_handoff.plugin.events import COMMAND_EXECUTED, HostEvent
from agent_session_handoff.services.base import UIService
from agent_session_handoff.services.models import Toast, ToastVariant

logger = logging.getLogger(__name__)


class HandoffPlugin:
    """Dispatch host events to a :class:`HandoffCoordinator`.

    Parameters
    ----------
    coordinator:
        The coordinator that owns the pending registry.
    ui:
        Used for progress and error toasts.
    """

    def __init__(self, coordinator: HandoffCoordinator, ui: UIService) -> None:
        self._coordinator = coordinator
        self._ui = ui
        self._settings = coordinator.settings

    async def handle_event(self, event: HostEvent | dict[str, Any]) -> HandoffResult | None:
        """Handle one host event.

        Returns
        -------
        HandoffResult | None
            The result when the event ran a successful handoff, else None.
        """
        if not isinstance(event, HostEvent):
            event = HostEvent.model_validate(event)

        if event.type == COMMAND_EXECUTED:
            if event.properties.get("name") == self._settings.command_name:
                return await self._run_command(event)
            return None

        if event.type in self._settings.activation_events and event.session_id:
            await self._coordinator.on_session_activated(event.session_id)
        return None

    async def _run_command(self, event: HostEvent) -> HandoffResult | None:
        session_id = event.session_id
        goal = str(event.properties.get("arguments") or "").strip()
        if not session_id or not goal:
            await self._toast(
                "Handoff Error",
                f"Please provide a goal: /{self._settings.command_name} "
                "<your goal for the new session>",
                ToastVariant.ERROR,
            )
            return None

        with best_effort("show analyzing toast", self._coordinator.on_notification_error):
            await self._ui.show_toast(
                Toast(
                    message="Analyzing session for handoff...",
                    variant=ToastVariant.INFO,
                    duration_ms=2000,
                )
            )

        try:
            return await self._coordinator.execute_handoff(
                session_id, goal, event.properties.get("category")
            )
        except HandoffError as exc:
            logger.error("HandoffPlugin: handoff from %r failed: %s", session_id, exc)
            await self._toast("Handoff Failed", str(exc), ToastVariant.ERROR)
            return None
        except Exception as exc:  # noqa: BLE001
            logger.exception("HandoffPlugin: handoff from %r raised", session_id)
            await self._toast("Handoff Failed", str(exc) or "Unknown error", ToastVariant.ERROR)
            return None

    async def _toast(self, title: str, message: str, variant: ToastVariant) -> None:
        with best_effort(f"show {title!r} toast", self._coordinator.on_notification_error):
            await self._ui.show_toast(
                Toast(
                    title=title,
                    message=message,
                    variant=variant,
                    duration_ms=self._settings.toast_duration_ms,
                )
            )


__all__ = ["HandoffPlugin"]
