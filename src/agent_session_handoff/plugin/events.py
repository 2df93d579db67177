"""Host event envelope consumed by :class:`HandoffPlugin`."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

COMMAND_EXECUTED = "command.executed"


class HostEvent(BaseModel):
    """An event delivered by the host runtime.

    Parameters
    ----------
    type:
        Event type, e.g. ``"command.executed"`` or ``"tui.session.select"``.
    properties:
        Event-specific payload.  Session ids arrive as ``sessionID``.
    """

    model_config = {"frozen": True}

    type: str
    properties: dict[str, Any] = Field(default_factory=dict)

    @property
    def session_id(self) -> str | None:
        """The ``sessionID`` property, if present."""
        value = self.properties.get("sessionID")
        return str(value) if value else None
