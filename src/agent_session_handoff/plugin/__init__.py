"""Host event adapter.

Classes
-------
HandoffPlugin
    Routes host events to the handoff coordinator.
HostEvent
    Event envelope delivered by the host.
"""
from __future__ import annotations

from agent_session_handoff.plugin.events import COMMAND_EXECUTED, HostEvent
from agent_session_handoff.plugin.handoff_plugin import HandoffPlugin

__all__ = ["COMMAND_EXECUTED", "HandoffPlugin", "HostEvent"]
