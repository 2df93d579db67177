"""Test that the documented quickstart flow works for agent-session-handoff."""
from __future__ import annotations

import pytest


def test_quickstart_import() -> None:
    import agent_session_handoff

    assert agent_session_handoff.__version__ == "0.1.0"


def test_quickstart_classify() -> None:
    from agent_session_handoff import HandoffCategory, classify

    assert classify("implement phase 2") is HandoffCategory.IMPL


@pytest.mark.asyncio
async def test_quickstart_plugin_round_trip(coordinator, ui) -> None:
    from agent_session_handoff import HandoffPlugin

    plugin = HandoffPlugin(coordinator, ui)
    result = await plugin.handle_event(
        {
            "type": "command.executed",
            "properties": {
                "name": "handoff",
                "sessionID": "parent",
                "arguments": "research how the auth module validates tokens",
            },
        }
    )
    assert result is not None
    await plugin.handle_event(
        {"type": "tui.session.select", "properties": {"sessionID": result.new_session_id}}
    )
    assert ui.prompts == [result.prompt]
    assert result.new_session_id not in coordinator.registry
