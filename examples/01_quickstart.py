#!/usr/bin/env python3
"""Example: Quickstart — agent-session-handoff

Run a handoff against in-process stand-ins for the host services, then
activate the new session and watch the prompt arrive.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install agent-session-handoff
"""
from __future__ import annotations

import asyncio
from typing import Any

import agent_session_handoff
from agent_session_handoff import (
    CompletionResponse,
    CompletionService,
    ContentSegment,
    CreatedSession,
    HandoffCoordinator,
    HandoffPlugin,
    SessionService,
    Toast,
    UIService,
)


class CannedCompletions(CompletionService):
    async def submit(self, session_id: str, system: str, user: str) -> CompletionResponse:
        text = (
            "@src/auth/tokens.py\n\n"
            "The goal is to find out how tokens are validated.\n\n"
            "Established facts:\n1. `decode_token` lives in @src/auth/tokens.py.\n\n"
            "Dead ends:\n1. middleware.py - only forwards headers.\n\n"
            "Investigate next:\n1. Find the callers of `decode_token`."
        )
        return CompletionResponse(segments=[ContentSegment(kind="text", text=text)])


class CountingSessions(SessionService):
    def __init__(self) -> None:
        self._count = 0

    async def create(self, parent_id: str, title: str) -> CreatedSession:
        self._count += 1
        return CreatedSession(id=f"{parent_id}-child-{self._count}", title=title)


class ConsoleUI(UIService):
    async def publish(self, event: dict[str, Any]) -> None:
        print(f"[ui] event {event['type']}")

    async def show_toast(self, toast: Toast) -> None:
        print(f"[ui] toast ({toast.variant.value}) {toast.message}")

    async def append_prompt(self, text: str) -> None:
        print("[ui] prompt filled:\n" + text)


async def main() -> None:
    print(f"agent-session-handoff version: {agent_session_handoff.__version__}")

    ui = ConsoleUI()
    coordinator = HandoffCoordinator(CountingSessions(), CannedCompletions(), ui)
    plugin = HandoffPlugin(coordinator, ui)

    # Step 1: the user runs /handoff in session "s1"
    result = await plugin.handle_event(
        {
            "type": "command.executed",
            "properties": {
                "name": "handoff",
                "sessionID": "s1",
                "arguments": "research how the auth module validates tokens",
            },
        }
    )
    assert result is not None
    print(f"\nCreated {result.new_session_id!r} ({result.category.value}): {result.title}")
    print(f"  File references: {result.file_references}")

    # Step 2: the user switches to the new session
    await plugin.handle_event(
        {"type": "tui.session.select", "properties": {"sessionID": result.new_session_id}}
    )


if __name__ == "__main__":
    asyncio.run(main())
