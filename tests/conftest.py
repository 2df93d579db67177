"""Shared fakes for the handoff test-suite.

The fakes record every call so tests can assert on what the pipeline
sent to the host, and expose switches to make individual calls fail.
"""
from __future__ import annotations

from typing import Any

import pytest

from agent_session_handoff.handoff.coordinator import HandoffCoordinator
from agent_session_handoff.handoff.settings import HandoffSettings
from agent_session_handoff.services.base import (
    CompletionService,
    SessionService,
    UIService,
)
from agent_session_handoff.services.models import (
    CompletionResponse,
    ContentSegment,
    CreatedSession,
    Toast,
)

RESEARCH_REPLY = """\
@src/auth/tokens.py
@src/auth/middleware.py

The goal is to find out how the auth module validates tokens.

Established facts:
1. Tokens are parsed in @src/auth/tokens.py by `decode_token`.

Dead ends:
1. Grepping for "verify" - only test helpers match.

Investigate next:
1. Trace where `decode_token` is called from @src/auth/middleware.py.
"""


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class ManualClock:
    """Clock whose time only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCompletionService(CompletionService):
    def __init__(self, response: CompletionResponse | None = None) -> None:
        self.response = response
        self.error: Exception | None = None
        self.calls: list[tuple[str, str, str]] = []

    @classmethod
    def replying(cls, *texts: str) -> FakeCompletionService:
        return cls(
            CompletionResponse(segments=[ContentSegment(kind="text", text=t) for t in texts])
        )

    async def submit(self, session_id: str, system: str, user: str) -> CompletionResponse | None:
        self.calls.append((session_id, system, user))
        if self.error is not None:
            raise self.error
        return self.response


class FakeSessionService(SessionService):
    def __init__(self, ids: list[str] | None = None, fail: bool = False) -> None:
        self._ids = list(ids or ["child-1", "child-2", "child-3"])
        self.fail = fail
        self.created: list[tuple[str, str]] = []

    async def create(self, parent_id: str, title: str) -> CreatedSession | None:
        if self.fail:
            return None
        self.created.append((parent_id, title))
        return CreatedSession(id=self._ids.pop(0), title=title)


class RecordingUI(UIService):
    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []
        self.toasts: list[Toast] = []
        self.prompts: list[str] = []
        self.fail_publish = False
        self.fail_toast = False
        self.fail_append = False

    async def publish(self, event: dict[str, Any]) -> None:
        if self.fail_publish:
            raise RuntimeError("publish failed")
        self.events.append(event)

    async def show_toast(self, toast: Toast) -> None:
        if self.fail_toast:
            raise RuntimeError("toast failed")
        self.toasts.append(toast)

    async def append_prompt(self, text: str) -> None:
        if self.fail_append:
            raise RuntimeError("append failed")
        self.prompts.append(text)


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def ui() -> RecordingUI:
    return RecordingUI()


@pytest.fixture()
def sessions() -> FakeSessionService:
    return FakeSessionService()


@pytest.fixture()
def completions() -> FakeCompletionService:
    return FakeCompletionService.replying(RESEARCH_REPLY)


@pytest.fixture()
def coordinator(
    sessions: FakeSessionService,
    completions: FakeCompletionService,
    ui: RecordingUI,
    clock: ManualClock,
    sleep: RecordingSleep,
) -> HandoffCoordinator:
    return HandoffCoordinator(
        sessions,
        completions,
        ui,
        settings=HandoffSettings(),
        clock=clock,
        sleep=sleep,
    )
