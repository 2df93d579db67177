"""Tests for agent_session_handoff.handoff.best_effort."""
from __future__ import annotations

import logging

import pytest

from agent_session_handoff.handoff.best_effort import best_effort


class TestBestEffort:
    def test_success_does_not_call_hook(self) -> None:
        failures: list[tuple[str, Exception]] = []
        with best_effort("noop", lambda action, exc: failures.append((action, exc))):
            pass
        assert failures == []

    def test_exception_absorbed_and_reported(self) -> None:
        failures: list[tuple[str, Exception]] = []
        with best_effort("show toast", lambda action, exc: failures.append((action, exc))):
            raise RuntimeError("boom")
        assert len(failures) == 1
        assert failures[0][0] == "show toast"
        assert str(failures[0][1]) == "boom"

    def test_default_hook_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            with best_effort("refresh session list"):
                raise ConnectionError("host gone")
        assert "refresh session list" in caplog.text
        assert "host gone" in caplog.text

    def test_base_exceptions_propagate(self) -> None:
        with pytest.raises(KeyboardInterrupt):
            with best_effort("interrupted"):
                raise KeyboardInterrupt

    @pytest.mark.asyncio
    async def test_wraps_awaited_calls(self) -> None:
        async def failing() -> None:
            raise RuntimeError("async boom")

        failures: list[str] = []
        with best_effort("await", lambda action, exc: failures.append(action)):
            await failing()
        assert failures == ["await"]
