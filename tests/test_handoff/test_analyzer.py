"""Tests for agent_session_handoff.handoff.analyzer."""
from __future__ import annotations

import pytest

from agent_session_handoff.handoff.analyzer import HandoffAnalyzer
from agent_session_handoff.handoff.category import HandoffCategory
from agent_session_handoff.handoff.errors import AnalysisFailedError
from agent_session_handoff.handoff.templates import build_system_prompt, build_user_prompt
from agent_session_handoff.services.models import CompletionResponse, ContentSegment


def _response(*segments: tuple[str, str]) -> CompletionResponse:
    return CompletionResponse(segments=[ContentSegment(kind=k, text=t) for k, t in segments])


class TestAnalyze:
    @pytest.mark.asyncio
    async def test_submits_templates_with_session_id(self, completions) -> None:
        analyzer = HandoffAnalyzer(completions)
        await analyzer.analyze("sess-1", "investigate tokens", HandoffCategory.RESEARCH)
        assert completions.calls == [
            (
                "sess-1",
                build_system_prompt(HandoffCategory.RESEARCH),
                build_user_prompt("investigate tokens", HandoffCategory.RESEARCH),
            )
        ]

    @pytest.mark.asyncio
    async def test_joins_text_segments_in_order(self, completions) -> None:
        completions.response = _response(
            ("text", "@src/a.py"),
            ("reasoning", "thinking..."),
            ("text", "The goal is to ship it."),
            ("tool", ""),
        )
        prompt = await HandoffAnalyzer(completions).analyze("s", "g", HandoffCategory.GENERAL)
        assert prompt == "@src/a.py\nThe goal is to ship it."

    @pytest.mark.asyncio
    async def test_trims_surrounding_whitespace(self, completions) -> None:
        completions.response = _response(("text", "\n\n  body  \n"))
        prompt = await HandoffAnalyzer(completions).analyze("s", "g", HandoffCategory.GENERAL)
        assert prompt == "body"

    @pytest.mark.asyncio
    async def test_no_data_fails(self, completions) -> None:
        completions.response = None
        with pytest.raises(AnalysisFailedError, match="no data") as exc_info:
            await HandoffAnalyzer(completions).analyze("s", "g", HandoffCategory.GENERAL)
        assert exc_info.value.session_id == "s"

    @pytest.mark.asyncio
    async def test_no_text_segments_fails(self, completions) -> None:
        completions.response = _response(("reasoning", "hmm"))
        with pytest.raises(AnalysisFailedError, match="no text segments"):
            await HandoffAnalyzer(completions).analyze("s", "g", HandoffCategory.GENERAL)

    @pytest.mark.asyncio
    async def test_whitespace_only_text_fails(self, completions) -> None:
        completions.response = _response(("text", "  "), ("text", "\n"))
        with pytest.raises(AnalysisFailedError, match="empty"):
            await HandoffAnalyzer(completions).analyze("s", "g", HandoffCategory.GENERAL)

    @pytest.mark.asyncio
    async def test_service_errors_propagate(self) -> None:
        class BrokenService:
            async def submit(self, session_id: str, system: str, user: str) -> None:
                raise TimeoutError("llm unavailable")

        with pytest.raises(TimeoutError):
            await HandoffAnalyzer(BrokenService()).analyze(  # type: ignore[arg-type]
                "s", "g", HandoffCategory.GENERAL
            )
