"""Handoff analysis — one completion round-trip producing the handoff text.

The analyzer holds no conversation state.  It sends the category's
templates to the completion service together with the current session's
identifier; the service supplies that session's history as context.

Classes
-------
- HandoffAnalyzer  — build templates, submit, collect text segments
"""
from __future__ import annotations

import logging

from agent_session_handoff.handoff.category import HandoffCategory
from agent_session_handoff.handoff.errors import AnalysisFailedError
from agent_session_handoff.handoff.templates import build_system_prompt, build_user_prompt
from agent_session_handoff.services.base import CompletionService

logger = logging.getLogger(__name__)


class HandoffAnalyzer:
    """Generate handoff prompts through a :class:`CompletionService`.

    There are no retries: a failed round-trip is raised to the caller.

    Parameters
    ----------
    completions:
        The completion service to submit to.
    """

    def __init__(self, completions: CompletionService) -> None:
        self._completions = completions

    async def analyze(
        self,
        session_id: str,
        goal: str,
        category: HandoffCategory,
    ) -> str:
        """Summarize *session_id* for a new session pursuing *goal*.

        Parameters
        ----------
        session_id:
            The session being handed off.
        goal:
            Trimmed, non-empty goal for the new session.
        category:
            Selects the summarization template.

        Returns
        -------
        str
            The text segments of the reply, newline-joined in order and
            stripped of surrounding whitespace.

        Raises
        ------
        AnalysisFailedError
            If the service returned no data, no text segments, or only
            whitespace.
        """
        system = build_system_prompt(category)
        user = build_user_prompt(goal, category)
        logger.debug(
            "HandoffAnalyzer: submitting %s analysis for session %r (%d + %d chars)",
            category.value,
            session_id,
            len(system),
            len(user),
        )

        response = await self._completions.submit(session_id, system, user)
        if response is None:
            raise AnalysisFailedError(session_id, "completion service returned no data")

        texts = [segment.text for segment in response.text_segments()]
        if not texts:
            raise AnalysisFailedError(session_id, "reply contained no text segments")

        prompt = "\n".join(texts).strip()
        if not prompt:
            raise AnalysisFailedError(session_id, "reply text was empty")

        logger.debug(
            "HandoffAnalyzer: received %d text segments, %d chars",
            len(texts),
            len(prompt),
        )
        return prompt


__all__ = ["HandoffAnalyzer"]
