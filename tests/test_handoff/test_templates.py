"""Tests for agent_session_handoff.handoff.templates."""
from __future__ import annotations

import pytest

from agent_session_handoff.handoff.category import HandoffCategory
from agent_session_handoff.handoff.templates import build_system_prompt, build_user_prompt


class TestSystemPrompt:
    @pytest.mark.parametrize("category", list(HandoffCategory))
    def test_stable_for_repeated_calls(self, category: HandoffCategory) -> None:
        assert build_system_prompt(category) == build_system_prompt(category)

    @pytest.mark.parametrize("category", list(HandoffCategory))
    def test_shared_output_rules(self, category: HandoffCategory) -> None:
        prompt = build_system_prompt(category)
        assert "Output ONLY the handoff content" in prompt
        assert "code fences" in prompt
        assert "The goal is to" in prompt

    @pytest.mark.parametrize("category", list(HandoffCategory))
    def test_file_references_come_before_goal(self, category: HandoffCategory) -> None:
        prompt = build_system_prompt(category)
        assert prompt.index("@path/to/relevant_file.py") < prompt.index("The goal is to")

    def test_impl_sections(self) -> None:
        prompt = build_system_prompt(HandoffCategory.IMPL)
        assert "Tasks:" in prompt
        assert "Specific steps:" in prompt
        assert "Reuse:" in prompt
        assert prompt.index("Tasks:") < prompt.index("Specific steps:")

    def test_planning_sections(self) -> None:
        prompt = build_system_prompt(HandoffCategory.PLANNING)
        assert "Key findings:" in prompt
        assert "Constraints:" in prompt
        assert "Decisions to make:" in prompt
        assert "Do NOT include implementation-level detail" in prompt

    def test_research_sections(self) -> None:
        prompt = build_system_prompt(HandoffCategory.RESEARCH)
        assert "Established facts:" in prompt
        assert "Dead ends:" in prompt
        assert "Investigate next:" in prompt
        assert "one-line reason" in prompt
        assert "Do NOT include implementation detail" in prompt

    def test_general_sections(self) -> None:
        prompt = build_system_prompt(HandoffCategory.GENERAL)
        assert "Current state:" in prompt
        assert "Next step:" in prompt

    def test_categories_do_not_leak_sections(self) -> None:
        assert "Dead ends:" not in build_system_prompt(HandoffCategory.IMPL)
        assert "Tasks:" not in build_system_prompt(HandoffCategory.RESEARCH)

    def test_each_category_distinct(self) -> None:
        prompts = {build_system_prompt(c) for c in HandoffCategory}
        assert len(prompts) == len(HandoffCategory)


class TestUserPrompt:
    def test_embeds_goal_verbatim(self) -> None:
        goal = 'trace the "flush" path in @src/io.py'
        prompt = build_user_prompt(goal, HandoffCategory.RESEARCH)
        assert f'USER\'S GOAL: "{goal}"' in prompt

    def test_mentions_category(self) -> None:
        prompt = build_user_prompt("x", HandoffCategory.PLANNING)
        assert "HANDOFF TYPE: planning" in prompt

    def test_output_only_instruction(self) -> None:
        prompt = build_user_prompt("x", HandoffCategory.GENERAL)
        assert prompt.endswith("Output ONLY the handoff content.")
