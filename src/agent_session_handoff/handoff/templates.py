"""Summarization templates for each handoff category.

The completion service receives two strings: a system instruction that
fixes the output format, and a user instruction carrying the goal.  Both
are plain text built from module-level constants, so the output for a
given category is always identical.

Every system instruction has the same skeleton:

1. Output rules — the reply is used verbatim as the first message of a
   fresh session, so no preamble and no wrapping markup.
2. Format — ``@path`` file references first, then a one-sentence goal,
   then the category-specific context block.
3. Category context — see ``_CONTEXT_BLOCKS``.
4. Writing principles.
"""
from __future__ import annotations

from agent_session_handoff.handoff.category import HandoffCategory

_HEADER = """\
You are generating a handoff prompt to start a new focused session.
Your output will be used DIRECTLY as the initial prompt in a fresh context window with NO prior history."""

_OUTPUT_RULES = """\
CRITICAL RULES:
1. Output ONLY the handoff content - no preamble, no meta-commentary, no "Here's the handoff:"
2. Do not wrap the output in code fences, quotes, or any other markup
3. Start with @filepath references - these load files into context first
4. The new session must be able to start work IMMEDIATELY from your output
5. Include only what's needed for the NEXT task - not what led to it"""

_FORMAT_HEAD = """\
FORMAT (sections in exactly this order):

@path/to/relevant_file.py
@path/to/another_file.py
[ALL files the new session needs - to read, modify, or create]

The goal is to [one sentence stating what this session will accomplish]."""

_CONTEXT_BLOCKS: dict[HandoffCategory, str] = {
    HandoffCategory.IMPL: """\
This is an IMPLEMENTATION handoff. After the goal sentence, write:

Tasks:
1. [High-level task]
2. [High-level task]

Specific steps:
- [Concrete step naming the exact file path, function or class, and signature]
- [Concrete step naming the exact file path, function or class, and signature]

Reuse:
- [Existing function or module the new session must reuse instead of re-deriving, with its path]""",
    HandoffCategory.PLANNING: """\
This is a PLANNING handoff. After the goal sentence, write:

Key findings:
1. [Concrete finding - a fact, not an opinion - with the file it comes from]

Constraints:
1. [Hard constraint the plan must respect]

Decisions to make:
1. [Open decision the plan must resolve]

Do NOT include implementation-level detail (code, step-by-step edits).""",
    HandoffCategory.RESEARCH: """\
This is a RESEARCH handoff. After the goal sentence, write:

Established facts:
1. [Fact confirmed so far, with the file or source it comes from]

Dead ends:
1. [Approach already tried] - [one-line reason it failed]

Investigate next:
1. [Specific next investigative action or question to answer]

Do NOT include implementation detail.""",
    HandoffCategory.GENERAL: """\
This is a CONTINUATION handoff. After the goal sentence, write:

Current state: [brief summary of where the work stands]

Next step: [one concrete next action]""",
}

_PRINCIPLES = """\
PRINCIPLES:
- Files are the primary context - list them thoroughly
- Be concrete: exact paths, function names, types, signatures
- No journey recap - only conclusions matter
- No rationale unless critical to the task
- Dense with actionable information
- The handoff should feel like picking up detailed notes from a colleague"""


def build_system_prompt(category: HandoffCategory) -> str:
    """Return the system instruction for *category*."""
    return "\n\n".join(
        (_HEADER, _OUTPUT_RULES, _FORMAT_HEAD, _CONTEXT_BLOCKS[category], _PRINCIPLES)
    )


def build_user_prompt(goal: str, category: HandoffCategory) -> str:
    """Return the user instruction embedding *goal* verbatim."""
    return (
        "Generate a handoff prompt for a new session.\n"
        "\n"
        f'USER\'S GOAL: "{goal}"\n'
        f"HANDOFF TYPE: {category.value}\n"
        "\n"
        "Analyze our conversation and determine which files the new session must load "
        "and what context it needs to start this work immediately.\n"
        "\n"
        "Then generate the handoff following the format in your instructions.\n"
        "Output ONLY the handoff content."
    )


__all__ = ["build_system_prompt", "build_user_prompt"]
