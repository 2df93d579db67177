"""Session-title derivation for the session a handoff creates."""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from agent_session_handoff.handoff.category import HandoffCategory

_ELLIPSIS = "..."

DEFAULT_FILLER_PREFIXES: tuple[str, ...] = ("now", "please", "can you", "i want to", "let's")
DEFAULT_TITLE_PREFIXES: Mapping[str, str] = {"impl": "Impl: ", "planning": "Plan: "}
DEFAULT_MAX_LENGTH = 50


def _filler_pattern(fillers: Iterable[str]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(f) for f in fillers)
    return re.compile(rf"^(?:{alternatives})\s+", re.IGNORECASE)


def derive_session_title(
    goal: str,
    category: HandoffCategory,
    *,
    max_length: int = DEFAULT_MAX_LENGTH,
    prefixes: Mapping[str, str] = DEFAULT_TITLE_PREFIXES,
    fillers: Iterable[str] = DEFAULT_FILLER_PREFIXES,
) -> str:
    """Turn a handoff goal into a short session title.

    Leading filler phrases ("please ", "can you ", ...) are stripped
    repeatedly, the category label prefix is prepended, the body is
    truncated with ``...`` so the whole title fits ``max_length``, and the
    first character of the body is capitalized.

    Parameters
    ----------
    goal:
        The handoff goal.
    category:
        Selects the label prefix from *prefixes* (keyed by category value).
    max_length:
        Maximum length of the returned title, prefix and ellipsis included.
    prefixes:
        Category value → label prefix.  Missing categories get no prefix.
    fillers:
        Case-insensitive filler phrases to strip from the start of the goal.

    Example
    -------
    >>> derive_session_title("please implement phase 2", HandoffCategory.IMPL)
    'Impl: Implement phase 2'
    """
    body = goal.strip()
    fillers = tuple(fillers)
    if fillers:
        filler = _filler_pattern(fillers)
        while True:
            stripped = filler.sub("", body, count=1)
            if stripped == body:
                break
            body = stripped

    prefix = prefixes.get(category.value, "")
    room = max_length - len(prefix)
    if len(body) > room:
        body = body[: max(room - len(_ELLIPSIS), 0)].rstrip() + _ELLIPSIS

    return prefix + body[:1].upper() + body[1:]


__all__ = [
    "DEFAULT_FILLER_PREFIXES",
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_TITLE_PREFIXES",
    "derive_session_title",
]
