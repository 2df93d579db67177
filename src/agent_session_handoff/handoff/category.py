"""Handoff categories and the validated request value.

Classes
-------
- HandoffCategory  — closed set of handoff kinds
- HandoffRequest   — goal plus optional category override
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from agent_session_handoff.handoff.errors import InvalidInputError


class HandoffCategory(str, Enum):
    """The kind of work the new session will do.

    The category selects the summarization template and the title prefix.
    """

    RESEARCH = "research"
    PLANNING = "planning"
    IMPL = "impl"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: HandoffCategory | str) -> HandoffCategory:
        """Return the category named by *value* (case-insensitive).

        Raises
        ------
        InvalidInputError
            If *value* does not name a category.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise InvalidInputError(
                f"Unknown handoff category {value!r}. Expected one of: {valid}"
            ) from None


@dataclass(frozen=True)
class HandoffRequest:
    """A single handoff request.

    Parameters
    ----------
    goal:
        What the new session should accomplish.  Surrounding whitespace is
        removed; an empty result is rejected.
    category:
        Explicit category override.  ``None`` means classify the goal.
    """

    goal: str
    category: HandoffCategory | None = None

    def __post_init__(self) -> None:
        goal = (self.goal or "").strip()
        if not goal:
            raise InvalidInputError("Handoff goal must not be empty.")
        object.__setattr__(self, "goal", goal)
        if self.category is not None:
            object.__setattr__(self, "category", HandoffCategory.parse(self.category))
