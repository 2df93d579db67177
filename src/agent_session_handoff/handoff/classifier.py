"""Goal classifier — map a free-text goal to a HandoffCategory.

Classification is rule-based.  Each rule pairs a regex with a target
category and a priority; rules are evaluated in ascending priority order
against the lowercased goal and the first match wins.  Goals matching no
rule are classified as ``general``.

The default rule table ranks ``impl`` above ``planning`` above
``research``: a goal such as "research the cache, then implement phase 2"
is routed to the template that carries the most actionable detail.

Classes
-------
- ClassificationRule  — one pattern → category rule
- GoalClassifier      — ordered rule evaluation
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from agent_session_handoff.handoff.category import HandoffCategory

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Classification rule
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassificationRule:
    """A single classification rule.

    Attributes
    ----------
    target:
        The category assigned when ``pattern`` matches.
    pattern:
        Regex searched (not anchored) in the lowercased goal.
    priority:
        Lower values are evaluated first.
    """

    target: HandoffCategory
    pattern: str
    priority: int = 50


# ---------------------------------------------------------------------------
# Default built-in rules
# ---------------------------------------------------------------------------

DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    # Implementation (priority 10)
    ClassificationRule(
        target=HandoffCategory.IMPL,
        pattern=(
            r"\b(implement\w*|execute|build (a|an|the|out)|coding|write (the )?(code|tests?)|"
            r"fix|refactor|migrate|wire up|hook up|ship)\b"
        ),
        priority=10,
    ),
    ClassificationRule(
        target=HandoffCategory.IMPL,
        pattern=r"\b(phase|step|stage|milestone) \d+\b",
        priority=10,
    ),
    ClassificationRule(
        target=HandoffCategory.IMPL,
        pattern=r"\badd (a |an |the )?(new )?(feature|support|endpoint|command|test)",
        priority=10,
    ),
    # Planning (priority 20)
    ClassificationRule(
        target=HandoffCategory.PLANNING,
        pattern=(
            r"\b(plan\w*|design\w*|architect\w*|spec|specification|proposal|"
            r"roadmap|strategy|approach|outline)\b"
        ),
        priority=20,
    ),
    # Research (priority 30)
    ClassificationRule(
        target=HandoffCategory.RESEARCH,
        pattern=(
            r"\b(research\w*|investigat\w*|explor\w*|understand\w*|analy[sz]\w*|"
            r"figure out|find out|look into|dig into|why)\b"
        ),
        priority=30,
    ),
    ClassificationRule(
        target=HandoffCategory.RESEARCH,
        pattern=r"\bhow (does|do|is|are|the)\b",
        priority=30,
    ),
)


# ---------------------------------------------------------------------------
# GoalClassifier
# ---------------------------------------------------------------------------


class GoalClassifier:
    """Classify handoff goals into categories.

    Parameters
    ----------
    rules:
        Classification rules.  Uses :data:`DEFAULT_RULES` when not provided.
        Rules with equal priority keep their given order.
    fallback:
        Category returned when no rule matches.

    Example
    -------
    >>> GoalClassifier().classify("implement phase 2 of the plan")
    <HandoffCategory.IMPL: 'impl'>
    """

    def __init__(
        self,
        rules: tuple[ClassificationRule, ...] | list[ClassificationRule] | None = None,
        fallback: HandoffCategory = HandoffCategory.GENERAL,
    ) -> None:
        self._rules: list[ClassificationRule] = sorted(
            rules if rules is not None else DEFAULT_RULES,
            key=lambda r: r.priority,
        )
        self._compiled: list[tuple[re.Pattern[str], HandoffCategory]] = [
            (re.compile(rule.pattern), rule.target) for rule in self._rules
        ]
        self.fallback = fallback

    @property
    def rules(self) -> list[ClassificationRule]:
        """Rules in evaluation order."""
        return list(self._rules)

    def classify(self, goal: str) -> HandoffCategory:
        """Return the category of the first rule matching *goal*.

        Parameters
        ----------
        goal:
            Free-text goal.  Matching is case-insensitive.

        Returns
        -------
        HandoffCategory
            The matched category, or ``fallback``.
        """
        text = goal.lower()
        for pattern, target in self._compiled:
            if pattern.search(text):
                logger.debug("GoalClassifier: %r -> %s", goal, target.value)
                return target
        return self.fallback


_DEFAULT_CLASSIFIER = GoalClassifier()


def classify(goal: str) -> HandoffCategory:
    """Classify *goal* with the default rule table."""
    return _DEFAULT_CLASSIFIER.classify(goal)


__all__ = ["ClassificationRule", "DEFAULT_RULES", "GoalClassifier", "classify"]
