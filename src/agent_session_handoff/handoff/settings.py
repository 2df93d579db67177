"""Handoff settings.

``HandoffSettings`` gathers every tunable of the pipeline: pending-entry
lifetime, UI delays, title rules, toast duration, and the host event
names the plugin reacts to.  Settings can be built in code or loaded
from a YAML mapping::

    pending_ttl_seconds: 600
    title_max_length: 60
    title_prefixes:
      impl: "Build: "
      planning: "Plan: "

Classes
-------
- HandoffSettings  — frozen, validated settings
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from agent_session_handoff.handoff.category import HandoffCategory
from agent_session_handoff.handoff.registry import DEFAULT_TTL_SECONDS
from agent_session_handoff.handoff.titles import (
    DEFAULT_FILLER_PREFIXES,
    DEFAULT_MAX_LENGTH,
    DEFAULT_TITLE_PREFIXES,
)

_ELLIPSIS_LENGTH = 3


@dataclass(frozen=True)
class HandoffSettings:
    """Tunables for the handoff pipeline.

    Parameters
    ----------
    pending_ttl_seconds:
        How long a generated prompt waits for its session to be activated.
    delivery_delay_seconds:
        Pause after activation before the prompt is pushed into the input
        box, giving the UI time to finish switching sessions.
    refresh_settle_seconds:
        Pause between refreshing the session list and the "ready" toast.
    title_max_length:
        Maximum length of a derived session title.
    title_prefixes:
        Category value → title label prefix.
    filler_prefixes:
        Phrases stripped from the start of a goal when deriving a title.
    toast_duration_ms:
        Duration of ready, warning, and error toasts.
    command_name:
        Host command that triggers a handoff.
    activation_events:
        Host event types that mean "this session is now active".
    """

    pending_ttl_seconds: float = DEFAULT_TTL_SECONDS
    delivery_delay_seconds: float = 0.15
    refresh_settle_seconds: float = 0.1
    title_max_length: int = DEFAULT_MAX_LENGTH
    title_prefixes: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_TITLE_PREFIXES)
    )
    filler_prefixes: tuple[str, ...] = DEFAULT_FILLER_PREFIXES
    toast_duration_ms: int = 5000
    command_name: str = "handoff"
    activation_events: tuple[str, ...] = ("tui.session.select", "session.idle")

    def __post_init__(self) -> None:
        if self.pending_ttl_seconds <= 0:
            raise ValueError(
                f"pending_ttl_seconds must be positive, got {self.pending_ttl_seconds!r}."
            )
        for name in ("delivery_delay_seconds", "refresh_settle_seconds", "toast_duration_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)!r}.")

        valid = {c.value for c in HandoffCategory}
        unknown = sorted(set(self.title_prefixes) - valid)
        if unknown:
            raise ValueError(f"title_prefixes has unknown categories: {', '.join(unknown)}")

        longest = max((len(p) for p in self.title_prefixes.values()), default=0)
        minimum = longest + _ELLIPSIS_LENGTH + 1
        if self.title_max_length < minimum:
            raise ValueError(
                f"title_max_length must be at least {minimum} to fit the longest "
                f"prefix and an ellipsis, got {self.title_max_length!r}."
            )
        if not self.command_name.strip():
            raise ValueError("command_name must not be empty.")

        # YAML yields lists; keep the tuple fields hashable and immutable.
        object.__setattr__(self, "filler_prefixes", tuple(self.filler_prefixes))
        object.__setattr__(self, "activation_events", tuple(self.activation_events))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> HandoffSettings:
        """Build settings from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown handoff settings: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> HandoffSettings:
        """Load settings from a YAML file.  An empty file yields defaults."""
        raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise ValueError(
                f"Settings file {str(path)!r} must contain a mapping, "
                f"got {type(raw).__name__}."
            )
        return cls.from_mapping(raw)

    def to_dict(self) -> dict[str, Any]:
        """Return the settings as a plain dict."""
        return {
            "pending_ttl_seconds": self.pending_ttl_seconds,
            "delivery_delay_seconds": self.delivery_delay_seconds,
            "refresh_settle_seconds": self.refresh_settle_seconds,
            "title_max_length": self.title_max_length,
            "title_prefixes": dict(self.title_prefixes),
            "filler_prefixes": list(self.filler_prefixes),
            "toast_duration_ms": self.toast_duration_ms,
            "command_name": self.command_name,
            "activation_events": list(self.activation_events),
        }


__all__ = ["HandoffSettings"]
