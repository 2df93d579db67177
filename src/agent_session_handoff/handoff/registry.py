"""Pending-handoff registry.

Holds at most one :class:`PendingHandoff` per session identifier until
the session is activated or the entry expires.  All state is in-process
and lost on exit.

Time comes from an injected clock (``time.monotonic`` by default) so
that expiry can be tested without waiting.  An entry is live while
``clock() < expires_at``.

The registry is meant for a single event loop: each method completes
without suspending, so coroutines never observe a half-applied update.

Classes
-------
- PendingHandoff          — a prompt waiting for its session
- PendingHandoffRegistry  — session id → PendingHandoff with expiry
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300.0


# ---------------------------------------------------------------------------
# Domain model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PendingHandoff:
    """A generated prompt waiting to be delivered into a new session.

    Parameters
    ----------
    session_id:
        The new session the prompt belongs to.
    prompt:
        Generated handoff text.
    created_title:
        Title the session was created with.
    expires_at:
        Clock reading at which the entry stops being deliverable.
    """

    session_id: str
    prompt: str
    created_title: str
    expires_at: float

    def is_expired(self, now: float) -> bool:
        """Return True when *now* is at or past ``expires_at``."""
        return now >= self.expires_at


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class PendingHandoffRegistry:
    """Time-bounded mapping from session id to :class:`PendingHandoff`.

    Parameters
    ----------
    ttl_seconds:
        Lifetime of each entry from the moment it is registered.
    clock:
        Zero-argument callable returning the current time in seconds.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds!r}.")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, PendingHandoff] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register(self, session_id: str, prompt: str, created_title: str) -> PendingHandoff:
        """Store *prompt* for *session_id*, replacing any existing entry."""
        entry = PendingHandoff(
            session_id=session_id,
            prompt=prompt,
            created_title=created_title,
            expires_at=self._clock() + self.ttl_seconds,
        )
        if session_id in self._entries:
            logger.debug("PendingHandoffRegistry: replacing entry for %r", session_id)
        self._entries[session_id] = entry
        logger.debug(
            "PendingHandoffRegistry: registered %r (expires at %.3f)",
            session_id,
            entry.expires_at,
        )
        return entry

    def get(self, session_id: str) -> PendingHandoff | None:
        """Return the live entry for *session_id* without consuming it.

        An expired entry is removed and ``None`` is returned.
        """
        entry = self._entries.get(session_id)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[session_id]
            logger.debug("PendingHandoffRegistry: entry for %r expired", session_id)
            return None
        return entry

    def consume(self, session_id: str) -> PendingHandoff | None:
        """Remove and return the live entry for *session_id*.

        A second call for the same id returns ``None``.
        """
        entry = self.get(session_id)
        if entry is not None:
            del self._entries[session_id]
            logger.debug("PendingHandoffRegistry: consumed %r", session_id)
        return entry

    def discard(self, session_id: str) -> bool:
        """Drop the entry for *session_id*, live or not.

        Returns
        -------
        bool
            True if an entry existed.
        """
        return self._entries.pop(session_id, None) is not None

    def sweep_expired(self) -> int:
        """Delete every expired entry and return how many were removed."""
        now = self._clock()
        expired = [sid for sid, entry in self._entries.items() if entry.is_expired(now)]
        for session_id in expired:
            del self._entries[session_id]
        if expired:
            logger.debug("PendingHandoffRegistry: swept %d expired entries", len(expired))
        return len(expired)

    # ------------------------------------------------------------------
    # Extras
    # ------------------------------------------------------------------

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PendingHandoffRegistry(entries={len(self._entries)}, ttl={self.ttl_seconds})"


__all__ = ["DEFAULT_TTL_SECONDS", "PendingHandoff", "PendingHandoffRegistry"]
