"""Best-effort execution of non-critical calls.

UI refreshes and toasts must never fail a handoff.  Wrapping such a call
in :func:`best_effort` catches any ``Exception`` it raises and reports it
to a single hook instead of propagating it::

    with best_effort("show ready toast"):
        await ui.show_toast(toast)
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

FailureHook = Callable[[str, Exception], None]


def log_failure(action: str, exc: Exception) -> None:
    """Default hook: log the failed action at WARNING level."""
    logger.warning("Best-effort call %r failed: %s", action, exc, exc_info=exc)


@contextmanager
def best_effort(action: str, on_error: FailureHook | None = None) -> Iterator[None]:
    """Run the enclosed block, absorbing any ``Exception`` it raises.

    Parameters
    ----------
    action:
        Short description of the call, passed to the hook.
    on_error:
        Called with ``(action, exception)`` on failure.  Defaults to
        :func:`log_failure`.
    """
    try:
        yield
    except Exception as exc:  # noqa: BLE001
        (on_error or log_failure)(action, exc)


__all__ = ["FailureHook", "best_effort", "log_failure"]
