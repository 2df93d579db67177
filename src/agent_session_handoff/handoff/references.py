"""Extraction of ``@path`` file references from generated handoff text.

A reference is an ``@`` followed by word characters, slashes, dots, or
hyphens.  An ``@`` directly preceded by a word character or another ``@``
(as in ``user@example.com``) does not start a reference.  Trailing dots
are sentence punctuation and are dropped.
"""
from __future__ import annotations

import re

FILE_REFERENCE_PATTERN: re.Pattern[str] = re.compile(r"(?<![\w@])@([\w./-]+)")


def extract_file_references(text: str) -> list[str]:
    """Return the distinct file references in *text*, in first-seen order.

    Example
    -------
    >>> extract_file_references("@src/a.ts @src/b.ts @src/a.ts")
    ['src/a.ts', 'src/b.ts']
    """
    seen: dict[str, None] = {}
    for match in FILE_REFERENCE_PATTERN.finditer(text):
        path = match.group(1).rstrip(".")
        if path:
            seen.setdefault(path, None)
    return list(seen)


__all__ = ["FILE_REFERENCE_PATTERN", "extract_file_references"]
