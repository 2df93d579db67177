"""Tests for agent_session_handoff.handoff.references."""
from __future__ import annotations

from agent_session_handoff.handoff.references import extract_file_references


class TestExtractFileReferences:
    def test_dedupes_in_first_seen_order(self) -> None:
        assert extract_file_references("@src/a.ts @src/b.ts @src/a.ts") == [
            "src/a.ts",
            "src/b.ts",
        ]

    def test_not_sorted(self) -> None:
        assert extract_file_references("@z.py @a.py") == ["z.py", "a.py"]

    def test_idempotent(self) -> None:
        text = "@src/a.ts\n@lib/b-c.py and @src/a.ts"
        assert extract_file_references(text) == extract_file_references(text)

    def test_line_start_references(self) -> None:
        text = "@src/auth/tokens.py\n@src/auth/middleware.py\n\nThe goal is to..."
        assert extract_file_references(text) == [
            "src/auth/tokens.py",
            "src/auth/middleware.py",
        ]

    def test_hyphens_dots_and_underscores(self) -> None:
        assert extract_file_references("see @docs/my-notes_v2.final.md") == [
            "docs/my-notes_v2.final.md"
        ]

    def test_trailing_period_stripped(self) -> None:
        assert extract_file_references("Edit @src/app.py.") == ["src/app.py"]

    def test_stops_at_punctuation(self) -> None:
        assert extract_file_references("(@src/a.py, @src/b.py)") == ["src/a.py", "src/b.py"]

    def test_email_addresses_ignored(self) -> None:
        assert extract_file_references("mail dev@example.com about @README.md") == [
            "README.md"
        ]

    def test_bare_identifier_accepted(self) -> None:
        assert extract_file_references("reuse @helpers") == ["helpers"]

    def test_lone_at_sign_ignored(self) -> None:
        assert extract_file_references("meet @ noon") == []

    def test_dots_only_dropped(self) -> None:
        assert extract_file_references("wait @...") == []

    def test_no_references(self) -> None:
        assert extract_file_references("nothing here") == []
