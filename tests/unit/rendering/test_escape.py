#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/rendering/test_escape.py
"""Unit tests for Markdown escaping."""

import pytest

from zxcv.html.escape import escape_markdown


def escape(text: str) -> str:
    return "".join(escape_markdown(text))


@pytest.mark.unit
class TestEscapeMarkdown:
    """Tests for backslash escaping of Markdown characters."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("foo", "foo"),
            ("foo* bar_baz", "foo\\* bar\\_baz"),
            ("# heading", "\\# heading"),
            ("a\\b", "a\\\\b"),
            ("`code`", "\\`code\\`"),
            ("[link](url) <tag> ~x~", "[link](url) <tag> ~x~"),
            ("", ""),
        ],
    )
    def test_escape(self, text: str, expected: str) -> None:
        """Test escaping representative inputs."""
        assert escape(text) == expected

    def test_no_unescaped_special_character_remains(self) -> None:
        """Test that every special character in the output follows a backslash."""
        escaped = escape("*_#`\\ mixed *text* with __all__ of #them")
        index = 0
        while index < len(escaped):
            if escaped[index] == "\\":
                assert escaped[index + 1] in "#*\\_`"
                index += 2
                continue
            assert escaped[index] not in "#*_`"
            index += 1
