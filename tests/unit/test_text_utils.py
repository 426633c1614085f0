#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_text_utils.py
"""Unit tests for display width measurement and filling."""

import pytest

from zxcv.utils.text import char_width, display_width, fill, wrap_line, words


@pytest.mark.unit
class TestDisplayWidth:
    """Tests for terminal column widths."""

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("a", 1),
            ("é", 1),
            ("\u0301", 0),
            ("\u200d", 0),
            ("\u00ad", 1),
            ("\x07", 0),
            ("\u1160", 0),
            ("中", 2),
            ("\U0001f310", 2),
            ("Ａ", 2),
        ],
    )
    def test_char_width(self, char: str, expected: int) -> None:
        """Test widths of narrow, zero width and wide characters."""
        assert char_width(char) == expected

    def test_display_width(self) -> None:
        """Test that string width sums character widths."""
        assert display_width("foo") == 3
        assert display_width("e\u0301") == 1
        assert display_width("中文") == 4
        assert display_width("") == 0


@pytest.mark.unit
class TestWrapLine:
    """Tests for wrapping a single line."""

    def test_no_width_only_indents(self) -> None:
        """Test that a missing width disables wrapping."""
        assert wrap_line("foo bar", None, "> ") == ["> foo bar"]
        assert wrap_line("foo bar", 0, "> ") == ["> foo bar"]

    def test_fitting_line_is_verbatim(self) -> None:
        """Test that runs of spaces survive when the line fits."""
        assert wrap_line("a   | b", 10) == ["a   | b"]

    def test_greedy_wrap(self) -> None:
        """Test greedy placement of words."""
        assert wrap_line("foo bar baz", 7) == ["foo bar", "baz"]

    def test_indents(self) -> None:
        """Test that the first and later lines get their own indents."""
        assert wrap_line("foo bar baz", 7, "* ", "  ") == ["* foo", "  bar", "  baz"]

    def test_long_word_is_broken(self) -> None:
        """Test that words wider than the line are split."""
        assert wrap_line("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_wide_characters(self) -> None:
        """Test that double width characters count twice."""
        assert wrap_line("中文 中文", 5) == ["中文", "中文"]

    def test_trailing_whitespace_removed(self) -> None:
        """Test that physical lines are right-stripped."""
        assert wrap_line("", 10, "> ") == [">"]


@pytest.mark.unit
class TestFill:
    """Tests for filling multi-line text."""

    def test_fill_docstring_example(self) -> None:
        """Test filling with a quote prefix."""
        assert fill("foo bar baz", 7, initial_indent="> ", subsequent_indent="> ") == "> foo\n> bar\n> baz"

    def test_existing_newlines_kept(self) -> None:
        """Test that explicit line breaks are preserved and use the subsequent indent."""
        assert fill("foo\nbar", 80, "1. ", "   ") == "1. foo\n   bar"

    def test_lines_within_width(self) -> None:
        """Test that no physical line exceeds the width."""
        text = " ".join(["lorem", "ipsum", "dolor", "sit", "amet"] * 10)
        for line in fill(text, 20).split("\n"):
            assert display_width(line) <= 20

    def test_words(self) -> None:
        """Test splitting text into words."""
        assert words("foo  bar\nbaz") == ["foo", "bar", "baz"]
        assert words("") == []
        assert words("foo\tbar baz") == ["foo\tbar", "baz"]
