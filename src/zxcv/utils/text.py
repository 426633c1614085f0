#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/utils/text.py
"""Terminal text measurement and line filling.

The standard library's ``textwrap`` measures text in characters. Rendered
output is read in a terminal, where combining marks and zero width joiners
take no column and wide East Asian characters and most emoji take two, so the
helpers here measure *display width* instead.

Functions
---------
char_width : Terminal column width of one character
display_width : Terminal column width of a string
fill : Reflow text to a width, honoring initial and subsequent indents

Examples
--------
    >>> display_width("foo")
    3
    >>> display_width("\\U0001f310")
    2
    >>> fill("foo bar baz", 7, initial_indent="> ", subsequent_indent="> ")
    '> foo\\n> bar\\n> baz'

"""

from __future__ import annotations

import re
import unicodedata

_WORD_RE = re.compile(r"([^ ]+)( *)")

# Hangul Jamo medial vowels and final consonants combine with the preceding syllable
_JAMO_COMBINING = range(0x1160, 0x1200)


def char_width(char: str) -> int:
    """Return the number of terminal columns a single character occupies.

    Parameters
    ----------
    char : str
        A single character

    Returns
    -------
    int
        0 for control, combining and format characters, 2 for wide and
        fullwidth characters, 1 otherwise

    """
    code = ord(char)
    if code < 0x20 or 0x7F <= code < 0xA0:
        return 0
    if code in _JAMO_COMBINING or unicodedata.combining(char):
        return 0
    category = unicodedata.category(char)
    if category in ("Mn", "Me"):
        return 0
    # Soft hyphen is a format character but terminals draw it
    if category == "Cf" and char != "\u00ad":
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    return sum(char_width(char) for char in text)


def _split_at_width(word: str, width: int) -> tuple[str, str]:
    """Split ``word`` so that the head fits in ``width`` columns.

    The head always holds at least one character so callers make progress
    even when a single character is wider than ``width``.
    """
    used = 0
    for index, char in enumerate(word):
        used += char_width(char)
        if used > width:
            index = max(index, 1)
            return word[:index], word[index:]
    return word, ""


def _join(indent: str, content: str) -> str:
    return (indent + content).rstrip()


def wrap_line(line: str, width: int | None, initial_indent: str = "", subsequent_indent: str = "") -> list[str]:
    """Wrap a single line (no embedded newlines) into indented physical lines.

    Words are separated by ASCII spaces and placed greedily. A line that
    already fits is returned unchanged apart from its indent, which keeps
    runs of spaces (table alignment) intact. Words wider than the available
    width are broken.

    Parameters
    ----------
    line : str
        Text to wrap
    width : int or None
        Maximum display width including the indent; falsy disables wrapping
    initial_indent : str, default ""
        Prepended to the first physical line
    subsequent_indent : str, default ""
        Prepended to every following physical line

    Returns
    -------
    list[str]
        Physical lines with trailing whitespace removed

    """
    if not width:
        return [_join(initial_indent, line)]

    stripped = line.lstrip(" ")
    leading = line[: len(line) - len(stripped)]

    lines: list[str] = []
    indent = initial_indent
    available = max(width - display_width(indent), 1)
    current = ""
    current_width = 0

    for index, match in enumerate(_WORD_RE.finditer(stripped)):
        word, spaces = match.group(1), match.group(2)
        if index == 0:
            word = leading + word
        word_width = display_width(word)

        if current and current_width + word_width > available:
            lines.append(_join(indent, current))
            indent = subsequent_indent
            available = max(width - display_width(indent), 1)
            current = ""
            current_width = 0

        if not current:
            while word_width > available:
                head, word = _split_at_width(word, available)
                lines.append(_join(indent, head))
                indent = subsequent_indent
                available = max(width - display_width(indent), 1)
                word_width = display_width(word)
            if not word:
                continue

        current += word + spaces
        current_width += word_width + len(spaces)

    if current or not lines:
        lines.append(_join(indent, current))
    return lines


def fill(text: str, width: int | None, initial_indent: str = "", subsequent_indent: str = "") -> str:
    """Reflow ``text`` into lines no wider than ``width`` display columns.

    Existing newlines are kept as hard breaks. Only the very first physical
    line receives ``initial_indent``; all others receive
    ``subsequent_indent``. Lines with no content carry the indent with its
    trailing whitespace trimmed.

    Parameters
    ----------
    text : str
        Text to reflow
    width : int or None
        Target display width; ``None`` or ``0`` only applies the indents
    initial_indent : str, default ""
        Prefix for the first physical line
    subsequent_indent : str, default ""
        Prefix for every other physical line

    Returns
    -------
    str
        The filled text, without a trailing newline

    """
    lines: list[str] = []
    indent = initial_indent
    for line in text.split("\n"):
        lines.extend(wrap_line(line, width, indent, subsequent_indent))
        indent = subsequent_indent
    return "\n".join(lines)


def words(text: str) -> list[str]:
    """Split text into the words a wrap could break between.

    Lines only break at ASCII spaces, so tabs and other whitespace stay part
    of their word.
    """
    return [word for line in text.split("\n") for word in line.split(" ") if word]
