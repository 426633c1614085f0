#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/html/escape.py
"""Markdown escaping for rendered text."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from zxcv.constants import MARKDOWN_SPECIAL_CHARS


def escape_markdown(chars: Iterable[str]) -> Iterator[str]:
    r"""Backslash-escape characters that would be read as Markdown syntax.

    Only ``#``, ``*``, ``\``, ``_`` and the backtick are escaped. The output
    is meant to be read rather than fed to a Markdown processor, so
    characters that are only special in rare contexts are left alone.

    Parameters
    ----------
    chars : Iterable[str]
        Characters to process; consumed lazily

    Yields
    ------
    str
        Characters of the escaped text

    Examples
    --------
        >>> "".join(escape_markdown("foo* bar_baz"))
        'foo\\* bar\\_baz'

    """
    for char in chars:
        if char in MARKDOWN_SPECIAL_CHARS:
            yield "\\"
        yield char
