#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/html/whitespace.py
"""Whitespace squeezing for HTML text nodes.

HTML collapses runs of whitespace when laying out text. Text nodes therefore
arrive with indentation and newlines from the source document which must be
reduced to single spaces before being added to the output.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from zxcv.constants import ZERO_WIDTH_SPACE


def is_whitespace(char: str) -> bool:
    """Return True if ``char`` separates words in HTML text.

    Zero width space is included as pages use it to mark break opportunities.
    """
    return char.isspace() or char == ZERO_WIDTH_SPACE


def squeeze_whitespace(chars: Iterable[str]) -> Iterator[str]:
    """Collapse whitespace runs into single spaces and drop it at the ends.

    Parameters
    ----------
    chars : Iterable[str]
        Characters to process; consumed lazily

    Yields
    ------
    str
        Characters of the squeezed text

    Examples
    --------
        >>> "".join(squeeze_whitespace("  foo\\n\\tbar  "))
        'foo bar'

    """
    pending_space = False
    started = False
    for char in chars:
        if is_whitespace(char):
            pending_space = started
            continue
        if pending_space:
            yield " "
            pending_space = False
        started = True
        yield char
