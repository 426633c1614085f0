#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/constants.py
"""Constants shared across zxcv modules."""

from __future__ import annotations

from typing import Final

# Target width of rendered text content
LINE_LENGTH: Final[int] = 80

# Raw text responses are truncated to this many bytes
MAX_RAW_LEN: Final[int] = 1024 * 1024

DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0

DEFAULT_PAGER: Final[str] = "less"

# Characters that would otherwise be interpreted as Markdown syntax
MARKDOWN_SPECIAL_CHARS: Final[frozenset[str]] = frozenset("#*\\_`")

# Zero width space is not whitespace to str.isspace() but renders as a break
ZERO_WIDTH_SPACE: Final[str] = "\u200b"

# Elements whose content never reaches the rendered text
SKIPPED_HTML_ELEMENTS: Final[frozenset[str]] = frozenset({"script", "style", "template", "title"})

# Selectors tried in order when picking the main text of a generic page
MAIN_TEXT_SELECTORS: Final[tuple[str, ...]] = ("main", "article", 'div[role="main"]')
BODY_SELECTORS: Final[tuple[str, ...]] = ("body",)

# Some pages carry an additional title outside of head, and some put their title in body
TITLE_SELECTORS: Final[tuple[str, ...]] = ("title", "head title")

DEFAULT_ARGV_AUDIO: Final[tuple[str, ...]] = ("mpv", "--profile=builtin-pseudo-gui", "--", "%u")
DEFAULT_ARGV_IMAGE: Final[tuple[str, ...]] = ("mupdf", "--", "%f")
DEFAULT_ARGV_PDF: Final[tuple[str, ...]] = ("mupdf", "--", "%f")
DEFAULT_ARGV_TEXT: Final[tuple[str, ...]] = ("xterm", "-e", "%p", "--", "%f")
DEFAULT_ARGV_VIDEO: Final[tuple[str, ...]] = ("mpv", "--", "%u")
