#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/html/renderer.py
"""HTML to text renderer.

This module walks a BeautifulSoup tree depth first and feeds its text and
structure into the block accumulator of :mod:`zxcv.html.state`. The output
is plain text meant to be read in a pager, borrowing just enough Markdown to
keep the structure of the page visible: emphasis markers, quote and list
prefixes, underlined headers, fenced code and ``[text](url)`` links.

"""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urldefrag, urljoin

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from zxcv.constants import SKIPPED_HTML_ELEMENTS
from zxcv.html.escape import escape_markdown
from zxcv.html.state import Block, RenderState
from zxcv.html.table import render_table
from zxcv.html.whitespace import is_whitespace, squeeze_whitespace
from zxcv.utils.text import display_width

logger = logging.getLogger(__name__)

_NEWLINES_RE = re.compile(r"\s*\n\s*")

_LANGUAGE_CLASS_PREFIX = "language-"


class HtmlTextRenderer:
    """Render BeautifulSoup nodes as Markdown-flavored plain text.

    Parameters
    ----------
    base_url : str, default ""
        URL of the page, used to resolve relative ``href`` and ``src``
        attributes

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> soup = BeautifulSoup("<ul><li>foo</li><li>bar</li></ul>", "html.parser")
        >>> print(HtmlTextRenderer().render_node(soup))
        * foo
        * bar

    """

    _ELEMENT_HANDLERS = {
        "a": "_render_link",
        "b": "_render_strong",
        "blockquote": "_render_blockquote",
        "br": "_render_line_break",
        "code": "_render_code",
        "div": "_render_block",
        "em": "_render_emphasis",
        "h1": "_render_heading",
        "h2": "_render_heading",
        "h3": "_render_heading",
        "h4": "_render_heading",
        "h5": "_render_heading",
        "h6": "_render_heading",
        "i": "_render_emphasis",
        "img": "_render_image",
        "ol": "_render_ordered_list",
        "p": "_render_block",
        "pre": "_render_preformatted",
        "strong": "_render_strong",
        "table": "_render_table",
        "ul": "_render_unordered_list",
    }

    def __init__(self, base_url: str = ""):
        """Initialize the renderer for a page at ``base_url``."""
        self.base_url = base_url

    def render_node(self, node: PageElement, max_width: Optional[int] = None) -> str:
        """Render ``node`` and everything below it.

        Parameters
        ----------
        node : PageElement
            A BeautifulSoup document, element or string
        max_width : int or None, default None
            Line length to fill text to; ``None`` disables wrapping

        Returns
        -------
        str
            The rendered text

        """
        state = RenderState(max_width)
        with state.root_block() as block:
            self.visit(node, block)
        return state.render()

    def render_children(self, node: Tag, max_width: Optional[int] = None) -> str:
        """Render the children of ``node`` in isolation from the current output."""
        state = RenderState(max_width)
        with state.root_block() as block:
            self._visit_children(node, block)
        return state.render()

    def visit(self, node: PageElement, block: Block) -> None:
        """Render ``node`` into ``block``.

        Elements without a handler are transparent: their children are
        rendered into the same block.
        """
        if isinstance(node, NavigableString):
            # Comments, CDATA, doctypes and processing instructions
            if isinstance(node, PreformattedString):
                return
            block.push(str(node))
            return

        if not isinstance(node, Tag):
            return

        if node.name in SKIPPED_HTML_ELEMENTS:
            return

        handler_name = self._ELEMENT_HANDLERS.get(node.name)
        if handler_name:
            handler = getattr(self, handler_name)
            handler(node, block)
        else:
            self._visit_children(node, block)

    def _visit_children(self, node: Tag, block: Block) -> None:
        for child in node.children:
            self.visit(child, block)

    def _render_inline(self, node: Tag, block: Block, marker: str) -> None:
        block.push_raw_start(marker)
        self._visit_children(node, block)
        block.push_raw_end(marker)

    def _render_strong(self, node: Tag, block: Block) -> None:
        self._render_inline(node, block, "**")

    def _render_emphasis(self, node: Tag, block: Block) -> None:
        self._render_inline(node, block, "_")

    def _render_code(self, node: Tag, block: Block) -> None:
        in_code = block.in_code
        block.in_code = True
        self._render_inline(node, block, "`")
        block.in_code = in_code

    def _render_line_break(self, node: Tag, block: Block) -> None:
        block.newline()

    def _render_block(self, node: Tag, block: Block) -> None:
        with block.new_block() as child:
            self._visit_children(node, child)

    def _render_blockquote(self, node: Tag, block: Block) -> None:
        with block.new_block() as child:
            child.prefix("> ", "> ")
            self._visit_children(node, child)

    def _render_heading(self, node: Tag, block: Block) -> None:
        """Render h1 and h2 with an underline, smaller headers with hashes."""
        text = self.render_children(node)
        if not text:
            return

        level = int(node.name[1])
        with block.new_block() as child:
            if level <= 2:
                width = max(display_width(line) for line in text.split("\n"))
                state = child.state
                if state.max_width:
                    width = min(width, max(state.max_width - display_width(state.initial_prefix), 1))
                child.push_raw(text)
                child.newline()
                child.push_raw(("=" if level == 1 else "-") * width)
            else:
                child.push_raw("#" * level + " " + text)

    def _render_image(self, node: Tag, block: Block) -> None:
        src = node.get("src")
        if not src:
            return
        alt = "".join(escape_markdown(squeeze_whitespace(str(node.get("alt", "")))))
        block.push_raw(f"![{alt}]({self._resolve_url(str(src))})")

    def _render_link(self, node: Tag, block: Block) -> None:
        """Render a link as ``[text](url)``.

        Links back to the same page whose text is a single visible character
        are the permalink icons placed next to headers and are dropped.
        """
        text = _NEWLINES_RE.sub(" ", self.render_children(node))
        href = node.get("href")

        if href is None:
            self._push_inline_text(node, block, text)
            return

        url = self._resolve_url(str(href))
        if self._is_same_page(url) and _is_single_visual_character(text):
            logger.debug("Dropping self link %r with text %r", url, text)
            return

        self._push_inline_text(node, block, f"[{text}]({url})")

    def _render_ordered_list(self, node: Tag, block: Block) -> None:
        items = node.find_all("li", recursive=False)
        if not items:
            return

        width = len(str(len(items)))
        with block.new_block() as list_block:
            for number, item in enumerate(items, start=1):
                with list_block.new_item() as item_block:
                    item_block.prefix(f"{number:>{width}}. ", " " * width + "  ")
                    item_block.must_emit()
                    self._visit_children(item, item_block)
        block.end_list()

    def _render_unordered_list(self, node: Tag, block: Block) -> None:
        for item in node.find_all("li", recursive=False):
            with block.new_item() as item_block:
                item_block.prefix("* ", "  ")
                item_block.must_emit()
                self._visit_children(item, item_block)
        block.end_list()

    def _render_preformatted(self, node: Tag, block: Block) -> None:
        with block.new_raw_block() as raw:
            raw.push("```" + _code_language(node))
            raw.push("\n")
            raw.push(_preformatted_text(node))
            raw.ensure_newline()
            raw.push("```")

    def _render_table(self, node: Tag, block: Block) -> None:
        state = block.state
        max_width = None
        if state.max_width:
            max_width = max(state.max_width - display_width(state.subsequent_prefix), 1)

        rendered = render_table(node, self.render_node, max_width)
        with block.new_block() as child:
            child.push_raw(rendered)

    def _push_inline_text(self, node: Tag, block: Block, text: str) -> None:
        # The isolated render drops whitespace at the edges of the element
        content = node.get_text()
        if content and is_whitespace(content[0]):
            block.pending_whitespace = True
        block.push_raw(text)
        if content and is_whitespace(content[-1]):
            block.pending_whitespace = True

    def _resolve_url(self, url: str) -> str:
        url = url.strip()
        if not self.base_url:
            return url
        try:
            return urljoin(self.base_url, url)
        except ValueError:
            logger.debug("Could not resolve %r against %r", url, self.base_url)
            return url

    def _is_same_page(self, url: str) -> bool:
        try:
            return urldefrag(url).url == urldefrag(self.base_url).url
        except ValueError:
            return False


def _is_single_visual_character(text: str) -> bool:
    return len(text) <= 1 or (len(text) <= 2 and text[0] == "\\")


def _code_language(pre: Tag) -> str:
    """Return the language named by a ``language-X`` class of the contained ``<code>``."""
    code = pre.find("code")
    if not isinstance(code, Tag):
        return ""
    classes = code.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    if not classes or not classes[0].startswith(_LANGUAGE_CLASS_PREFIX):
        return ""
    return classes[0][len(_LANGUAGE_CLASS_PREFIX) :]


def _preformatted_text(pre: Tag) -> str:
    """Return the text of a ``<pre>`` with ``<br>`` elements as newlines."""
    parts: list[str] = []
    for descendant in pre.descendants:
        if isinstance(descendant, Tag):
            if descendant.name == "br":
                parts.append("\n")
        elif isinstance(descendant, NavigableString) and not isinstance(descendant, PreformattedString):
            parts.append(str(descendant))
    text = "".join(parts)
    # A newline directly after the start tag is not part of the content
    if text.startswith("\n"):
        text = text[1:]
    return text


def render_node(node: PageElement, base_url: str = "", max_width: Optional[int] = None) -> str:
    """Render a parsed BeautifulSoup node as text.

    Parameters
    ----------
    node : PageElement
        Document, element or string to render
    base_url : str, default ""
        URL used to resolve relative links and images
    max_width : int or None, default None
        Line length to fill text to; ``None`` disables wrapping

    Returns
    -------
    str
        The rendered text

    """
    return HtmlTextRenderer(base_url).render_node(node, max_width)


def render(
    html: str, base_url: str = "", max_width: Optional[int] = None, html_parser: str = "html.parser"
) -> str:
    """Parse an HTML document or fragment and render it as text.

    Parameters
    ----------
    html : str
        HTML source
    base_url : str, default ""
        URL used to resolve relative links and images
    max_width : int or None, default None
        Line length to fill text to; ``None`` disables wrapping
    html_parser : str, default "html.parser"
        BeautifulSoup tree builder to use

    Returns
    -------
    str
        The rendered text

    Examples
    --------
        >>> render("<p>foo</p><p>bar</p>")
        'foo\\n\\nbar'
        >>> render("<h1>header</h1>")
        'header\\n======'

    """
    return render_node(BeautifulSoup(html, html_parser), base_url, max_width)


def select_single_element(tree: Tag, selector: str) -> Tag | None:
    """Return the single element matched by ``selector``.

    Parameters
    ----------
    tree : Tag
        Document or element to search
    selector : str
        CSS selector

    Returns
    -------
    Tag or None
        The match, or None when there are zero or several matches

    """
    matches = tree.select(selector, limit=2)
    return matches[0] if len(matches) == 1 else None
