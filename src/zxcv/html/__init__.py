#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/html/__init__.py
"""HTML to text rendering engine.

Converts parsed HTML into readable, line-wrapped, Markdown-flavored plain
text. Site adapters hand either an HTML string to :func:`render` or an
already parsed BeautifulSoup node to :func:`render_node`.

Modules
-------
whitespace : Whitespace squeezing for text nodes
escape : Markdown escaping
state : Block-structured text accumulator
table : Table column layout
renderer : Element dispatch

"""

from zxcv.html.renderer import HtmlTextRenderer, render, render_node, select_single_element

__all__ = ["HtmlTextRenderer", "render", "render_node", "select_single_element"]
