"""zxcv - view the essential content of a URL.

zxcv takes the essential content of a web page (the text of a pastebin link,
the article in a blog post, the video behind a streaming link) and runs an
appropriate local program to display it (``less``, ``mupdf``, ``mpv``).

Most pages end up as text: the HTML is reduced to readable, line-wrapped,
Markdown-flavored plain text by :mod:`zxcv.html`.

Examples
--------
Render an HTML fragment:

    >>> from zxcv.html import render
    >>> render("<p>foo</p><p>bar</p>")
    'foo\\n\\nbar'

View a URL with the default configuration:

    >>> from zxcv import Config, show_url
    >>> show_url(Config(), "https://example.com/")  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from zxcv.config import Config
from zxcv.fetch import show_url

__all__ = ["Config", "show_url", "__version__"]
