#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/rewrite.py
"""Rewrite paste site URLs to their raw text endpoints.

Pastebins wrap the pasted text in a page full of navigation and syntax
highlighting. Most of them also serve the bare text at a related URL, which
is what a pager should show.
"""

from __future__ import annotations

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)


def _append_path(path: str, suffix: str) -> str:
    return path if path.endswith(suffix) else path + suffix


def _rewrite_bpa_st(path: str) -> str:
    if path.startswith("/raw/") or path.endswith("/raw"):
        return path
    return path + "/raw"


def _rewrite_dav1d(path: str) -> str:
    # Pastes are addressed with the extension of the language to highlight
    head, dot, _ = path.rpartition(".")
    return head if dot else path


def _rewrite_paste_debian(path: str) -> str | None:
    if path.startswith("/plain"):
        return path
    segments = path.split("/")[1:]
    if segments and not segments[-1]:
        segments.pop()
    if not segments:
        return None
    return f"/plain/{segments[-1]}"


def _rewrite_pastebin_com(path: str) -> str:
    return path if path.startswith("/raw") else "/raw" + path


_PATH_REWRITERS = {
    "bpa.st": _rewrite_bpa_st,
    "p.dav1d.de": _rewrite_dav1d,
    "paste.debian.net": _rewrite_paste_debian,
    "dpaste.com": lambda path: _append_path(path, ".txt"),
    "dpaste.org": lambda path: _append_path(path, "/raw"),
    "paste.mozilla.org": lambda path: _append_path(path, "/raw"),
    "pastebin.mozilla.org": lambda path: _append_path(path, "/raw"),
    "pastebin.com": _rewrite_pastebin_com,
}


def rewrite_url(url: str) -> tuple[bool, str]:
    """Rewrite ``url`` to the raw text endpoint of a known paste site.

    Rewriting an already rewritten URL returns it unchanged, still reporting
    it as rewritten.

    Parameters
    ----------
    url : str
        Absolute URL

    Returns
    -------
    tuple[bool, str]
        Whether the URL belongs to a paste site, and the URL to fetch

    Examples
    --------
        >>> rewrite_url("https://pastebin.com/example")
        (True, 'https://pastebin.com/raw/example')
        >>> rewrite_url("https://example.com/")
        (False, 'https://example.com/')

    """
    parts = urlsplit(url)
    hostname = parts.hostname

    if hostname == "marc.info":
        pairs = [(key, value) for key, value in parse_qsl(parts.query, keep_blank_values=True) if key != "q"]
        pairs.append(("q", "mbox"))
        rewritten = urlunsplit(parts._replace(query=urlencode(pairs)))
    elif hostname in _PATH_REWRITERS:
        path = _PATH_REWRITERS[hostname](parts.path)
        if path is None:
            return False, url
        rewritten = urlunsplit(parts._replace(path=path))
    else:
        return False, url

    if rewritten != url:
        logger.debug("Rewrote %s to %s", url, rewritten)
    return True, rewritten
