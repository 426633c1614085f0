#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/fetch.py
"""Fetch a URL and reduce it to viewable content.

The pipeline for a URL is:

1. Paste sites are rewritten to their raw endpoints and fetched generically.
2. Known hosts are handled specifically: streaming sites become
   :class:`~zxcv.content.Video` or :class:`~zxcv.content.Audio` without a
   request, image hosting pages are scraped for the image they show.
3. Everything else is fetched and dispatched on its Content-Type. HTML
   pages are reduced to their main text with :mod:`zxcv.html`.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Optional
from urllib.parse import urljoin, urlsplit

import httpx
from bs4 import BeautifulSoup
from bs4.element import Tag

from zxcv import __version__
from zxcv.config import Config
from zxcv.constants import (
    BODY_SELECTORS,
    DEFAULT_TIMEOUT_SECONDS,
    LINE_LENGTH,
    MAIN_TEXT_SELECTORS,
    MAX_RAW_LEN,
    TITLE_SELECTORS,
)
from zxcv.content import Article, Audio, Content, Image, Pdf, Raw, Text, Video
from zxcv.exceptions import ExtractionError, FetchError, UnsupportedContentError, UnsupportedUrlError
from zxcv.html import render_node, select_single_element
from zxcv.rewrite import rewrite_url
from zxcv.viewer import show_content

logger = logging.getLogger(__name__)

USER_AGENT = f"zxcv/{__version__}"

VIDEO_HOSTS = frozenset(
    {
        "twitch.tv",
        "www.twitch.tv",
        "youtu.be",
        "youtube.com",
        "m.youtube.com",
        "music.youtube.com",
        "www.youtube.com",
    }
)

AUDIO_HOSTS = frozenset({"soundcloud.com", "m.soundcloud.com"})

# Image hosting pages and the selector of the image they show
IMAGE_PAGE_SELECTORS = {
    "giphy.com": "figure img",
    "ibb.co": "#image-viewer-container > img",
    "imgbb.com": "#image-viewer-container > img",
    "postimg.cc": "#main-image",
    "tenor.com": ".main-container .Gif > img",
    "xkcd.com": "#comic > img",
    "m.xkcd.com": "#comic > img",
}


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT_SECONDS, transport: Optional[httpx.BaseTransport] = None
) -> httpx.Client:
    """Create the HTTP client used for every request of a URL.

    Parameters
    ----------
    timeout : float, default DEFAULT_TIMEOUT_SECONDS
        Timeout in seconds for each request
    transport : httpx.BaseTransport, optional
        Transport to send requests through instead of the network

    Returns
    -------
    httpx.Client
        Client following redirects and identifying itself as zxcv

    """

    def log_request(request: httpx.Request) -> None:
        logger.debug("%s %s", request.method, request.url)

    return httpx.Client(
        timeout=timeout,
        follow_redirects=True,
        event_hooks={"request": [log_request]},
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )


def validate_url(url: str) -> None:
    """Check that ``url`` is an absolute HTTP or HTTPS URL.

    Raises
    ------
    UnsupportedUrlError
        If the URL is relative or uses another scheme.

    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise UnsupportedUrlError(f"Invalid URL: {e}", url=url, original_error=e) from e

    if not parts.scheme:
        raise UnsupportedUrlError("Non-absolute URL", url=url)
    if parts.scheme not in ("http", "https"):
        raise UnsupportedUrlError("Unsupported URL scheme", url=url)
    if not parts.netloc:
        raise UnsupportedUrlError("Non-absolute URL", url=url)


def show_url(config: Config, url: str) -> None:
    """Open a program to show the content of ``url``.

    Parameters
    ----------
    config : Config
        Viewer configuration
    url : str
        Absolute HTTP or HTTPS URL

    Raises
    ------
    UnsupportedUrlError
        If the URL cannot be viewed at all
    FetchError
        If the URL or a related URL cannot be fetched, or the page does not
        have the expected structure
    ViewerError
        If the viewer cannot be started or exits non-zero

    """
    validate_url(url)
    show_content(config, get_content(url))


def get_content(url: str, client: Optional[httpx.Client] = None) -> Content:
    """Fetch ``url`` and pick the content to show.

    Parameters
    ----------
    url : str
        Absolute HTTP or HTTPS URL
    client : httpx.Client, optional
        Client to send requests with; a new one is created and closed
        when omitted

    Returns
    -------
    Content
        The content of the URL

    """
    if client is None:
        with create_http_client() as own_client:
            return get_content(url, own_client)

    rewritten, url = rewrite_url(url)
    if rewritten:
        return process_generic(client, url)

    content = process_specific(client, url)
    if content is not None:
        return content

    return process_generic(client, url)


def process_specific(client: httpx.Client, url: str) -> Optional[Content]:
    """Handle hosts that need more than the generic processing.

    Returns
    -------
    Content or None
        The content, or None when the host has no specific handling

    """
    hostname = urlsplit(url).hostname
    if hostname is None:
        return None

    if hostname in VIDEO_HOSTS:
        logger.debug("Treating %s as video", hostname)
        return Video(url)

    if hostname in AUDIO_HOSTS:
        logger.debug("Treating %s as audio", hostname)
        return Audio(url)

    selector = IMAGE_PAGE_SELECTORS.get(hostname)
    if selector is not None:
        logger.debug("Extracting image from %s with selector %r", hostname, selector)
        return image_via_selector(client, url, selector)

    return None


def image_via_selector(client: httpx.Client, url: str, selector: str) -> Content:
    """Fetch the page at ``url`` and the image its ``selector`` element shows.

    Raises
    ------
    ExtractionError
        If the selector does not match exactly one element with a ``src``.

    """
    with _get(client, url) as response:
        response.read()
        tree = BeautifulSoup(response.text, "html.parser")

    img = select_single_element(tree, selector)
    if img is None:
        raise ExtractionError(f"Expected one image matching selector {selector}", url=url)
    src = img.get("src")
    if not src:
        raise ExtractionError(f"Image matching selector {selector} has no src", url=url)

    return process_generic(client, urljoin(url, str(src)))


def process_generic(client: httpx.Client, url: str) -> Content:
    """Fetch ``url`` and dispatch on the media type of the response.

    Raises
    ------
    FetchError
        If the request fails or the response has no Content-Type
    UnsupportedContentError
        If no viewer handles the media type

    """
    with _get(client, url) as response:
        header = response.headers.get("Content-Type")
        if header is None:
            raise FetchError("Missing Content-Type header", url=url)
        content_type = _parse_content_type(header)
        final_url = str(response.url)
        logger.debug("Fetched %s as %s", final_url, content_type)

        if content_type == "application/pdf":
            return Pdf(response.read())
        if content_type == "application/vnd.apple.mpegurl":
            return Video(final_url)
        if content_type == "text/html":
            response.read()
            return process_html(final_url, BeautifulSoup(response.text, "html.parser"))
        if content_type.startswith("audio/"):
            return Audio(final_url)
        if content_type.startswith("image/"):
            return Image(response.read())
        if content_type.startswith("text/"):
            return Text(Raw(read_raw_response(response)))
        if content_type.startswith("video/"):
            return Video(final_url)

    raise UnsupportedContentError(content_type, url=url)


def process_html(url: str, tree: BeautifulSoup) -> Content:
    """Reduce an HTML page to its main text.

    The first of the main text selectors, then the body selectors, that
    matches exactly one element becomes the body of an
    :class:`~zxcv.content.Article`. Pages without such an element are shown
    as raw HTML.

    Parameters
    ----------
    url : str
        Final URL of the page, used to resolve relative links
    tree : BeautifulSoup
        The parsed page

    Returns
    -------
    Content
        The article or raw HTML as text

    """
    element = _select_first(tree, (*MAIN_TEXT_SELECTORS, *BODY_SELECTORS))
    if element is None:
        logger.debug("No main text element in %s, showing raw HTML", url)
        return Text(Raw(str(tree).encode()))

    title_element = _select_first(tree, TITLE_SELECTORS)
    title = title_element.get_text().strip() if title_element is not None else ""
    return Text(Article(title=title, body=render_node(element, url, LINE_LENGTH)))


def read_raw_response(response: httpx.Response, limit: int = MAX_RAW_LEN) -> bytes:
    """Read at most ``limit`` bytes of a streamed response body."""
    chunks: list[bytes] = []
    remaining = limit
    for chunk in response.iter_bytes():
        chunks.append(chunk[:remaining])
        remaining -= len(chunks[-1])
        if remaining <= 0:
            logger.debug("Truncated response from %s to %d bytes", response.url, limit)
            break
    return b"".join(chunks)


def _select_first(tree: BeautifulSoup, selectors: Sequence[str]) -> Optional[Tag]:
    for selector in selectors:
        element = select_single_element(tree, selector)
        if element is not None:
            return element
    return None


def _parse_content_type(content_type: str) -> str:
    """Return the media type of a Content-Type header without its parameters.

    Examples
    --------
    >>> _parse_content_type("text/html; charset=UTF-8")
    'text/html'

    """
    return content_type.split(";", 1)[0].strip().lower()


@contextmanager
def _get(client: httpx.Client, url: str) -> Iterator[httpx.Response]:
    """Stream a GET of ``url``, raising FetchError for transport failures and error statuses."""
    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            yield response
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        raise FetchError(
            f"Failed to fetch {url}: HTTP {status_code}", url=url, status_code=status_code, original_error=e
        ) from e
    except httpx.HTTPError as e:
        raise FetchError(f"Failed to fetch {url}: {e}", url=url, original_error=e) from e
