#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/cli.py
"""Command line interface for zxcv.

Usage::

    zxcv [-f CONFIG] URL
    zxcv --render FILE [--width N] [--base-url URL]

The first form shows the content of ``URL`` with the configured program. The
second renders a local HTML file (``-`` for stdin) to stdout as text, which
is handy for checking how a page will look in the pager.

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from zxcv import __version__
from zxcv.config import Config
from zxcv.exceptions import ConfigError, FetchError, ValidationError, ViewerError, ZxcvError
from zxcv.fetch import show_url
from zxcv.html import render
from zxcv.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_CONFIG_ERROR = 4
EXIT_FETCH_ERROR = 5
EXIT_VIEWER_ERROR = 6


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``zxcv`` command."""
    parser = argparse.ArgumentParser(
        prog="zxcv",
        description="View the essential content of a URL with a local program.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Read an article in the pager
  zxcv https://example.com/blog/post

  # Use another configuration file
  zxcv -f ~/.config/zxcv.toml https://www.youtube.com/watch?v=example

  # Render a saved page to stdout
  zxcv --render page.html --width 72
        """,
    )

    parser.add_argument("url", nargs="?", help="URL to show")
    parser.add_argument("-f", "--config", metavar="CONFIG", help="Path to a TOML configuration file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    render_group = parser.add_argument_group("Rendering options")
    render_group.add_argument(
        "--render",
        metavar="FILE",
        help="Render an HTML file (use '-' for stdin) as text to stdout instead of showing a URL",
    )
    render_group.add_argument(
        "--width",
        type=int,
        default=None,
        help="Line length for --render (default: no wrapping)",
    )
    render_group.add_argument(
        "--base-url",
        default="",
        help="URL that relative links are resolved against for --render",
    )

    logging_group = parser.add_argument_group("Logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", metavar="PATH", help="Also write log messages to this file")
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Log everything with timestamps, including the HTTP requests made",
    )

    return parser


def _render_file(path: str, width: Optional[int], base_url: str) -> int:
    try:
        if path == "-":
            html = sys.stdin.read()
        else:
            with open(path, encoding="utf-8") as f:
                html = f.read()
    except OSError as e:
        print(f"Error: Failed to read {path}: {e}", file=sys.stderr)
        return EXIT_ERROR

    text = render(html, base_url=base_url, max_width=width)
    if text:
        print(text)
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the ``zxcv`` command.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit status

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace=parsed_args.trace)

    if parsed_args.render is not None:
        if parsed_args.url is not None:
            print("Error: --render cannot be combined with a URL", file=sys.stderr)
            return EXIT_VALIDATION_ERROR
        if parsed_args.width is not None and parsed_args.width < 0:
            print("Error: --width must not be negative", file=sys.stderr)
            return EXIT_VALIDATION_ERROR
        return _render_file(parsed_args.render, parsed_args.width, parsed_args.base_url)

    if parsed_args.url is None:
        print("Error: One argument is required", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        config = Config.from_file(parsed_args.config) if parsed_args.config else Config()
        show_url(config, parsed_args.url)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FETCH_ERROR
    except ViewerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VIEWER_ERROR
    except ZxcvError as e:
        logger.debug("Unexpected zxcv error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
