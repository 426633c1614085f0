#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/viewer.py
"""Launch the configured program for a piece of content."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from collections.abc import Mapping, Sequence

from zxcv.config import Config
from zxcv.constants import DEFAULT_PAGER
from zxcv.content import Audio, Collection, Content, Image, Pdf, Text, Video
from zxcv.exceptions import ViewerError

logger = logging.getLogger(__name__)


def substitute_argv(argv: Sequence[str], replacements: Mapping[str, str]) -> list[str]:
    """Replace ``%X`` placeholders in a viewer command line.

    Only arguments consisting of exactly ``%`` and one character are
    placeholders; every other argument, including the program name, is kept
    as is.

    Parameters
    ----------
    argv : sequence of str
        Command line template
    replacements : mapping of str to str
        Values by placeholder letter

    Returns
    -------
    list[str]
        The command line to execute

    Raises
    ------
    ViewerError
        If a placeholder has no value for this kind of content.

    Examples
    --------
        >>> substitute_argv(["less", "--", "%f"], {"f": "/tmp/x"})
        ['less', '--', '/tmp/x']

    """
    command = [argv[0]]
    for arg in argv[1:]:
        if len(arg) == 2 and arg.startswith("%"):
            letter = arg[1]
            if letter not in replacements:
                raise ViewerError(f"%{letter} is not valid for this content type", argv=list(argv))
            command.append(replacements[letter])
        else:
            command.append(arg)
    return command


def show_content(config: Config, content: Content) -> None:
    """Show ``content`` with the program configured for its kind.

    Text, collections, images and PDFs are written to a temporary file that
    is removed once the program exits. Audio and video are passed by URL.

    Raises
    ------
    ViewerError
        If the command line is invalid, the program cannot be started or it
        exits non-zero.

    """
    argv = config.get_argv(content)

    if isinstance(content, (Audio, Video)):
        _run(substitute_argv(argv, {"u": content.url}))
        return

    replacements: dict[str, str] = {}
    if isinstance(content, (Text, Collection)):
        replacements["p"] = os.environ.get("PAGER", DEFAULT_PAGER)

    with tempfile.NamedTemporaryFile(prefix="zxcv-") as file:
        if isinstance(content, (Image, Pdf)):
            file.write(content.data)
        else:
            content.write(file)
        file.flush()
        replacements["f"] = file.name
        _run(substitute_argv(argv, replacements))


def _run(command: list[str]) -> None:
    logger.debug("Running %s", command)
    try:
        completed = subprocess.run(command, check=False)
    except OSError as e:
        raise ViewerError(f"Failed to run {command[0]}: {e}", argv=command, original_error=e) from e

    if completed.returncode != 0:
        raise ViewerError(
            f"Command exited with status {completed.returncode}", argv=command, returncode=completed.returncode
        )
