#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration loading for zxcv.

The configuration file is TOML. Its only section, ``[argv]``, defines the
command run for each kind of content::

    [argv]
    text = ["less", "--", "%f"]

| Key   | Default                                            |
| ----- | -------------------------------------------------- |
| audio | ``["mpv", "--profile=builtin-pseudo-gui", "--", "%u"]`` |
| image | ``["mupdf", "--", "%f"]``                          |
| pdf   | ``["mupdf", "--", "%f"]``                          |
| text  | ``["xterm", "-e", "%p", "--", "%f"]``              |
| video | ``["mpv", "--", "%u"]``                            |

An argv element consisting of exactly ``%`` and one letter is substituted
(see :mod:`zxcv.viewer`); concatenation with other text is not supported.

| Content | Flag | Description                                       |
| ------- | ---- | ------------------------------------------------- |
| Audio   | %u   | URL of the audio                                  |
| Image   | %f   | Temporary file containing the image               |
| PDF     | %f   | Temporary file containing the PDF                 |
| Text    | %f   | Temporary file containing the text                |
| Text    | %p   | Value of ``$PAGER``, ``less`` when unset          |
| Video   | %u   | URL of the video                                  |

"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from zxcv.constants import (
    DEFAULT_ARGV_AUDIO,
    DEFAULT_ARGV_IMAGE,
    DEFAULT_ARGV_PDF,
    DEFAULT_ARGV_TEXT,
    DEFAULT_ARGV_VIDEO,
)
from zxcv.exceptions import ConfigError

if TYPE_CHECKING:
    from zxcv.content import Content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArgvConfig:
    """Viewer command lines per kind of content.

    Parameters
    ----------
    audio : tuple of str
        Command for audio URLs
    image : tuple of str
        Command for downloaded images
    pdf : tuple of str
        Command for downloaded PDFs
    text : tuple of str
        Command for rendered text and collections
    video : tuple of str
        Command for video URLs

    """

    audio: tuple[str, ...] = field(default=DEFAULT_ARGV_AUDIO, metadata={"help": "Command for audio URLs"})
    image: tuple[str, ...] = field(default=DEFAULT_ARGV_IMAGE, metadata={"help": "Command for images"})
    pdf: tuple[str, ...] = field(default=DEFAULT_ARGV_PDF, metadata={"help": "Command for PDFs"})
    text: tuple[str, ...] = field(default=DEFAULT_ARGV_TEXT, metadata={"help": "Command for text"})
    video: tuple[str, ...] = field(default=DEFAULT_ARGV_VIDEO, metadata={"help": "Command for video URLs"})

    def __post_init__(self) -> None:
        """Validate that every command is a non-empty sequence of strings.

        Raises
        ------
        ConfigError
            If a command is empty or holds anything but strings.

        """
        for config_field in fields(self):
            value = getattr(self, config_field.name)
            if not value or not all(isinstance(arg, str) for arg in value):
                raise ConfigError(f"argv.{config_field.name} must be a non-empty array of strings, got {value!r}")


@dataclass(frozen=True)
class Config:
    """Configuration for zxcv.

    Parameters
    ----------
    argv : ArgvConfig
        Viewer command lines

    Examples
    --------
        >>> Config.from_toml('[argv]\\ntext = ["less", "--", "%f"]').argv.text
        ('less', '--', '%f')

    """

    argv: ArgvConfig = field(default_factory=ArgvConfig)

    @classmethod
    def from_toml(cls, text: str) -> Config:
        """Parse a configuration from TOML.

        Parameters
        ----------
        text : str
            TOML document

        Returns
        -------
        Config
            The parsed configuration; an empty document gives the defaults

        Raises
        ------
        ConfigError
            If the document is not valid TOML, has unknown sections or keys,
            or has values of the wrong type.

        """
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML: {e}", original_error=e) from e
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a configuration from parsed TOML data.

        Raises
        ------
        ConfigError
            If there are unknown sections or keys or values of the wrong type.

        """
        _reject_unknown_keys(data, {"argv"}, "configuration")

        argv_data = data.get("argv", {})
        if not isinstance(argv_data, dict):
            raise ConfigError(f"[argv] must be a table, got {type(argv_data).__name__}")
        _reject_unknown_keys(argv_data, {f.name for f in fields(ArgvConfig)}, "[argv]")

        commands: dict[str, tuple[str, ...]] = {}
        for key, value in argv_data.items():
            if not isinstance(value, list):
                raise ConfigError(f"argv.{key} must be an array of strings, got {type(value).__name__}")
            commands[key] = tuple(value)
        return cls(argv=ArgvConfig(**commands))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> Config:
        """Load a configuration file.

        Raises
        ------
        ConfigError
            If the file cannot be read or is not a valid configuration.

        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to open config file: {e}", config_path=str(path), original_error=e) from e

        try:
            config = cls.from_toml(text)
        except ConfigError as e:
            raise ConfigError(f"{path}: {e.message}", config_path=str(path), original_error=e) from e
        logger.debug("Loaded configuration from %s", path)
        return config

    def get_argv(self, content: Content) -> tuple[str, ...]:
        """Return the command line template for ``content``."""
        return getattr(self.argv, content.kind)


def _reject_unknown_keys(data: dict[str, Any], allowed: set[str], where: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(f"Unknown key(s) in {where}: {', '.join(unknown)}")
