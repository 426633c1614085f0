#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_config.py
"""Unit tests for configuration loading."""

import pytest

from zxcv.config import ArgvConfig, Config
from zxcv.content import Audio, Collection, Image, Pdf, Raw, Text, Video
from zxcv.exceptions import ConfigError


@pytest.mark.unit
class TestFromToml:
    """Tests for parsing TOML configuration."""

    def test_empty_is_default(self) -> None:
        """Test that an empty document gives the default configuration."""
        assert Config.from_toml("") == Config()

    def test_defaults(self) -> None:
        """Test the default viewer commands."""
        argv = Config().argv
        assert argv.audio == ("mpv", "--profile=builtin-pseudo-gui", "--", "%u")
        assert argv.image == ("mupdf", "--", "%f")
        assert argv.pdf == ("mupdf", "--", "%f")
        assert argv.text == ("xterm", "-e", "%p", "--", "%f")
        assert argv.video == ("mpv", "--", "%u")

    def test_override_one_command(self) -> None:
        """Test that unspecified commands keep their defaults."""
        config = Config.from_toml('[argv]\ntext = ["less", "--", "%f"]\n')
        assert config.argv.text == ("less", "--", "%f")
        assert config.argv.video == ArgvConfig().video

    def test_empty_argv_table(self) -> None:
        """Test that an empty argv table gives the defaults."""
        assert Config.from_toml("[argv]\n") == Config()

    @pytest.mark.parametrize(
        "toml",
        [
            "[argv",
            "[viewer]\n",
            "foo = 1\n",
            '[argv]\nbrowser = ["firefox"]\n',
            '[argv]\ntext = "less"\n',
            "[argv]\ntext = []\n",
            "[argv]\ntext = [1, 2]\n",
            'argv = "less"\n',
        ],
        ids=[
            "invalid_toml",
            "unknown_section",
            "unknown_key",
            "unknown_argv_key",
            "string_instead_of_array",
            "empty_array",
            "non_string_elements",
            "argv_not_table",
        ],
    )
    def test_invalid(self, toml: str) -> None:
        """Test that invalid configurations are rejected."""
        with pytest.raises(ConfigError):
            Config.from_toml(toml)


@pytest.mark.unit
class TestFromFile:
    """Tests for loading configuration files."""

    def test_load(self, tmp_path) -> None:
        """Test loading a configuration file from disk."""
        path = tmp_path / "zxcv.toml"
        path.write_text('[argv]\npdf = ["zathura", "%f"]\n', encoding="utf-8")
        assert Config.from_file(path).argv.pdf == ("zathura", "%f")

    def test_missing_file(self, tmp_path) -> None:
        """Test that an unreadable file is a configuration error."""
        path = tmp_path / "missing.toml"
        with pytest.raises(ConfigError) as exc_info:
            Config.from_file(path)
        assert exc_info.value.config_path == str(path)
        assert isinstance(exc_info.value.original_error, OSError)

    def test_invalid_file_names_path(self, tmp_path) -> None:
        """Test that errors in a file mention the file."""
        path = tmp_path / "bad.toml"
        path.write_text("[argv]\nfoo = []\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="bad.toml"):
            Config.from_file(path)


@pytest.mark.unit
class TestGetArgv:
    """Tests for selecting the command for content."""

    @pytest.mark.parametrize(
        "content,field",
        [
            (Audio("https://example.com/a.mp3"), "audio"),
            (Video("https://example.com/v"), "video"),
            (Image(b""), "image"),
            (Pdf(b""), "pdf"),
            (Text(Raw(b"")), "text"),
            (Collection(), "text"),
        ],
    )
    def test_get_argv(self, content, field: str) -> None:
        """Test that each kind of content selects its command."""
        config = Config(
            argv=ArgvConfig(audio=("a",), image=("i",), pdf=("p",), text=("t",), video=("v",)),
        )
        assert config.get_argv(content) == (field[0],)
