#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_viewer.py
"""Unit tests for launching viewer programs."""

import os
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from zxcv.config import ArgvConfig, Config
from zxcv.content import Article, Audio, Collection, Image, Item, Pdf, Text, Video
from zxcv.exceptions import ViewerError
from zxcv.viewer import show_content, substitute_argv


def completed(returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


@pytest.mark.unit
class TestSubstituteArgv:
    """Tests for placeholder substitution."""

    def test_substitution(self) -> None:
        """Test that placeholders are replaced by their values."""
        assert substitute_argv(["viewer", "-e", "%p", "--", "%f"], {"p": "less", "f": "/tmp/x"}) == [
            "viewer",
            "-e",
            "less",
            "--",
            "/tmp/x",
        ]

    def test_only_whole_arguments(self) -> None:
        """Test that placeholders inside longer arguments are not replaced."""
        assert substitute_argv(["v", "--file=%f", "%%f", "%"], {"f": "x"}) == ["v", "--file=%f", "%%f", "%"]

    def test_program_not_substituted(self) -> None:
        """Test that the program name is taken literally."""
        assert substitute_argv(["%p", "%f"], {"p": "less", "f": "x"}) == ["%p", "x"]

    def test_unknown_placeholder(self) -> None:
        """Test that placeholders without a value are rejected."""
        with pytest.raises(ViewerError, match="%u is not valid for this content type"):
            substitute_argv(["v", "%u"], {"f": "x"})


@pytest.mark.unit
class TestShowContent:
    """Tests for running the viewer for each kind of content."""

    @pytest.fixture
    def config(self) -> Config:
        return Config(
            argv=ArgvConfig(
                audio=("player", "%u"),
                image=("imageviewer", "%f"),
                pdf=("pdfviewer", "%f"),
                text=("terminal", "%p", "%f"),
                video=("player", "--video", "%u"),
            )
        )

    def test_video_passed_by_url(self, config: Config) -> None:
        """Test that videos are streamed from their URL."""
        with patch("zxcv.viewer.subprocess.run", return_value=completed()) as run:
            show_content(config, Video("https://example.com/v"))
        run.assert_called_once_with(["player", "--video", "https://example.com/v"], check=False)

    def test_audio_passed_by_url(self, config: Config) -> None:
        """Test that audio is streamed from its URL."""
        with patch("zxcv.viewer.subprocess.run", return_value=completed()) as run:
            show_content(config, Audio("https://example.com/a"))
        run.assert_called_once_with(["player", "https://example.com/a"], check=False)

    def test_text_written_to_temporary_file(self, config: Config, monkeypatch) -> None:
        """Test that text is written to a file that exists while the viewer runs."""
        monkeypatch.setenv("PAGER", "more")
        seen = {}

        def run(command, check):
            seen["command"] = command
            seen["text"] = Path(command[2]).read_text(encoding="utf-8")
            return completed()

        with patch("zxcv.viewer.subprocess.run", side_effect=run):
            show_content(config, Text(Article(title="T", body="body")))

        assert seen["command"][:2] == ["terminal", "more"]
        assert seen["text"] == "T\n\nbody"
        assert not os.path.exists(seen["command"][2])

    def test_default_pager(self, config: Config, monkeypatch) -> None:
        """Test that less is the pager when PAGER is unset."""
        monkeypatch.delenv("PAGER", raising=False)
        with patch("zxcv.viewer.subprocess.run", return_value=completed()) as run:
            show_content(config, Collection(items=[Item(url="https://example.com/")]))
        assert run.call_args.args[0][1] == "less"

    @pytest.mark.parametrize("content,program", [(Image(b"\x89PNG"), "imageviewer"), (Pdf(b"%PDF"), "pdfviewer")])
    def test_binary_written_to_temporary_file(self, config: Config, content, program: str) -> None:
        """Test that images and PDFs are saved byte for byte."""
        seen = {}

        def run(command, check):
            seen["command"] = command
            seen["data"] = Path(command[1]).read_bytes()
            return completed()

        with patch("zxcv.viewer.subprocess.run", side_effect=run):
            show_content(config, content)

        assert seen["command"][0] == program
        assert seen["data"] == content.data

    def test_pager_not_available_for_images(self, config: Config) -> None:
        """Test that %p is only valid for text."""
        config = Config(argv=ArgvConfig(image=("viewer", "%p", "%f")))
        with patch("zxcv.viewer.subprocess.run") as run:
            with pytest.raises(ViewerError, match="%p"):
                show_content(config, Image(b""))
        run.assert_not_called()

    def test_file_not_available_for_video(self, config: Config) -> None:
        """Test that %f is not valid for streamed content."""
        config = Config(argv=ArgvConfig(video=("player", "%f")))
        with patch("zxcv.viewer.subprocess.run") as run:
            with pytest.raises(ViewerError):
                show_content(config, Video("https://example.com/v"))
        run.assert_not_called()

    def test_non_zero_exit(self, config: Config) -> None:
        """Test that a failing viewer is an error."""
        with patch("zxcv.viewer.subprocess.run", return_value=completed(2)):
            with pytest.raises(ViewerError) as exc_info:
                show_content(config, Video("https://example.com/v"))
        assert exc_info.value.returncode == 2

    def test_program_not_found(self, config: Config) -> None:
        """Test that a missing program is an error."""
        with patch("zxcv.viewer.subprocess.run", side_effect=FileNotFoundError("player")):
            with pytest.raises(ViewerError) as exc_info:
                show_content(config, Audio("https://example.com/a"))
        assert isinstance(exc_info.value.original_error, FileNotFoundError)
