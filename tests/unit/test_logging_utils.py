#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for logging configuration."""

import logging

import pytest

from zxcv.logging_utils import CommandFormatter, configure_logging, resolve_level

pytestmark = pytest.mark.usefixtures("isolated_logging")


def make_record(level: int, msg: str) -> logging.LogRecord:
    return logging.makeLogRecord({"msg": msg, "levelno": level, "levelname": logging.getLevelName(level)})


@pytest.mark.unit
class TestCommandFormatter:
    """Tests for the stderr message format."""

    def test_info_has_program_name(self) -> None:
        """Test that informational messages only carry the program name."""
        assert CommandFormatter().format(make_record(logging.INFO, "fetching")) == "zxcv: fetching"

    @pytest.mark.parametrize(
        "level,expected",
        [
            (logging.WARNING, "zxcv: warning: oops"),
            (logging.ERROR, "zxcv: error: oops"),
        ],
    )
    def test_problems_have_level(self, level: int, expected: str) -> None:
        """Test that warnings and errors spell out their level."""
        assert CommandFormatter().format(make_record(level, "oops")) == expected


@pytest.mark.unit
class TestResolveLevel:
    """Tests for level name resolution."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("debug", logging.DEBUG),
            ("ERROR", logging.ERROR),
            (logging.INFO, logging.INFO),
            ("chatty", logging.WARNING),
        ],
    )
    def test_resolve(self, level, expected: int) -> None:
        """Test names, numbers and unknown names."""
        assert resolve_level(level) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_package_logger_only(self) -> None:
        """Test that the zxcv logger is configured and the root logger is left alone."""
        root_handlers = logging.getLogger().handlers[:]
        logger = configure_logging("debug")
        assert logger.name == "zxcv"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, CommandFormatter)
        assert logging.getLogger().handlers == root_handlers

    def test_reconfiguring_replaces_handlers(self) -> None:
        """Test that a second call does not stack handlers."""
        configure_logging("INFO")
        logger = configure_logging("ERROR")
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_trace_logs_http_client(self) -> None:
        """Test that trace mode logs everything, including the HTTP stack."""
        logger = configure_logging("ERROR", trace=True)
        assert logger.level == logging.DEBUG
        assert "%(relativeCreated)" in logger.handlers[0].formatter._fmt
        httpx_logger = logging.getLogger("httpx")
        assert httpx_logger.level == logging.DEBUG
        assert logger.handlers[0] in httpx_logger.handlers

    def test_leaving_trace_detaches_http_client(self) -> None:
        """Test that reconfiguring without trace removes the HTTP handlers."""
        configure_logging("INFO", trace=True)
        configure_logging("INFO")
        httpx_logger = logging.getLogger("httpx")
        assert not [handler for handler in httpx_logger.handlers if handler.get_name() == "zxcv-cli"]
        assert httpx_logger.level == logging.NOTSET

    def test_log_file(self, tmp_path) -> None:
        """Test that messages are also written to the log file."""
        path = tmp_path / "zxcv.log"
        logger = configure_logging(logging.INFO, log_file=str(path))
        assert len(logger.handlers) == 2
        logging.getLogger("zxcv.test").info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "zxcv: hello" in path.read_text(encoding="utf-8")

    def test_unopenable_log_file(self, tmp_path) -> None:
        """Test that a log file that cannot be opened only costs the file handler."""
        logger = configure_logging(logging.INFO, log_file=str(tmp_path / "missing" / "zxcv.log"))
        assert len(logger.handlers) == 1
