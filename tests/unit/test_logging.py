"""Unit tests for logging setup."""

import io
import json
import logging

import pytest
import structlog

from gendex.core.config import Config
from gendex.core.logging import bind_context, clear_context, get_logger, setup_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo global logging configuration after each test."""
    yield
    clear_context()
    structlog.reset_defaults()
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(logging.WARNING)


class TestSetupLogging:
    """Tests for where and how log events are rendered."""

    def test_json_lines_when_captured(self):
        """Test a non-TTY stream receives one JSON object per event."""
        stream = io.StringIO()
        setup_logging(Config(), stream=stream)

        bind_context(run_id="abc123")
        get_logger("gendex.test").info("Resolved platform", platform="android-33")

        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "Resolved platform"
        assert record["platform"] == "android-33"
        assert record["run_id"] == "abc123"
        assert record["level"] == "info"
        assert record["logger"] == "gendex.test"
        assert "timestamp" in record

    def test_level_filtering(self):
        stream = io.StringIO()
        setup_logging(Config(log_level="WARNING"), stream=stream)

        logger = get_logger("gendex.test.filter")
        logger.info("hidden")
        logger.warning("shown")

        lines = stream.getvalue().strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["shown"]

    def test_debug_level(self):
        stream = io.StringIO()
        setup_logging(Config(log_level="DEBUG"), stream=stream)
        get_logger("gendex.test.debug").debug("Workspace acquired")
        assert "Workspace acquired" in stream.getvalue()

    def test_stdout_stays_clean(self, capsys):
        """Test log output goes to stderr so stdout can carry tool output."""
        setup_logging(Config())
        get_logger("gendex.test.stderr").info("Starting gendex pipeline")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Starting gendex pipeline" in captured.err

    def test_reconfigure_replaces_handler(self):
        first, second = io.StringIO(), io.StringIO()
        setup_logging(Config(), stream=first)
        setup_logging(Config(), stream=second)
        assert len(logging.getLogger().handlers) == 1
