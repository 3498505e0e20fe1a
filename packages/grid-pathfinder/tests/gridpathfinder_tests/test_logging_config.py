"""Tests for logging configuration."""

import logging
from datetime import UTC, datetime

from gridpathfinder.logging_config import (
    configure_logging,
    log_file_path,
    logger,
    running_under_pytest,
    set_log_level,
)


class TestSetLogLevel:
    """Test set_log_level."""

    def test_none_disables_logger(self, monkeypatch):
        """Test that NONE silences the package logger and a level re-enables it."""
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        original_level = logger.level
        try:
            set_log_level("NONE")
            assert logger.disabled

            set_log_level("debug")
            assert not logger.disabled
            assert logger.level == logging.DEBUG
        finally:
            logger.disabled = False
            logger.setLevel(original_level)

    def test_level_applies_to_root_handlers(self, monkeypatch):
        """Test that root handlers follow the requested level."""
        handler = logging.NullHandler()
        monkeypatch.setattr(logging.getLogger(), "handlers", [handler])
        original_level = logger.level
        try:
            set_log_level("ERROR")
            assert handler.level == logging.ERROR
        finally:
            logger.setLevel(original_level)


class TestConfigureLogging:
    """Test installing the root handlers."""

    def test_detects_pytest(self):
        """Test that the test run is recognized."""
        assert running_under_pytest()

    def test_log_file_path(self, tmp_path):
        """Test the timestamped log file name."""
        now = datetime(2024, 5, 6, 7, 8, 9, tzinfo=UTC)
        assert log_file_path(tmp_path, now) == tmp_path / "pathfinder_20240506_070809.log"

    def test_file_handler_installed(self, monkeypatch, tmp_path):
        """Test that records are written to the log file."""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])

        log_file = configure_logging(tmp_path / "logs")
        try:
            assert log_file is not None
            assert log_file.parent == tmp_path / "logs"
            root.handlers[0].setLevel(logging.WARNING)
            root.handlers[0].handle(
                logging.LogRecord("test", logging.WARNING, __file__, 1, "hello", None, None),
            )
            root.handlers[0].flush()
            assert "hello" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in root.handlers:
                handler.close()

    def test_falls_back_to_stderr(self, monkeypatch, tmp_path):
        """Test that an unusable log directory falls back to stderr."""
        monkeypatch.setattr(logging.getLogger(), "handlers", [])
        blocker = tmp_path / "logs"
        blocker.write_text("not a directory")

        assert configure_logging(blocker) is None
        assert isinstance(logging.getLogger().handlers[0], logging.StreamHandler)

    def test_stderr_only_without_file(self, monkeypatch, tmp_path):
        """Test that no file is created when file logging is off."""
        monkeypatch.setattr(logging.getLogger(), "handlers", [])

        assert configure_logging(tmp_path, to_file=False) is None
        assert list(tmp_path.iterdir()) == []
