# tests/test_logging_conf.py
"""
Logging Configuration Tests - Unit Tests for setup_logging

This module contains unit tests for the logging setup helpers: stdout and
rotating file handlers, level names, and configuration from Settings.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- denomkit.shared.logging_conf (setup_logging, setup_logging_from_settings)
- pytest (testing framework)
"""
import logging
from logging.handlers import RotatingFileHandler
from types import SimpleNamespace

import pytest  # Testing framework for writing and running tests

from denomkit.shared.logging_conf import LOG_FORMAT, setup_logging, setup_logging_from_settings


@pytest.fixture
def restore_root_logger():
    """Root logger; handlers installed by setup_logging are removed afterwards."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler.formatter is not None and handler.formatter._fmt == LOG_FORMAT:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestSetupLogging:
    def test_stdout_only(self, restore_root_logger):
        setup_logging(level=logging.DEBUG, stdout=True)
        root = restore_root_logger
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], RotatingFileHandler)

    def test_log_dir_creates_rotating_file(self, restore_root_logger, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logging(level="warning", log_dir=log_dir, stdout=False, max_bytes=1024, backup_count=2)
        root = restore_root_logger
        assert root.level == logging.WARNING
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 1024
        assert file_handlers[0].backupCount == 2
        logging.getLogger("denomkit.test").warning("written to file")
        file_handlers[0].flush()
        content = (log_dir / "denomkit.log").read_text(encoding="utf-8")
        assert "WARNING denomkit.test :: written to file" in content

    def test_log_file_path(self, restore_root_logger, tmp_path):
        log_file = tmp_path / "nested" / "engine.log"
        setup_logging(log_file=log_file, stdout=False)
        assert log_file.parent.is_dir()
        assert any(isinstance(h, RotatingFileHandler) for h in restore_root_logger.handlers)

    def test_stdout_env_switch(self, restore_root_logger, monkeypatch):
        monkeypatch.setenv("DENOMKIT_LOG_STDOUT", "false")
        setup_logging()
        # nothing requested, falls back to a single stdout handler
        assert len(restore_root_logger.handlers) == 1

    def test_from_settings(self, restore_root_logger, tmp_path):
        fake = SimpleNamespace(
            log_level="ERROR", log_file=None, log_dir=str(tmp_path),
            log_max_bytes=2048, log_backup_count=1, log_stdout=True,
        )
        setup_logging_from_settings(fake)
        root = restore_root_logger
        assert root.level == logging.ERROR
        assert len(root.handlers) == 2
        assert (tmp_path / "denomkit.log").exists()

    def test_log_dir_takes_precedence_over_log_file(self, restore_root_logger, tmp_path):
        setup_logging(log_file=tmp_path / "ignored.log", log_dir=tmp_path / "logs", stdout=False)
        file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].baseFilename == str(tmp_path / "logs" / "denomkit.log")
        assert not (tmp_path / "ignored.log").exists()

    def test_repeated_setup_replaces_handlers(self, restore_root_logger):
        setup_logging(stdout=True)
        setup_logging(stdout=True)
        assert len(restore_root_logger.handlers) == 1

    def test_unknown_level_name(self, restore_root_logger):
        with pytest.raises(ValueError, match="chatty"):
            setup_logging(level="chatty", stdout=True)
