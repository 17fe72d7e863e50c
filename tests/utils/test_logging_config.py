# File: tests/utils/test_logging_config.py
"""Unit tests for logging configuration."""

import logging
import os

import pytest

from roof_layout.utils.logging_config import RoofLayoutLogger, get_logger


@pytest.fixture
def restore_root_logger():
    """Put the root logger's handlers and level back after a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestRoofLayoutLogger:
    """Tests for RoofLayoutLogger."""

    def test_trace_level_registered(self):
        assert logging.getLevelName(RoofLayoutLogger.TRACE_LEVEL) == "TRACE"

    def test_get_logger_adds_trace(self):
        logger = get_logger("roof_layout.tests")
        assert hasattr(logger, "trace")

    def test_get_logger_sets_level(self):
        logger = get_logger("roof_layout.tests.level", logging.WARNING)
        assert logger.level == logging.WARNING

    def test_trace_records_emitted_when_enabled(self, caplog):
        logger = get_logger("roof_layout.tests.trace")
        with caplog.at_level(RoofLayoutLogger.TRACE_LEVEL, logger="roof_layout.tests.trace"):
            logger.trace("9 tiles: spacing 44mm outside tolerance")
        assert "spacing 44mm" in caplog.text
        assert caplog.records[0].levelname == "TRACE"

    def test_configure_console_only(self, restore_root_logger):
        log_file = RoofLayoutLogger.configure(debug_mode=True, log_dir=None)
        assert log_file is None
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    def test_configure_with_log_file(self, tmp_path, restore_root_logger):
        log_file = RoofLayoutLogger.configure(log_dir=str(tmp_path))
        assert log_file is not None
        assert os.path.dirname(log_file) == str(tmp_path)
        assert os.path.basename(log_file).startswith("roof_layout_")
        assert restore_root_logger.level == logging.INFO
        assert len(restore_root_logger.handlers) == 2
