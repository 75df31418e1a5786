#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging configuration."""

import logging

import pytest

from bvmarkup.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestResolveLogLevel:
    """Tests for resolve_log_level."""

    @pytest.mark.parametrize(
        "value, expected",
        [("debug", logging.DEBUG), ("INFO", logging.INFO), (logging.ERROR, logging.ERROR), ("nonsense", logging.WARNING)],
    )
    def test_levels(self, value, expected):
        """Test names, numbers and unknown values."""
        assert resolve_log_level(value) == expected


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_replaces_handlers(self):
        """Test that repeated calls do not stack handlers."""
        configure_logging("INFO")
        package_logger = configure_logging("DEBUG")

        assert package_logger.name == PACKAGE_LOGGER_NAME
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_root_untouched(self):
        """Test that the root logger keeps its handlers."""
        root_handlers = list(logging.getLogger().handlers)
        configure_logging("INFO")
        assert logging.getLogger().handlers == root_handlers

    def test_log_file(self, tmp_path):
        """Test teeing output to a file."""
        log_file = tmp_path / "run.log"

        package_logger = configure_logging("INFO", log_file=str(log_file), trace_mode=True)
        logging.getLogger("bvmarkup.transforms").info("hello from a child logger")
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "hello from a child logger" in text
        assert "[bvmarkup.transforms]" in text

    def test_unwritable_log_file(self, tmp_path):
        """Test that a bad log path keeps console logging."""
        package_logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "run.log"))
        assert len(package_logger.handlers) == 1
