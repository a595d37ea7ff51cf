"""Tests for logging setup."""

import logging

import pytest

from linestat.exceptions import LogFileError
from linestat.logging_config import LOGGER_NAME, setup_logging


class TestSetupLogging:
    def test_levels(self):
        assert setup_logging(debug=True).level == logging.DEBUG
        assert setup_logging().level == logging.WARNING

    def test_repeated_calls_do_not_stack_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_file_handler_added(self, tmp_path):
        logger = setup_logging(log_file=str(tmp_path / "linestat.log"))
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        setup_logging()

    def test_unopenable_log_file(self, tmp_path):
        before = list(setup_logging().handlers)
        with pytest.raises(LogFileError, match="Cannot open log file"):
            setup_logging(log_file=str(tmp_path / "missing" / "linestat.log"))
        assert logging.getLogger(LOGGER_NAME).handlers == before
