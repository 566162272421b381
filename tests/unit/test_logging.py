"""Unit tests for root logger configuration."""

import logging

import pytest

from finance_tracker.api.middleware.logging import JSONLogFormatter
from finance_tracker.core import logging as logging_config
from finance_tracker.core.logging import setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    installed = logging_config._handler
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging_config._handler = installed


class TestSetupLogging:
    def test_repeated_setup_keeps_one_handler(self, root_logger):
        setup_logging("INFO")
        first = logging_config._handler
        setup_logging("DEBUG")

        assert first not in root_logger.handlers
        assert root_logger.handlers.count(logging_config._handler) == 1
        assert root_logger.level == logging.DEBUG

    def test_other_handlers_are_left_alone(self, root_logger):
        other = logging.NullHandler()
        root_logger.addHandler(other)

        setup_logging("INFO")
        setup_logging("INFO")

        assert other in root_logger.handlers

    def test_json_logs_use_json_formatter(self, root_logger):
        setup_logging("WARNING", json_logs=True)

        assert isinstance(logging_config._handler.formatter, JSONLogFormatter)
        assert logging_config._handler.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, root_logger):
        setup_logging("chatty")

        assert root_logger.level == logging.INFO
