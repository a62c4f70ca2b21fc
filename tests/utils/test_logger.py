"""
Tests for logging setup.
"""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from office_codec.utils.logger import PACKAGE_LOGGER, get_logger, setup_logging


class TestLogger:
    """Test cases for logger helpers."""

    def test_get_logger(self):
        logger = get_logger("office_codec.parser")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "office_codec.parser"

    def test_get_logger_invalid_name(self):
        with pytest.raises(ValueError):
            get_logger("")

    def test_setup_logging_installs_rich_handler(self):
        """Test a single rich handler is installed on the package logger."""
        setup_logging("DEBUG")
        logger = setup_logging("INFO")

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_module_records_reach_console(self):
        """Test records from library modules go through the package handler."""
        buffer = io.StringIO()
        setup_logging("DEBUG", console=Console(file=buffer, width=200))

        logging.getLogger("office_codec.parser.xlsx_parser").debug("decoded sheet")

        assert "decoded sheet" in buffer.getvalue()

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
