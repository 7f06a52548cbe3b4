"""Tests for logging setup helpers."""

import logging

import pytest
from rich.logging import RichHandler

from schedule_pdf.utils import configure_logging, get_logger, setup_logging


class TestLogging:
    """Root logger configuration."""

    def test_get_logger(self):
        assert get_logger("schedule_pdf.engine").name == "schedule_pdf.engine"
        with pytest.raises(ValueError):
            get_logger("")

    def test_configure_logging_with_file(self, tmp_path):
        """Console plus rotating file handler; records reach the file."""
        log_file = tmp_path / "logs" / "export.log"
        configure_logging("DEBUG", log_file=str(log_file))

        get_logger("schedule_pdf.test").debug("paginated 3 rows")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert len(logging.getLogger().handlers) == 2
        assert "paginated 3 rows" in log_file.read_text(encoding="utf-8")

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            configure_logging("LOUD")
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_setup_logging_rich(self):
        """The CLI installs a single RichHandler on the root logger."""
        setup_logging("WARNING")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)

    def test_setup_logging_plain(self):
        setup_logging("INFO", use_rich=False)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RichHandler)

    def test_setup_logging_with_file(self, tmp_path):
        """Rich console output plus a rotating log file."""
        log_file = tmp_path / "export.log"
        setup_logging("INFO", log_file=str(log_file))

        get_logger("schedule_pdf.test").info("exported 2 pages")
        get_logger("schedule_pdf.test").debug("not written")
        for handler in logging.getLogger().handlers:
            handler.flush()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert isinstance(handlers[0], RichHandler)
        text = log_file.read_text(encoding="utf-8")
        assert "exported 2 pages" in text
        assert "not written" not in text
