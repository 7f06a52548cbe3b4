"""Logging utilities."""

from .logger import add_file_handler, configure_logging, get_logger
from .rich_logger import setup_logging

__all__ = ["add_file_handler", "configure_logging", "get_logger", "setup_logging"]
