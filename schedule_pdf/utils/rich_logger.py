"""
Rich logging for the schedule_pdf command line.

Provides colorful console logging using the rich library.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .logger import add_file_handler, configure_logging


def create_rich_handler(console: Console = None) -> RichHandler:
    """
    Create a configured rich handler.

    Args:
        console: Console to write to (defaults to stderr)

    Returns:
        RichHandler instance
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True, log_file: Optional[str] = None) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
        log_file: Optional path of a rotating log file
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    if use_rich:
        root_logger = logging.getLogger()
        root_logger.setLevel(numeric_level)
        root_logger.handlers.clear()
        root_logger.addHandler(create_rich_handler())
        if log_file:
            add_file_handler(root_logger, log_file, level)
    else:
        configure_logging(level, log_file=log_file)

    logging.getLogger(__name__).debug(f"Logging initialized at {level.upper()} level (rich={use_rich})")
