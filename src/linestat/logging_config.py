"""
Logging configuration for linestat.

Diagnostics go to stderr through a rich handler so they never mix with the
report written to stdout.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .exceptions import LogFileError

LOGGER_NAME = "linestat"


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the linestat logger.

    Args:
        debug: Enable DEBUG level logging (per-line diagnostics)
        log_file: Optional file path to append logs to

    Returns:
        Configured logger instance for linestat

    Raises:
        LogFileError: If the log file cannot be opened; existing handlers
            are left in place
    """
    level = logging.DEBUG if debug else logging.WARNING

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            markup=False,
            show_time=debug,
            show_path=debug,
        )
    ]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a")
        except OSError as e:
            raise LogFileError(log_file, e.strerror or str(e))
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logger = logging.getLogger(LOGGER_NAME)
    # Repeated calls (one per CLI invocation) replace rather than stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'linestat.scanning.scanner').
              If None, returns the root linestat logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
