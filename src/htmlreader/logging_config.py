"""Logging setup for htmlreader."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``htmlreader`` logger hierarchy.

    Console output goes to stderr so extracted text written to stdout is
    never interleaved with log lines.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging output
        format_string: Optional custom format string for log messages
        force: If True, reconfigure even if handlers exist

    Returns:
        The configured ``htmlreader`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    logger = logging.getLogger("htmlreader")
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if log_file:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

        for handler in handlers:
            handler.setLevel(numeric_level)
            handler.setFormatter(formatter)
            logger.addHandler(handler)

    # Keep records out of the root logger to avoid duplicates
    logger.propagate = False

    return logger
