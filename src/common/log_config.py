"""
Logging Configuration

Console logging for merge runs goes to stderr so stdout stays free for
the run summary. A run can additionally be mirrored to a log file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
FILE_LOG_FORMAT = "%(asctime)s " + LOG_FORMAT


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level (verbose wins)."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str | Path] = None,
) -> logging.Logger:
    """
    Configure the ``src`` package logger.

    Args:
        verbose: If True, set level to DEBUG
        quiet: If True, set level to WARNING
        log_file: Optional path; the run is also written there (DEBUG and up)

    Returns:
        The configured package logger
    """
    level = resolve_level(verbose, quiet)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    console.setLevel(level)

    logger = logging.getLogger("src")

    # Calling twice must not stack handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level)

    return logger
