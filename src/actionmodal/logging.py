"""Logging configuration for actionmodal."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAMESPACE = "actionmodal"


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the actionmodal logger from a verbosity level and optional file.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        # No logging requested
        return

    # Determine log level
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose >= 1:
        level = logging.INFO
    else:
        # Only file logging requested without verbosity
        level = logging.INFO

    # Configure root logger for actionmodal namespace
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Detailed format: timestamp - module - level - message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Add stderr handler if verbose
    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    # Add file handler if log_file specified
    if log_file is not None:
        # Ensure parent directory exists
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Log startup delimiter with timestamp
    timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("=" * 60)
    logger.info(
        "actionmodal starting | %s | level=%s",
        timestamp,
        logging.getLevelName(level),
    )
    logger.info("=" * 60)
