"""Logging setup for the merge-config CLI and host applications."""

import logging
import sys
from typing import Optional

FORMATS = {
    # Development - human readable
    "standard": "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    # Production - one JSON object per line
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
}


def setup_logging(
    level: str = "WARNING",
    format_style: str = "standard",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure root logging.

    The library itself never calls this; it is meant for the CLI and for
    host programs that want to see which files were resolved and merged.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_style: 'standard' or 'json'
        log_file: Optional file path to also write logs to

    Returns:
        Root logger

    Raises:
        ValueError: If level or format_style is unknown
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    if format_style not in FORMATS:
        available = ", ".join(FORMATS)
        raise ValueError(f"Unknown log format: '{format_style}'. Available: {available}")

    # stderr keeps stdout clean for command output
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric_level,
        format=FORMATS[format_style],
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )

    return logging.getLogger()


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Usage:
        from merge_config.utils.logging import get_logger
        logger = get_logger(__name__)
        logger.debug("Loaded config file")
    """
    return logging.getLogger(name)
