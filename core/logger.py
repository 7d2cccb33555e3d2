"""
Logging setup shared by the reader, exporters and command line.
Each named logger gets a single stdout handler in the pipe-separated format.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[str] = None) -> str:
    """Pick the level name from the argument, then LOG_LEVEL, falling back to INFO."""
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    if name not in logging.getLevelNamesMapping():
        return "INFO"
    return name


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get the logger for a module, attaching the stdout handler on first use.

    Args:
        name: Logger name (usually __name__)
        level: Level name; unknown names fall back to INFO

    Returns:
        Logger writing to stdout
    """
    log_level = resolve_level(level)

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
