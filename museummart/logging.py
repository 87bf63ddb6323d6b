"""
Centralized logging configuration for MuseumMart.

Usage:
    from museummart.logging import get_logger
    logger = get_logger(__name__)
"""

import logging
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the root logger, once."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Shorten an opaque, caller-supplied id before it is written to a log.

    Newlines and carriage returns are escaped so a crafted session id
    cannot forge log entries (CWE-117).
    """
    if not id_value:
        return "N/A"
    safe_value = str(id_value).replace("\n", "\\n").replace("\r", "\\r")
    return safe_value[:8]


__all__ = ["LOG_FORMAT", "configure_logging", "get_logger", "sanitize_id_for_logging"]
