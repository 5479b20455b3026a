"""
utils/logger.py
---------------
Logging setup shared by every module: `get_logger(__name__)`.
Records go to stdout at the level named by LOG_LEVEL.
"""

import logging
import sys

from config import LOG_LEVEL

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(
    logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", "%Y-%m-%d %H:%M:%S")
)


def get_logger(name: str) -> logging.Logger:
    """Return the logger `name`, attaching the stdout handler to the root logger on first use."""
    root = logging.getLogger()
    if _handler not in root.handlers:
        root.addHandler(_handler)
        root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return logging.getLogger(name)
