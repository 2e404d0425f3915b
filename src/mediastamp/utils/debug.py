"""Universal debug/logging utility for mediastamp.

Provides setup_logger(), called once by the CLI entry point, and debug() for
trace messages controlled by the MEDIASTAMP_DEBUG environment variable.
Logs to stderr; every module logger lives under the ``mediastamp`` logger
configured here.
"""

import logging
import os
from typing import Optional

DEBUG_ON = os.getenv("MEDIASTAMP_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger(level: Optional[int] = None) -> logging.Logger:
    """Configure and return the package logger.

    Args:
        level: Explicit level; defaults to DEBUG when MEDIASTAMP_DEBUG=1,
            WARNING otherwise so console output is not duplicated.
    """
    global _logger
    logger = logging.getLogger("mediastamp")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if level is None:
        level = logging.DEBUG if DEBUG_ON else logging.WARNING
    logger.setLevel(level)
    _logger = logger
    return logger


def _get() -> logging.Logger:
    return _logger if _logger is not None else setup_logger()


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if DEBUG_ON:
        _get().debug(msg)

