"""Logging configuration for the ray tracer.

Library modules only create loggers with ``logging.getLogger(__name__)``;
applications call ``setup_logging`` once to attach handlers.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from whitted.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    name: str = "whitted",
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Set up logging for the ray tracer.

    Args:
        name: Logger name. The default covers every module in the package.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults
            to ``config.LOG_LEVEL``.
        log_file: Optional path of a rotating log file.

    Returns:
        The configured logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
