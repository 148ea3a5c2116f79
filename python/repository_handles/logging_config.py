"""Logging configuration for repository handles."""

import logging
import os
import sys
from typing import Union


def parse_level(level: str) -> Union[int, str]:
    """Normalize a log level from the environment.

    Numeric strings are converted to ``int`` so ``setLevel`` accepts them,
    anything else is upper-cased and handed to ``logging`` as a level name.
    """
    level = level.strip()
    return int(level) if level.isdigit() else level.upper()


def get_logger(name: str = "repository_handles") -> logging.Logger:
    """Get a configured logger for the package.

    The logger uses REPOSITORY_HANDLES_LOG_LEVEL (or LOG_LEVEL) to determine the
    log level. If not set, defaults to ERROR level, which effectively disables
    most package logging.

    Returns:
        Configured logger instance for the package.
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = os.getenv(
            "REPOSITORY_HANDLES_LOG_LEVEL", os.getenv("LOG_LEVEL", "ERROR")
        )

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            "[%(levelname)s] %(name)s - %(filename)s:%(lineno)d: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        logger.setLevel(parse_level(level))

        # Prevent propagation to avoid duplicate logs
        logger.propagate = False

    return logger


# Package logger instance
logger = get_logger()
