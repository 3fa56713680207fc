#!/usr/bin/env python3
"""
Logging configuration for pacshim.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(log_level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Set up logging configuration using loguru.

    Native command output is never routed through the logger; only pacshim's
    own diagnostics are.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of an additional rotating log file
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<level>pacshim: {level: <8}</level> | <level>{message}</level>",
        level=log_level,
        colorize=None,
    )

    if log_file is not None:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )

    logger.debug(f"Logging initialized at level {log_level}")
