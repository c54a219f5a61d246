# SPDX-License-Identifier: MIT

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """
    Configure loguru for the application.

    Console output goes to stderr so it never mixes with rendered reports.
    The optional log file always records debug output.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, colorize=True)

    if log_file is not None:
        logger.add(
            Path(log_file).expanduser(),
            level="DEBUG",
            format=LOG_FORMAT,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )

    logger.debug(f"Logging configured: level={level}, log_file={log_file}")
