"""
Loguru setup for the piece.
"""

import sys
from typing import Optional

from loguru import logger

from easiware_piece.core.config import settings


def configure_logging(level: Optional[str] = None) -> str:
    """Route loguru output to stderr at the configured level.

    Hosts that already own the loguru sinks can skip this call.
    """
    level_name = (level or settings.LOG_LEVEL or "INFO").upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level_name,
        backtrace=False,
        diagnose=False,
    )

    return level_name
