"""
Application logging configuration.

All logs go to the console (stdout); nothing is written to disk.
uvicorn is started with log_config=None, so its loggers end up here too.
"""

import logging
import sys
from typing import Optional

from backend.core.config import get_settings


# Format for log messages
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure application logging at startup.

    **Input (request):**
        - log_level: Level name (DEBUG, INFO, WARNING, ERROR). Default from settings LOG_LEVEL (default "INFO").

    **Output (response):** None.

    **What it does:** Replaces the root logger's handlers with a single stdout StreamHandler.
    """
    settings = get_settings()
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates on reload
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
