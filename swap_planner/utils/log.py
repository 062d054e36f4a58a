"""
Logging setup for processes embedding the planner.
The library itself only logs through module/class loggers.
"""

import logging
from typing import Optional

from ..config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure basic logging from LOG_LEVEL (or the explicit level given).
    """
    log_level = (level or get_settings().LOG_LEVEL).upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
