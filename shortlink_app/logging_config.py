"""
Logging setup shared by the app and the tests.
"""

import logging
from typing import Optional

from shortlink_app.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once. Later calls only adjust the level."""
    global _configured

    level = (level or settings.log_level).upper()
    if not _configured:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _configured = True
    logging.getLogger().setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
