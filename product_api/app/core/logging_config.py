"""
Logging setup for the Product API.

Everything logs through the root logger.  ``setup_logging`` reads the
level and optional log file from ``Settings`` and installs the
handlers once per process.
"""

import logging
from typing import List

from .config import Settings, settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: Settings = settings) -> None:
    """Attach console (and, with ``log_file`` set, file) handlers to the root logger.

    Does nothing if the root logger already has handlers, e.g. when
    ``create_app`` runs again in the same process.  Unknown level names
    fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )
